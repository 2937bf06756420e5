# kpsearch/__init__.py
# -*- coding: utf-8 -*-

'''
Search and optimization engines for the 0/1 knapsack problem.
'''

__version__ = "0.1.0"
