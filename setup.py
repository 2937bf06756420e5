from setuptools import setup, find_packages

setup(
    name="kpsearch",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "pandas>=1.5",
        "tqdm>=4.60",
        "matplotlib>=3.5",
        "seaborn>=0.12",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'kpsearch-compare = Scripts.compare_solvers:main',
            'kpsearch-generate = Scripts.generate_data:main',
        ],
    }
)
