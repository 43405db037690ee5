#!/usr/bin/env python3
"""
Setup script for pyHMMERWS
"""

from setuptools import setup, find_packages

setup(
    name="pyhmmerws",
    version="0.1.0",
    description="Python client for the EBI HMMER web service and wwPDB validation report clashes",
    author="hmmerws Team",
    packages=find_packages(include=["hmmerws", "hmmerws.*"]),
    package_data={
        "hmmerws.tests": ["fixtures/*"],
    },
    install_requires=[
        "pyyaml>=6.0",
        "biopython>=1.79",
        "requests>=2.27.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'hmmerws=hmmerws.cli.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
