#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="import-canonicalizer",
    version="0.1.0",
    packages=["import_canonicalizer"],
    python_requires=">=3.11",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "icanon = import_canonicalizer.cli:main",
        ],
    },
    author="",
    description="Command-line tool to merge, split and sort the leading import block of Python files",
    license="MIT",
)
