#!/usr/bin/env python3
"""Setup script for keyforge-deck-sheet package."""

from setuptools import setup, find_packages

setup(
    name="keyforge-deck-sheet",
    version="0.1.0",
    description="Download a KeyForge deck as a single sheet image of its cards",
    author="Deck Sheet Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",
        "Pillow>=10.0.0",
        "requests>=2.28.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "keyforge-sheet=decksheet.cli:cli",
        ],
    },
    python_requires=">=3.10",
)
