"""
Setup script for i3 Config Searcher
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="i3-config-search",
    version="0.1.0",
    description="Fuzzy search the annotated keybindings of an i3 config",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["i3_config_search", "i3_config_search.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Topic :: Desktop Environment :: Window Managers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "click>=8.0",
        "aiohttp>=3.8",
        "i3ipc>=2.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "i3-config-search=i3_config_search.cli:main",
        ],
    },
)
