#!/usr/bin/env python3
"""
Setup script for the Cursor Explorer package
"""

from setuptools import setup, find_packages
from pathlib import Path

def get_version():
    """Extract version from __init__.py"""
    init_file = Path(__file__).parent / "cursor_explorer" / "__init__.py"
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

def get_long_description():
    """Read README.md for package description"""
    readme_file = Path(__file__).parent / "README.md"
    if readme_file.exists():
        with open(readme_file, "r", encoding="utf-8") as f:
            return f.read()
    return "Cursor Explorer - interactive terminal file browser"

# Define dependency groups
INSTALL_REQUIRES = [
    "jsonschema>=4.0.0",
    "tqdm>=4.60.0",
    "windows-curses>=2.3.0; sys_platform == 'win32'",
]

TEST_REQUIRES = [
    "pytest>=7.0.0",
    "pytest-cov>=3.0.0",
]

LINT_REQUIRES = [
    "black>=22.0.0",
    "flake8>=4.0.0",
    "mypy>=0.950",
    "isort>=5.10.0",
]

setup(
    name="cursor-explorer",
    version=get_version(),
    author="Cursor Explorer Team",
    description="Interactive terminal file browser with open, delete and copy actions",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",

    # Package configuration
    packages=find_packages(exclude=["tests*", "docs*", "*.tests", "*.tests.*"]),
    include_package_data=True,
    zip_safe=False,

    # Python version requirement
    python_requires=">=3.9",

    # Core dependencies
    install_requires=INSTALL_REQUIRES,

    extras_require={
        "test": TEST_REQUIRES,
        "lint": LINT_REQUIRES,
        "dev": TEST_REQUIRES + LINT_REQUIRES,
    },

    # Entry points for CLI
    entry_points={
        "console_scripts": [
            "cursor-explorer=cursor_explorer.__main__:main",
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console :: Curses",
    ],

    keywords="file-browser terminal curses cli filesystem",
    license="MIT",
)
