from setuptools import setup, find_packages
from pathlib import Path

# Read the README file for the long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="booklib",
    version="0.1.0",
    description="A single-page book library manager",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["booklib", "booklib.*"]),
    entry_points={
        "console_scripts": [
            "booklib=booklib.cli:app"
        ],
    },
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
        "streamlit>=1.29.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
    ],
    python_requires='>=3.9',
)
