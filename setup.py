#!/usr/bin/env python3
"""
Setup script for tube-deck - PowerPoint decks from YouTube video transcripts
"""

from setuptools import setup, find_packages

DEV_TOOLS = ("pytest", "black", "flake8", "mypy")


# Read the README file for long description
def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()


# Read runtime requirements from requirements.txt
def read_requirements():
    requirements = []
    with open("requirements.txt", "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if line and not line.startswith("#") and not line.startswith(DEV_TOOLS):
                requirements.append(line)
    return requirements


setup(
    name="tube-deck",
    version="1.0.0",
    description="Generate PowerPoint slide decks from YouTube video transcripts",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Video",
        "Topic :: Office/Business :: Office Suites",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.7.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "tube-deck=tubedeck.cli:main",
            "tdeck=tubedeck.cli:main",  # shorter alias
        ],
    },
    keywords="youtube, transcript, subtitles, powerpoint, pptx, slides, openai, gpt",
)
