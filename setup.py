"""
Setup script for studyhub.

studyhub turns learning-community posts, or a curated catalog of study
topics, into flashcards and multiple-choice quizzes. It uses Gemini when an
API key is configured and deterministic sample content when not.

The 'studyhub' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="studyhub",
    version="1.0.0",
    description="Flashcard, quiz and daily-summary generation for learning communities",
    author="Studyhub",
    packages=find_packages(include=["studyhub", "studyhub.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # AI
        "google-generativeai>=0.3.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "studyhub=studyhub.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning flashcards quiz education gemini",
)
