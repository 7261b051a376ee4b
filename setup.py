from setuptools import find_packages, setup

setup(
    name="styledscan",
    version="0.1.0",
    description="Count styled.<element> and styled(<Component>) uses across a source tree",
    packages=find_packages(include=["styledscan", "styledscan.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",  # CLI
        "click>=8.0",  # Usage errors raised through typer
        "rich",  # Terminal formatting
        "pydantic>=2.0",  # Result and config models
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
        "dev": [
            "pytest>=7.0",
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "styledscan=styledscan.cli:main",
        ],
    },
)
