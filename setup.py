from setuptools import find_packages, setup

setup(
    name="mdlinks",
    version="0.3.0",
    description="Keep cross-references in markdown document trees valid and canonical",
    author="William Wieselquist",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "markdown-it-py>=3.0",  # Markdown link extraction
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI; 0.26+ vendors click, breaking click.get_current_context()
        "click",  # CLI (imported directly)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for CLI
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlinks=mdlinks.cli:main",
        ],
    },
)
