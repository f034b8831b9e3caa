from setuptools import find_packages, setup

setup(
    name="symsync",
    version="0.1.0",
    description="Reconcile a declared list of symlinks across sibling directories",
    packages=find_packages(include=["symsync", "symsync.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "symsync=symsync.cli:main",
        ],
    },
)
