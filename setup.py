from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="Rewrite library symbol links in book chapters to versioned documentation URLs",
    packages=find_packages(include=["doclinks", "doclinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
