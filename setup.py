from setuptools import find_packages, setup

setup(
    name="cluwaste",
    version="0.1.0",
    description="Measure disk space wasted in partially filled final clusters",
    packages=find_packages(include=["cluwaste", "cluwaste.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework; 0.26+ vendors click instead of using the click package
        "click",  # Usage error handling under Typer
        "pydantic>=2",  # Config and output models
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
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
            "cluwaste=cluwaste.cli:main",
            "cluwaste-config=cluwaste.cli:config_main",
        ],
    },
)
