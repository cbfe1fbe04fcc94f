"""Setup configuration for the smartctl self-test status parser."""
from setuptools import setup, find_packages

setup(
    name="smart-selftest",
    version="0.1.0",
    description="Typed extraction of live self-test status from smartctl JSON reports",
    author="Macallan Engineering",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.12.0",
            "black>=23.11.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "smart-selftest=smart_selftest.main:main",
        ],
    },
)
