"""Setup script for ron-settings"""

from setuptools import setup, find_packages

setup(
    name="ron-settings",
    version="0.1.0",
    description="Load and save application settings as RON files",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.5.0",
        "platformdirs>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
