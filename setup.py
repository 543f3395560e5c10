"""Build script for diffik.

Subpackages follow the namespace layout (not every directory has an
__init__.py), so packages are collected with find_namespace_packages.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="diffik",
    version="0.1.0",
    description="Fixed-size vector algebra and a damped least squares IK solver",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["diffik", "diffik.*"]),
    install_requires=[
        "numpy>=1.24",
        "scipy>=1.10",
    ],
    extras_require={
        "examples": ["fire"],
        "test": ["pytest>=7"],
    },
)
