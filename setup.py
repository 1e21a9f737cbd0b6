import os

from setuptools import find_packages, setup

setup(
    name="fvalidator",
    version="0.1.0",
    packages=find_packages(include=["fvalidator", "fvalidator.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic-core>=2.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="fvalidator Contributors",
    description="Functional data validation: compose small validators into schemas",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
