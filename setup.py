# setup.py
from setuptools import setup, find_packages

setup(
    name="cinder",
    version="0.1.0",
    packages=find_packages(include=["cinder", "cinder.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
