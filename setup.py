# setup.py
from setuptools import setup, find_packages

setup(
    name="slisp",
    version="0.1.0",
    description="Parser and evaluator for a small Lisp-like expression language",
    packages=find_packages(include=["slisp", "slisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
