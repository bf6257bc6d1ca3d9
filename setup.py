# setup.py
from setuptools import setup, find_packages

setup(
    name="doodle",
    version="0.1.0",
    description="Expression value model for the Doodle Lisp interpreter",
    packages=find_packages(include=["doodle", "doodle.*"]),
    python_requires=">=3.10",
    install_requires=["pyrsistent>=0.19"],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
