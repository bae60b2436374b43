from setuptools import setup, find_packages
import os
import re

HERE = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(HERE, "src", "lanelu", "__about__.py")) as f:
    VERSION = re.search(r'^__version__ = "(.+)"$', f.read(), re.MULTILINE).group(1)


setup(
    name="lanelu",
    version=VERSION,
    description="Lane-partitioned LU factorization without pivoting",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pydantic>=2",
    ],
    extras_require={
        "cupy": ["cupy"],
        "test": ["pytest"],
        "examples": ["matplotlib"],
    },
)
