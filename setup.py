# setup.py
from setuptools import setup, find_packages

setup(
    name="banglisp",
    version="0.3.0",
    description="A small Lisp interpreter with lexical closures and packages",
    packages=find_packages(include=["banglisp", "banglisp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["banglisp=banglisp.__main__:main"],
    },
    zip_safe=False,
)
