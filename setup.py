from setuptools import setup, find_packages

setup(
    name="letterpool",
    version="0.1.0",
    description="letterpool — suggest dictionary words that fit a pool of letters",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyQt5",
        "pyspellchecker",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "letterpool=letterpool.main:main",
        ],
    },
)
