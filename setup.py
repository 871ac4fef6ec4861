from setuptools import setup, find_packages

setup(
    name="connect4board",
    version="0.1.0",
    description="Connect Four board state, move legality and win detection",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
