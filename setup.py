# setup.py
from setuptools import setup, find_packages

setup(
    name="game_maths",
    version="0.1.0",
    description="Vector3D / Matrix3D value types for game and graphics code",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["game-maths=game_maths.__main__:main"],
    },
)
