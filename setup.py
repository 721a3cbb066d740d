# setup.py
from setuptools import setup, find_packages

setup(
    name="cullkit",
    version="1.0.0",
    description="Frustum culling geometry: AABB, spheres, half-spaces and view frusta",
    packages=find_packages(include=["cullkit", "cullkit.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
