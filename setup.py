"""Setup script for geoprim."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="geoprim",
    version="0.1.0",
    description="Closest-point queries, separating-axis helpers and Jacobi principal axes for collision detection",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["geoprim", "geoprim.*", "gp_policies", "gp_policies.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
    ],
    extras_require={
        "mesh": ["trimesh>=3.10.0"],
        "dev": ["pytest>=7.0.0", "pytest-cov>=4.0.0", "trimesh>=3.10.0"],
        "all": [
            "trimesh>=3.10.0",
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
