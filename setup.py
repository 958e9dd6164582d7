"""Setup script for the catan-lite board generator and resource economy."""

from setuptools import setup, find_packages

with open("docs/README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="catan-lite",
    version="0.1.0",
    author="Ali Bekheet",
    description="Randomized Catan board generation and a simplified turn-based resource economy",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "pandas>=1.3.0",
        "tqdm>=4.60.0",
        "structlog>=22.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "scipy>=1.7.0",
            "black>=21.0",
            "isort>=5.0",
            "mypy>=0.900",
            "flake8>=3.8",
        ],
        "test": [
            "pytest>=7.0",
            "scipy>=1.7.0",
        ],
    },
)
