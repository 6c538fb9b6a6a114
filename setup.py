from setuptools import setup, find_packages

setup(
    name="physq",
    version="0.1.0",
    packages=find_packages(include=["physq", "physq.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description=(
        "Physical quantities tied to units of measure, with automatic unit conversion, "
        "dimensional bookkeeping and operator-based physical relationships."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)
