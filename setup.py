from setuptools import setup, find_packages

setup(
    name="alignmodels",
    version="0.1.0",
    description="Score and cost models for sequence alignment",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["alignmodels", "alignmodels.*"]),

    install_requires=[
        "numpy>=2.0"
    ],
    extras_require={
        "plot": [
            "matplotlib",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
        "all": [
            "matplotlib",
            "pytest>=7.0",
            "pytest-cov",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.11',
)
