from setuptools import find_packages, setup

setup(
    name="rental-populate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    install_requires=[
        "azure-core>=1.26.0",
        "azure-cosmos>=4.5.0",
        "loguru>=0.7.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
