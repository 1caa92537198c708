from setuptools import setup, find_packages

setup(
    name="hunkfold",
    version="0.1.0",
    packages=find_packages(include=["hunkfold", "hunkfold.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
