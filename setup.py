from setuptools import setup, find_packages

setup(
    name="switchyard",
    version="0.1.0",
    description="Command-line switch parser with typed values, aliases and clusters.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["switchyard", "switchyard.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
