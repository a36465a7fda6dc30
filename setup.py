"""
object-finder - typed access to loosely-typed nested data

This setup.py file is the build configuration for pip install.
"""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="object-finder",
        version="0.1.0",
        description="Typed accessors and coercion rules for decoded JSON and other loosely-typed nested data.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages(where="src", include=["object_finder", "object_finder.*"]),
        python_requires=">=3.10",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries",
        ],
    )
