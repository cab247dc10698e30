#!/usr/bin/env python3
#
# see: https://setuptools.pypa.io/en/latest/userguide/quickstart.html

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="plotspecs",
    version="0.1.0",
    description="Build gnuplot plot-entry specifications with a fluent Python API.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=["numpy", "tomli; python_version<'3.11'"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
)
