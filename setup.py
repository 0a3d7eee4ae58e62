#!/usr/bin/python3
# Setup file for gitconf
# Copyright (C) 2026 The gitconf authors
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

from setuptools import setup

fuzzing_require = ["atheris"]


setup(
    name="gitconf",
    version="0.1.0",
    description="Parser for git configuration files",
    license="Apache-2.0 OR GPL-2.0-or-later",
    packages=["gitconf"],
    package_data={"": ["py.typed"]},
    python_requires=">=3.10",
    extras_require={
        "fuzzing": fuzzing_require,
        "dev": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Topic :: Software Development :: Version Control",
    ],
)
