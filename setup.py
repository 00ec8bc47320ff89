#!/usr/bin/env python
# noqa
# pylint: skip-file
"""The setup script."""
from setuptools import setup

with open("requirements.txt", "r") as filein:
    requirements = [line for line in filein.readlines() if line.strip()]

with open("requirements-dev.txt", "r") as filein:
    test_requirements = [line for line in filein.readlines() if line.strip()]

with open("version.txt", "r") as filein:
    version = filein.read().strip()

setup_requirements: list = ["setuptools >= 41.0.0", "wheel >= 0.26"]

setup(
    author="eterna2",
    author_email="eterna2@hotmail.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
    ],
    description="Maybe and Outcome containers for explicit absent values and errors.",
    include_package_data=True,
    package_data={"": ["version.txt", "requirements.txt", "test.py"]},
    extras_require={"test": test_requirements},
    keywords="maybe option result outcome monad",
    name="e2fyi-containers",
    packages=["e2fyi.containers"],
    setup_requires=setup_requirements,
    python_requires=">=3.7",
    install_requires=requirements,
    test_suite="e2fyi",
    tests_require=test_requirements,
    version=version,
    zip_safe=False,
)
