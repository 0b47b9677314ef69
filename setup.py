# -*- coding: utf-8 -
import os
from setuptools import setup, find_packages


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="googlecpi",
    version=read("googlecpi/version.txt").strip(),
    description="Cloud properties of the Google Cloud Provider Interface",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
    ],
    keywords="BOSH, CPI, Google Compute Engine",
    long_description=read("README.rst"),
    packages=find_packages(),
    python_requires=">=3.8",
    install_requires=[
        "jsonschema>=4.0.0",
    ],
    extras_require={
        "test": ["pytest", "ddt"],
    },
    package_data={"googlecpi": ["version.txt"]},
    include_package_data=True,
)
