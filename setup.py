# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from setuptools import find_packages, setup
from src.nififlow import __version__ as version

REQUIRED_PACKAGES = [
    'requests >= 2.32.4',
    'overrides >= 3.1.0',
    'validators >= 0.11.0',
]

TEST_PACKAGES = [
    'pytest',
    'responses >= 0.23.3',
]

setup(
    name="nififlow",
    python_requires=">=3.10",
    version=version,
    description="nififlow is a typed client for the NiFi flow management REST API (process groups, processors, connections).",
    keywords="nifi flow dataflow rest client process-group processor connection revision",
    license="Apache 2.0",

    packages=find_packages(where="src", exclude=("test",)),
    package_dir={"": "src"},
    install_requires=REQUIRED_PACKAGES,
    extras_require={"test": TEST_PACKAGES},
)
