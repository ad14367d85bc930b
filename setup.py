#!/usr/bin/env python

import sys
from setuptools import setup, find_packages

if sys.version_info.major < 3 or (
        sys.version_info.major == 3 and sys.version_info.minor < 8
):
    sys.exit("Python 3.8 or new is required")

VERSION = "0.1"

with open("requirements.txt") as reqs:
    requirements = [line.strip() for line in reqs.readlines() if line.strip()]

setup(
    name="roadnet",
    version=VERSION,
    description="Road network graph with travel times built from OpenStreetMap exports.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "roadnet-build-network = roadnet.tools.build_network:build_network_cmd",
        ]
    }
)
