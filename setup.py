#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="restspec",
    version="1.0.0",
    description="Spec-driven client for any REST API: dispatch requests by resource name from a declarative JSON spec, with HTTP Basic and OAuth 1.0a authentication",
    author="restspec contributors",
    classifiers=["Programming Language :: Python :: 3 :: Only"],
    install_requires=[
        "singer-python>=6.0.1",
        "requests>=2.31.0",
        "requests-oauthlib>=1.3.1",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pylint",
            "responses",
        ]
    },
    entry_points={
        "console_scripts": [
            "restspec=restspec:main",
        ]
    },
    packages=find_packages(exclude=["tests", "examples"]),
    package_data={"restspec": ["specs/*.json"]},
    include_package_data=True,
    python_requires=">=3.8",
)
