# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Setup file for contract_harness package.
"""

from setuptools import setup, find_packages

setup(
    name='contract_harness',
    version='1.0.0',
    packages=find_packages(exclude=['test', 'test.*', 'examples']),
    python_requires='>=3.8',
    install_requires=['setuptools'],
    extras_require={
        'test': ['pytest>=7.0', 'hypothesis>=6.0'],
    },
    zip_safe=True,
    author='John',
    author_email='john@example.com',
    maintainer='John',
    maintainer_email='john@example.com',
    description='Runtime contracts and property-based verification for Python functions',
    license='Apache-2.0',
)
