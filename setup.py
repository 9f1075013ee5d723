#!/usr/bin/env python3
from os.path import dirname
from setuptools import setup

with open(dirname(__file__) + "/README.rst", "r") as fd:
    readme = fd.read()

setup(
    name="awssign",
    version="0.1.0",
    packages=['awssign'],
    install_requires=["pytz"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",

    # PyPI information
    description="AWS Signature Version 4 request signing routines",
    long_description=readme,
    long_description_content_type="text/x-rst",
    license="Apache 2.0",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords = ['aws', 'signature', 'aws-sigv4'],
    zip_safe=False,
)
