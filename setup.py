#!/usr/bin/env python

import codecs

from setuptools import setup, find_packages
from os.path import abspath, dirname, join

# specify the version
version = '1.0.0'

here = abspath(dirname(__file__))

with codecs.open(join(here, 'README.rst'), encoding='utf-8') as f:
    README = f.read()

tests_require = ['pytest', 'coverage']

setup(
    name='py-addrtrie',
    version=version,
    description='Longest-match tries for IP prefixes and domain names',
    long_description=README,
    license='BSD',
    keywords='trie prefix cidr longest-match domain wildcard routing networking',
    classifiers=[
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Networking',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
    python_requires='>=3.9',
    install_requires=['pylru'],
    tests_require=tests_require,
    extras_require={'test': tests_require},
    packages=find_packages(exclude=['tests', 'tests.*']),
)
