#!/usr/bin/env python
# -*- coding: utf-8 -*-


"""Setup script for Beamparse."""

from os import path

from setuptools import setup

from beamparse import __author__, __version__


HERE = path.abspath(path.dirname(__file__))


# Default long description
LONG_DESCRIPTION = """

Beamparse
=========

*Statistical Shift-Reduce Constituency Parsing*

""".strip()


# Get the long description from the relevant file. First try README.rst,
# then fall back on the default string defined here in this file.
if path.isfile(path.join(HERE, 'README.rst')):
    with open(path.join(HERE, 'README.rst'), encoding='utf-8') as description_file:
        LONG_DESCRIPTION = description_file.read()


# See https://pythonhosted.org/setuptools/setuptools.html for a full list
# of parameters and their meanings.
setup(
    name='beamparse',
    version=__version__,
    author=__author__,
    author_email='beamparse@users.noreply.github.com',
    license='MIT',
    platforms=['any'],
    description='Beamparse: Statistical Shift-Reduce Constituency Parsing',
    long_description=LONG_DESCRIPTION,

    # See https://pypi.python.org/pypi?:action=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
        'Topic :: Text Processing :: Linguistic',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],

    keywords='beamparse parser natural language treebank constituency',
    packages=['beamparse', 'beamparse.contexts'],
    python_requires='>=3.6',
    install_requires=['sortedcontainers'],
    extras_require={
        'test': ['pytest'],
    },
)
