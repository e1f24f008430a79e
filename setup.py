"""
Setup script for the Python client of the probabilistic data structures module
"""

import io
import os
import re
from setuptools import setup, find_packages


def open_relative(*path):
    """
    Opens files in read-only with a fixed utf-8 encoding.

    All locations are relative to this setup.py file.

    """
    here = os.path.abspath(os.path.dirname(__file__))
    filename = os.path.join(here, *path)
    return io.open(filename, mode='r', encoding='utf-8')


with open_relative('src', 'bloomclient', 'version.py') as fd:
    version = re.search(
        r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
        fd.read(), re.MULTILINE).group(1)
    if not version:
        raise RuntimeError('Cannot find version information')

with open_relative('README.rst') as f:
    readme = f.read()

requires = [
    # redis.asyncio is available from 4.2.0
    'redis>=4.2.0'
]

setup(
    name='bloomclient',

    # Version should match the module command set it was tested against, but
    # may vary as patches are created.
    version=version,
    description=('Python client for the Bloom, Cuckoo, Count-Min Sketch and '
                 'Top-K commands'),
    long_description=readme,
    long_description_content_type='text/x-rst',

    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',

    # License is UPL, Version 1.0
    license='Universal Permissive License 1.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 4 - Beta',

        # Indicate who your project is intended for
        'Intended Audience :: Developers',
        'Topic :: Database :: Front-Ends',

        # License -- must match "license" above
        'License :: OSI Approved :: Universal Permissive License (UPL)',

        # Supported Python versions
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    # What does your project relate to?
    keywords='redis, bloom filter, cuckoo filter, count-min sketch, top-k',
    install_requires=requires,
    extras_require={
        'test': ['pytest']
    }
)
