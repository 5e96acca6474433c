#!/usr/bin/env python
from setuptools import setup
setup(
    name='foursquare-async',
    version='1.0',
    description='a Foursquare API client with lazily delivered responses',
    url='https://github.com/jmathai/foursquare-async',

    packages=['foursquareasync'],
    provides=['foursquareasync'],
    python_requires='>=3.7',
    install_requires=[
        'httplib2>=0.9',
        'simplejson>=3.3.0',
        'oauthlib>=3.0',
        'requests-toolbelt>=0.9',
    ],
    extras_require={
        'test': ['mock>=3.0', 'pytest'],
    },
)
