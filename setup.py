"""
wktgpx
======

Convert WKT track geometries to GPX.
"""

from setuptools import find_packages, setup


setup(
    name='wktgpx',
    version='1.0.0',
    description='Convert WKT track geometries to GPX',
    long_description=__doc__,
    license='Apache 2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'attrs',
        'click',
        'lxml',
        'pyproj',
    ],
    python_requires='>=3.7.1',
    extras_require={
        'test': [
            'geomet',
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wktgpx = wktgpx.cli:main',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Console',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
    ]
)
