# -*- coding: utf-8 -*-

from setuptools import setup


setup(
    name='dotimporter',
    version='0.1.0',
    packages=['dotimporter'],
    install_requires=['funcparserlib>=1.0.0'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
    description='DOT graph description language importer based on functional '
        'parsing combinators',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
