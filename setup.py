#!/usr/bin/env python

"""
    shapebox
    ========

    shapebox lays out ellipses containing content and draws them to PDF.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError('shapebox does not support Python 2.x.')

setup()
