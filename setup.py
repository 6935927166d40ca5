"""
Setup script for coqui-helper package.

This file is kept for backwards compatibility and uses pyproject.toml
as the source of truth for package configuration.
"""

from setuptools import setup

# Configuration is in pyproject.toml
setup()
