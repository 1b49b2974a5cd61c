"""Scaffoldr command line interface."""

from scaffoldr_common import SCAFFOLDR_VERSION

__version__ = SCAFFOLDR_VERSION
