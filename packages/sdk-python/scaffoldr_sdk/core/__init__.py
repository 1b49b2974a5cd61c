"""
Core SDK Functionality
======================

Core modules for loading descriptors, validating them, and reading
rendered build scripts back.
"""

from .loader import expand_env_vars, load_descriptor
from .reader import detect_dsl, read_build_script
from .validate import check_descriptor, validate_descriptor

__all__ = [
    "load_descriptor",
    "expand_env_vars",
    "read_build_script",
    "detect_dsl",
    "validate_descriptor",
    "check_descriptor",
]
