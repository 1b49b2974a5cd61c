"""
Project Generation
==================

Writes rendered build files into a project directory.
"""

from .writer import plan_project, write_project

__all__ = ["plan_project", "write_project"]
