"""
Utility functions for building OSC messages.

This module provides:
    - arg_utils: OSC type tag inference for Python and numpy values
"""

from .arg_utils import infer_type_tag, infer_type_tags, to_float32, to_python

__all__ = [
    "infer_type_tag",
    "infer_type_tags",
    "to_float32",
    "to_python",
]
