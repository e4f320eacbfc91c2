"""
Code artifact layer of the schema generator.

Holds the in-memory structure of generated modules, the merge engine folding
the model into it, and the renderer and loader converting it to and from
Python source.
"""

from .artifact import (
    NO_VALUE,
    GeneratedAttribute,
    GeneratedClass,
    GeneratedConstant,
    GeneratedFile,
    GeneratedMethod,
    GeneratedNamespace,
    GeneratedProperty,
    RawExpression
)
from .merge import class_to_file
from .renderer import render_file
from .loader import load_file

__all__ = [
    'NO_VALUE',
    'GeneratedAttribute',
    'GeneratedClass',
    'GeneratedConstant',
    'GeneratedFile',
    'GeneratedMethod',
    'GeneratedNamespace',
    'GeneratedProperty',
    'RawExpression',
    'class_to_file',
    'render_file',
    'load_file',
]
