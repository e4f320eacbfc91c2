"""
Domain module for the schema generator.

This module contains the vocabulary model and the rules that do not depend on
how code is finally rendered: naming, type inference and cardinality
resolution.
"""

from .models import (
    Attribute,
    Cardinality,
    ClassInfo,
    Constant,
    PropertyInfo,
    Use
)

from .naming import (
    accessor_name,
    is_reserved_keyword,
    parameter_name,
    singularize,
    split_storage_name,
    storage_name,
    ucfirst
)

from .type_inference import (
    TypeConverter,
    infer_storage_type
)

from .cardinality import CardinalityResolver

__all__ = [
    # Core models
    'Attribute',
    'Cardinality',
    'ClassInfo',
    'Constant',
    'PropertyInfo',
    'Use',

    # Naming
    'accessor_name',
    'is_reserved_keyword',
    'parameter_name',
    'singularize',
    'split_storage_name',
    'storage_name',
    'ucfirst',

    # Type inference
    'TypeConverter',
    'infer_storage_type',

    # Relations
    'CardinalityResolver'
]
