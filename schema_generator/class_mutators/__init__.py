"""
Class mutators for the schema generator.

Mutators run over every class of the model before code is merged: they add
synthesized properties, derived flags, documentation and declarations.
"""

from .base import ClassMutator
from .class_id_appender import ClassIdAppender, IdPropertyGenerator
from .constructor_flags import ConstructorFlagsMutator
from .annotations_appender import AnnotationsAppender
from .attribute_appender import AttributeAppender

__all__ = [
    'ClassMutator',
    'ClassIdAppender',
    'IdPropertyGenerator',
    'ConstructorFlagsMutator',
    'AnnotationsAppender',
    'AttributeAppender',
]
