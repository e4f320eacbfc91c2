"""
Attribute generators for the schema generator.

Each generator emits one family of declarations (API resource metadata,
persistence mapping). The generators run in the order configured under
``attributeGenerators`` and their outputs are concatenated.
"""

from .base import AbstractAttributeGenerator
from .api_platform import ApiPlatformCoreAttributeGenerator
from .doctrine_orm import DoctrineOrmAttributeGenerator
from .factory import AttributeGeneratorFactory

__all__ = [
    'AbstractAttributeGenerator',
    'ApiPlatformCoreAttributeGenerator',
    'DoctrineOrmAttributeGenerator',
    'AttributeGeneratorFactory',
]
