"""
Schema generator.

Turns a vocabulary model (classes and properties derived from schema.org or a
similar vocabulary) into Python modules carrying persistence-mapping and API
resource metadata, and merges regenerated output into hand-edited modules.
"""

from .colored_logging import setup_colored_logging
from .config_validation import GeneratorConfig, load_config, validate_and_parse_config
from .exceptions import CodeGenerationError, ConfigurationError, RelationshipError, SchemaGeneratorError
from .generator import SchemaGenerator

__version__ = "0.1.0"

__all__ = [
    'GeneratorConfig',
    'load_config',
    'validate_and_parse_config',
    'CodeGenerationError',
    'ConfigurationError',
    'RelationshipError',
    'SchemaGeneratorError',
    'SchemaGenerator',
    'setup_colored_logging',
]
