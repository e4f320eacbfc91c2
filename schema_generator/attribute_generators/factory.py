import logging
from typing import Dict, List, Optional, Type

from ..config_validation import GeneratorConfig
from ..domain.models import ClassInfo
from ..domain.type_inference import TypeConverter
from ..exceptions import ConfigurationError
from .api_platform import ApiPlatformCoreAttributeGenerator
from .base import AbstractAttributeGenerator
from .doctrine_orm import DoctrineOrmAttributeGenerator


logger = logging.getLogger(__name__)


# Factory Pattern for creating attribute generators
class AttributeGeneratorFactory:
    """Factory for creating attribute generators by configured name"""

    _registry: Dict[str, Type[AbstractAttributeGenerator]] = {
        'api_platform_core': ApiPlatformCoreAttributeGenerator,
        'doctrine_orm': DoctrineOrmAttributeGenerator,
    }

    @classmethod
    def register(cls, name: str, generator_class: Type[AbstractAttributeGenerator]) -> None:
        """Register a new attribute generator"""
        cls._registry[name] = generator_class

    @classmethod
    def create(
        cls,
        name: str,
        config: GeneratorConfig,
        classes: Dict[str, ClassInfo],
        type_converter: Optional[TypeConverter] = None,
    ) -> AbstractAttributeGenerator:
        """Create an attribute generator instance by name"""
        generator_class = cls._registry.get(name)
        if not generator_class:
            raise ConfigurationError(
                f"Unknown attribute generator: {name}",
                context={'available': ", ".join(sorted(cls._registry))},
                suggestions=["Check the 'attributeGenerators' list in the configuration"],
            )
        return generator_class(config, classes, type_converter)

    @classmethod
    def create_all(
        cls,
        config: GeneratorConfig,
        classes: Dict[str, ClassInfo],
        type_converter: Optional[TypeConverter] = None,
    ) -> List[AbstractAttributeGenerator]:
        """Create the generators listed in ``attributeGenerators``, in order"""
        generators = [cls.create(name, config, classes, type_converter) for name in config.attribute_generators]
        logger.debug(f"Created attribute generators: {', '.join(config.attribute_generators)}")
        return generators
