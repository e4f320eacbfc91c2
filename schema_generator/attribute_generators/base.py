"""
Base class of the attribute generators.

An attribute generator decides, for one family of metadata, which
declarations a class and each of its properties carry, and which symbols the
generated module has to import for them.
"""

from abc import ABC
from typing import Dict, List, Optional

from ..config_validation import GeneratorConfig
from ..domain.models import Attribute, ClassInfo, PropertyInfo, Use
from ..domain.type_inference import TypeConverter


class AbstractAttributeGenerator(ABC):
    """Abstract Strategy for attribute generation"""

    def __init__(
        self,
        config: GeneratorConfig,
        classes: Dict[str, ClassInfo],
        type_converter: Optional[TypeConverter] = None,
    ):
        self.config = config
        self.classes = classes
        self.type_converter = type_converter or TypeConverter()

    def generate_class_attributes(self, class_: ClassInfo) -> List[Attribute]:
        """Declarations to put on the class."""
        return []

    def generate_property_attributes(self, prop: PropertyInfo, class_name: str) -> List[Attribute]:
        """Declarations to put on a property of ``class_name``."""
        return []

    def generate_uses(self, class_: ClassInfo) -> List[Use]:
        """Imports needed by the declarations of the class."""
        return []
