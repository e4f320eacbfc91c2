import logging

from ..config_validation import GeneratorConfig
from ..constants import SCHEMA_ORG, IdGenerationStrategies, OnClassModes
from ..domain.models import Cardinality, ClassInfo, PropertyInfo
from .base import ClassMutator


logger = logging.getLogger(__name__)


class IdPropertyGenerator:
    """Builds the identifier property for a generation strategy."""

    def __call__(self, generation_strategy: str, writable: bool, name: str = "id") -> PropertyInfo:
        if generation_strategy == IdGenerationStrategies.AUTO:
            range_name, type_hint = "Integer", "int"
        else:
            range_name, type_hint = "Text", "str"

        # Nothing generates the value when the strategy is none
        is_writable = True if generation_strategy == IdGenerationStrategies.NONE else writable

        return PropertyInfo(
            name=name,
            range=SCHEMA_ORG + range_name,
            range_name=range_name,
            cardinality=Cardinality.CARDINALITY_1_1,
            is_id=True,
            is_custom=True,
            is_writable=is_writable,
            is_nullable=generation_strategy != IdGenerationStrategies.NONE and not writable,
            type_hint=type_hint,
        )


class ClassIdAppender(ClassMutator):
    """
    Adds an identifier property to the classes selected by ``id.onClass``.

    Enums and embeddables never get one. A property with the same name is
    replaced.
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self.id_property_generator = IdPropertyGenerator()

    def __call__(self, class_: ClassInfo) -> ClassInfo:
        id_config = self.config.id_config_for(class_.name)
        if (
            class_.is_enum
            or class_.is_embeddable
            or (class_.has_parent and id_config.on_class == OnClassModes.PARENT)
            or (class_.has_child and id_config.on_class == OnClassModes.CHILD)
        ):
            return class_

        id_property = self.id_property_generator(
            id_config.generation_strategy, id_config.writable, id_config.name
        )
        logger.debug(f"Appending identifier '{id_property.name}' to class '{class_.name}'")
        return class_.add_property(id_property)
