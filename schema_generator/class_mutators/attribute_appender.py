import logging
from typing import List, TypeVar

from ..attribute_generators.base import AbstractAttributeGenerator
from ..domain.models import ClassInfo
from .base import ClassMutator


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _unique(items: List[T]) -> List[T]:
    unique: List[T] = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


class AttributeAppender(ClassMutator):
    """
    Runs the attribute generators and attaches their output to the model.

    Declarations are deduplicated within the output of one generator only;
    two generators emitting the same declaration both keep theirs.
    """

    def __init__(self, generators: List[AbstractAttributeGenerator]):
        self.generators = generators

    def __call__(self, class_: ClassInfo) -> ClassInfo:
        for generator in self.generators:
            for use in generator.generate_uses(class_):
                class_.add_use(use)
            class_.attributes.extend(_unique(generator.generate_class_attributes(class_)))
            for prop in class_.properties.values():
                prop.attributes.extend(_unique(generator.generate_property_attributes(prop, class_.name)))

        logger.debug(f"Attached {len(class_.attributes)} class declarations to '{class_.name}'")
        return class_
