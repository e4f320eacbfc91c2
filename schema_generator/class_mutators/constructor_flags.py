from typing import Dict

from ..domain.models import ClassInfo
from .base import ClassMutator


class ConstructorFlagsMutator(ClassMutator):
    """Flags classes whose generated constructor initializes collections."""

    def __init__(self, classes: Dict[str, ClassInfo]):
        self.classes = classes

    @staticmethod
    def owns_collections(class_: ClassInfo) -> bool:
        return any(prop.is_collection_valued for prop in class_.properties.values())

    def __call__(self, class_: ClassInfo) -> ClassInfo:
        class_.has_constructor = self.owns_collections(class_)

        visited = {class_.name}
        ancestor = class_
        class_.parent_has_constructor = False
        while ancestor.has_parent and ancestor.parent not in visited:
            visited.add(ancestor.parent)
            ancestor = self.classes.get(ancestor.parent)
            if ancestor is None:
                break
            if self.owns_collections(ancestor):
                class_.parent_has_constructor = True
                break

        return class_
