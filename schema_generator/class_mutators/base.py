from abc import ABC, abstractmethod

from ..domain.models import ClassInfo


class ClassMutator(ABC):
    """Abstract Strategy for class mutation; mutates in place and returns the class."""

    @abstractmethod
    def __call__(self, class_: ClassInfo) -> ClassInfo:
        pass
