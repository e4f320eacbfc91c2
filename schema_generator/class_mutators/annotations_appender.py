from typing import List, Optional

from ..constants import GenerationOptions
from ..domain.models import ClassInfo, PropertyInfo
from ..domain.naming import singularize
from .base import ClassMutator


def _doc_lines(comment: Optional[str], uri: Optional[str]) -> List[str]:
    """Comment lines, then a blank line and a link to the vocabulary term."""
    lines = [line.rstrip() for line in comment.strip().splitlines()] if comment else []
    if uri:
        if lines:
            lines.append("")
        lines.append(GenerationOptions.SEE_ALSO_PREFIX + uri)
    return lines


class AnnotationsAppender(ClassMutator):
    """
    Adds documentation lines to classes, properties and accessors.

    Elements that already carry documentation are left alone, so running the
    mutator again does not duplicate lines.
    """

    def __call__(self, class_: ClassInfo) -> ClassInfo:
        if not class_.annotations:
            for line in _doc_lines(class_.resource_comment, class_.resource_uri):
                class_.add_annotation(line)

        for prop in class_.properties.values():
            self.append_property_annotations(prop)

        return class_

    def append_property_annotations(self, prop: PropertyInfo) -> None:
        if not prop.annotations:
            uri = None if prop.is_custom else prop.resource_uri
            for line in _doc_lines(prop.resource_comment, uri):
                prop.add_annotation(line)

        if prop.is_array:
            item = singularize(prop.name)
            prop.add_adder_annotation(f"Add {item} to {prop.name}.")
            prop.add_remover_annotation(f"Remove {item} from {prop.name}.")
