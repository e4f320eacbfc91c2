"""
Core domain models for the schema generator.

These models hold the classes and properties derived from a vocabulary. They
are built once by the ingestion stage, mutated in place by the class mutators,
read by the attribute generators and finally consumed by the merge engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional, Union

from ..constants import SCHEMA_ORG_ENUMERATION, TypeHints


class Cardinality(Enum):
    """Relationship multiplicity between two classes."""

    CARDINALITY_0_1 = "0..1"
    CARDINALITY_0_N = "0..N"
    CARDINALITY_1_1 = "1..1"
    CARDINALITY_1_N = "1..N"
    CARDINALITY_N_0 = "N..0"
    CARDINALITY_N_1 = "N..1"
    CARDINALITY_N_N = "N..N"
    CARDINALITY_UNKNOWN = "unknown"


def _append_unique(items: List[Any], item: Any) -> None:
    if item not in items:
        items.append(item)


def _append_annotation(annotations: List[str], annotation: str) -> None:
    # Empty lines are paragraph breaks and may repeat
    if annotation == "" or annotation not in annotations:
        annotations.append(annotation)


@dataclass
class Attribute:
    """A declaration (decorator / annotation metadata) with named arguments."""

    name: str
    args: Dict[Any, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Use:
    """An imported symbol, e.g. ``doctrine.orm.mapping`` aliased as ``ORM``."""

    name: str
    alias: Optional[str] = None


@dataclass
class Constant:
    """A class-level constant."""

    name: str
    value: Any
    comment: Optional[str] = None


@dataclass
class PropertyInfo:
    """
    Represents a property of a vocabulary class.

    ``range_name`` is a weak reference: relation targets are resolved by
    looking the name up in the class registry, never through a pointer.
    """

    name: str
    resource_uri: Optional[str] = None
    resource_comment: Optional[str] = None
    cardinality: Cardinality = Cardinality.CARDINALITY_UNKNOWN

    # Range: datatype URI or relation target
    range: Optional[str] = None
    range_name: Optional[str] = None

    # Externally supplied column options
    orm_column: Optional[Dict[str, Any]] = None

    # Flags
    is_array: bool = False
    is_readable: bool = True
    is_readable_link: bool = True
    is_writable: bool = True
    is_writable_link: bool = True
    is_nullable: bool = True
    is_unique: bool = False
    is_custom: bool = False
    is_embedded: bool = False
    is_id: bool = False
    is_enum: bool = False

    # Relation hints
    mapped_by: Optional[str] = None
    inversed_by: Optional[str] = None
    relation_table_name: Optional[str] = None
    column_prefix: Union[str, bool] = False

    # Code generation hints
    type_hint: Optional[str] = None
    adder_remover_type_hint: Optional[str] = None
    groups: List[str] = field(default_factory=list)
    security: Optional[str] = None

    attributes: List[Attribute] = field(default_factory=list)
    annotations: List[str] = field(default_factory=list)
    getter_annotations: List[str] = field(default_factory=list)
    setter_annotations: List[str] = field(default_factory=list)
    adder_annotations: List[str] = field(default_factory=list)
    remover_annotations: List[str] = field(default_factory=list)

    def add_attribute(self, attribute: Attribute) -> 'PropertyInfo':
        _append_unique(self.attributes, attribute)
        return self

    def add_annotation(self, annotation: str) -> 'PropertyInfo':
        _append_annotation(self.annotations, annotation)
        return self

    def add_getter_annotation(self, annotation: str) -> 'PropertyInfo':
        _append_annotation(self.getter_annotations, annotation)
        return self

    def add_setter_annotation(self, annotation: str) -> 'PropertyInfo':
        _append_annotation(self.setter_annotations, annotation)
        return self

    def add_adder_annotation(self, annotation: str) -> 'PropertyInfo':
        _append_annotation(self.adder_annotations, annotation)
        return self

    def add_remover_annotation(self, annotation: str) -> 'PropertyInfo':
        _append_annotation(self.remover_annotations, annotation)
        return self

    def mark_as_custom(self) -> 'PropertyInfo':
        self.is_custom = True
        return self

    @property
    def is_type_hinted_as_collection(self) -> bool:
        """Check if the type hint is a collection type (``Collection[...]``)."""
        if not self.type_hint:
            return False
        return self.type_hint == TypeHints.COLLECTION or self.type_hint.startswith(TypeHints.COLLECTION + "[")

    @property
    def is_collection_valued(self) -> bool:
        """Check if the property needs a collection initialized by the constructor."""
        return self.is_array and self.type_hint != TypeHints.LIST and not self.is_enum


@dataclass
class ClassInfo:
    """
    Represents a vocabulary class with all its properties.

    ``parent`` is tri-state: ``None`` means no parent was determined,
    ``False`` means the class explicitly has no parent and a string is the
    name of the parent class.
    """

    name: str
    resource_uri: str = ""
    resource_comment: Optional[str] = None
    namespace: str = ""
    parent: Union[None, bool, str] = None
    interface_name: Optional[str] = None
    sub_class_of: List[str] = field(default_factory=list)

    properties: Dict[str, PropertyInfo] = field(default_factory=dict)
    uses: List[Use] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    annotations: List[str] = field(default_factory=list)
    constants: Dict[str, Constant] = field(default_factory=dict)

    # Flags
    is_abstract: bool = False
    is_embeddable: bool = False
    has_child: bool = False
    has_constructor: bool = False
    parent_has_constructor: bool = False

    # API resource options
    security: Optional[str] = None
    operations: Dict[str, Dict[str, Dict[str, Any]]] = field(default_factory=dict)

    @property
    def parent_name(self) -> Optional[str]:
        """Parent class name; ``''`` when the class explicitly has no parent."""
        if self.parent is False:
            return ''
        return self.parent

    @property
    def has_parent(self) -> bool:
        return isinstance(self.parent, str) and self.parent != ''

    def with_parent(self, parent: Union[None, bool, str]) -> 'ClassInfo':
        self.parent = parent
        return self

    @property
    def is_enum(self) -> bool:
        """Check if the class is an enumeration of the vocabulary."""
        return bool(self.sub_class_of) and self.sub_class_of[0] == SCHEMA_ORG_ENUMERATION

    @property
    def is_parent_enum(self) -> bool:
        return self.has_parent and self.parent == 'Enum'

    def add_property(self, prop: PropertyInfo) -> 'ClassInfo':
        """Attach a property; a property with the same name is replaced."""
        self.properties[prop.name] = prop
        return self

    def remove_property_by_name(self, name: str) -> 'ClassInfo':
        self.properties.pop(name, None)
        return self

    def get_property_by_name(self, name: str) -> Optional[PropertyInfo]:
        return self.properties.get(name)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    @property
    def unique_properties(self) -> Dict[str, PropertyInfo]:
        return {name: prop for name, prop in self.properties.items() if prop.is_unique}

    @property
    def unique_property_names(self) -> List[str]:
        return list(self.unique_properties)

    @property
    def id_property(self) -> Optional[PropertyInfo]:
        """The identifier property, if any."""
        for prop in self.properties.values():
            if prop.is_id:
                return prop
        return None

    def sorted_properties(self) -> List[PropertyInfo]:
        """Properties in model order with the identifier moved first."""
        id_prop = self.id_property
        if id_prop is None:
            return list(self.properties.values())
        return [id_prop] + [prop for prop in self.properties.values() if prop is not id_prop]

    def add_use(self, use: Use) -> 'ClassInfo':
        _append_unique(self.uses, use)
        return self

    def add_attribute(self, attribute: Attribute) -> 'ClassInfo':
        _append_unique(self.attributes, attribute)
        return self

    def add_annotation(self, annotation: str) -> 'ClassInfo':
        _append_annotation(self.annotations, annotation)
        return self

    def add_constant(self, key: str, constant: Constant) -> 'ClassInfo':
        self.constants[key] = constant
        return self
