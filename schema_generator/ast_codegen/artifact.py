"""
In-memory structure of a generated Python module.

A ``GeneratedFile`` holds namespaces, a namespace holds imports and classes,
and a class holds declarations, constants, properties and methods. The merge
engine edits this structure; the renderer turns it into source and the loader
builds it back from source.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..domain.models import Attribute, Use
from ..domain.naming import storage_name


class _NoValue:
    """Marker for a property without a default value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


@dataclass(frozen=True)
class RawExpression:
    """An expression kept as source text because it is not a literal."""

    source: str


@dataclass
class GeneratedAttribute:
    """A declaration on a class (decorator) or property (``Annotated`` metadata)."""

    name: str
    args: Dict[Any, Any] = field(default_factory=dict)

    @classmethod
    def from_attribute(cls, attribute: Attribute) -> 'GeneratedAttribute':
        return cls(attribute.name, dict(attribute.args))


@dataclass
class GeneratedConstant:
    name: str
    value: Any
    comment: Optional[str] = None


@dataclass
class GeneratedProperty:
    name: str
    visibility: str
    type: Optional[str] = None
    default: Any = NO_VALUE
    docstring: Optional[str] = None
    attributes: List[GeneratedAttribute] = field(default_factory=list)

    @property
    def storage_name(self) -> str:
        return storage_name(self.name, self.visibility)

    @property
    def has_default(self) -> bool:
        return self.default is not NO_VALUE

    def get_attribute(self, name: str) -> Optional[GeneratedAttribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def add_attribute(self, attribute: GeneratedAttribute) -> 'GeneratedProperty':
        self.attributes.append(attribute)
        return self


@dataclass
class GeneratedMethod:
    """A method kept as its complete source text, decorators included."""

    name: str
    source: str


@dataclass
class GeneratedClass:
    name: str
    extends: Optional[str] = None
    implements: List[str] = field(default_factory=list)
    is_abstract: bool = False
    docstring: Optional[str] = None
    attributes: List[GeneratedAttribute] = field(default_factory=list)
    constants: Dict[str, GeneratedConstant] = field(default_factory=dict)
    properties: Dict[str, GeneratedProperty] = field(default_factory=dict)
    methods: Dict[str, GeneratedMethod] = field(default_factory=dict)
    # Class body statements that are neither properties, constants nor methods
    statements: List[str] = field(default_factory=list)

    @property
    def bases(self) -> List[str]:
        bases = [self.extends] if self.extends else []
        bases.extend(self.implements)
        return bases

    def get_attribute(self, name: str) -> Optional[GeneratedAttribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def add_attribute(self, attribute: GeneratedAttribute) -> 'GeneratedClass':
        self.attributes.append(attribute)
        return self

    def has_constant(self, name: str) -> bool:
        return name in self.constants

    def add_constant(self, constant: GeneratedConstant) -> 'GeneratedClass':
        self.constants[constant.name] = constant
        return self

    def get_property(self, name: str) -> Optional[GeneratedProperty]:
        return self.properties.get(name)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def add_property(self, prop: GeneratedProperty) -> 'GeneratedClass':
        self.properties[prop.name] = prop
        return self

    def get_method(self, name: str) -> Optional[GeneratedMethod]:
        return self.methods.get(name)

    def has_method(self, name: str) -> bool:
        return name in self.methods

    def add_method(self, method: GeneratedMethod, first: bool = False) -> 'GeneratedClass':
        if first:
            self.methods = {method.name: method, **self.methods}
        else:
            self.methods[method.name] = method
        return self


@dataclass
class GeneratedNamespace:
    name: str = ""
    uses: List[Use] = field(default_factory=list)
    # Imports that cannot be expressed as a Use, kept verbatim
    raw_imports: List[str] = field(default_factory=list)
    # Classes and verbatim module level statements, in source order
    members: List[Union[GeneratedClass, str]] = field(default_factory=list)

    @property
    def classes(self) -> Dict[str, GeneratedClass]:
        return {member.name: member for member in self.members if isinstance(member, GeneratedClass)}

    @property
    def statements(self) -> List[str]:
        return [member for member in self.members if isinstance(member, str)]

    def add_use(self, use: Use) -> 'GeneratedNamespace':
        if use not in self.uses:
            self.uses.append(use)
        return self

    def add_statement(self, statement: str) -> 'GeneratedNamespace':
        self.members.append(statement)
        return self

    def get_class(self, name: str) -> Optional[GeneratedClass]:
        return self.classes.get(name)

    def add_class(self, class_: GeneratedClass) -> GeneratedClass:
        """Append a class; a class with the same name is replaced in place."""
        for index, member in enumerate(self.members):
            if isinstance(member, GeneratedClass) and member.name == class_.name:
                self.members[index] = class_
                return class_
        self.members.append(class_)
        return class_


@dataclass
class GeneratedFile:
    header: Optional[str] = None
    namespaces: Dict[str, GeneratedNamespace] = field(default_factory=dict)

    def get_namespace(self, name: str) -> Optional[GeneratedNamespace]:
        return self.namespaces.get(name)

    def add_namespace(self, name: str) -> GeneratedNamespace:
        namespace = self.namespaces.get(name)
        if namespace is None:
            namespace = GeneratedNamespace(name)
            self.namespaces[name] = namespace
        return namespace

    def find_class(self, name: str) -> Optional[GeneratedClass]:
        for namespace in self.namespaces.values():
            if name in namespace.classes:
                return namespace.classes[name]
        return None
