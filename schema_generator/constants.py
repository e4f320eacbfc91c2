"""
Centralized constants for the schema generator.

This module contains vocabulary URIs, storage type labels, declaration names
and default configuration values used across the generators, mutators and the
merge engine.
"""

from typing import Dict, FrozenSet, List


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    # Identifier defaults
    ID_GENERATION_STRATEGY = "auto"
    ID_WRITABLE = False
    ID_NAME = "id"
    ID_ON_CLASS = "child"

    # Generation options
    USE_COLLECTION = True
    ACCESSOR_METHODS = True
    FLUENT_MUTATOR_METHODS = False
    FIELD_VISIBILITY = "private"
    ATTRIBUTE_GENERATORS: List[str] = ["api_platform_core", "doctrine_orm"]


class IdGenerationStrategies:
    """Identifier generation strategies."""

    AUTO = "auto"
    UUID = "uuid"
    MONGOID = "mongoid"
    NONE = "none"


class OnClassModes:
    """Which classes receive a synthesized identifier."""

    ALL = "all"
    PARENT = "parent"  # skip classes that have a parent
    CHILD = "child"  # skip classes that have a child


class Visibility:
    """Field visibility levels."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


# =============================================================================
# VOCABULARY URIS
# =============================================================================

XSD = "http://www.w3.org/2001/XMLSchema#"
SCHEMA_ORG = "https://schema.org/"

SCHEMA_ORG_ENUMERATION = SCHEMA_ORG + "Enumeration"

TIME_URIS: FrozenSet[str] = frozenset({XSD + "time", SCHEMA_ORG + "Time"})
DATETIME_URIS: FrozenSet[str] = frozenset({XSD + "dateTime", SCHEMA_ORG + "DateTime"})
DATE_URIS: FrozenSet[str] = frozenset({XSD + "date", SCHEMA_ORG + "Date"})


# Datatype URI to native Python type mapping
PYTHON_TYPE_MAP: Dict[str, str] = {
    # Booleans
    XSD + "boolean": "bool",
    SCHEMA_ORG + "Boolean": "bool",

    # Numbers
    XSD + "float": "float",
    XSD + "double": "float",
    XSD + "decimal": "float",
    SCHEMA_ORG + "Float": "float",
    SCHEMA_ORG + "Number": "float",
    XSD + "integer": "int",
    XSD + "int": "int",
    XSD + "long": "int",
    XSD + "short": "int",
    XSD + "nonNegativeInteger": "int",
    XSD + "nonPositiveInteger": "int",
    XSD + "positiveInteger": "int",
    XSD + "negativeInteger": "int",
    XSD + "unsignedInt": "int",
    XSD + "unsignedLong": "int",
    SCHEMA_ORG + "Integer": "int",

    # Temporal
    XSD + "date": "date",
    XSD + "gYear": "date",
    XSD + "gYearMonth": "date",
    SCHEMA_ORG + "Date": "date",
    XSD + "dateTime": "datetime",
    SCHEMA_ORG + "DateTime": "datetime",
    XSD + "time": "time",
    SCHEMA_ORG + "Time": "time",
    XSD + "duration": "timedelta",

    # Strings
    XSD + "string": "str",
    XSD + "normalizedString": "str",
    XSD + "token": "str",
    XSD + "language": "str",
    XSD + "anyURI": "str",
    SCHEMA_ORG + "Text": "str",
    SCHEMA_ORG + "URL": "str",
    SCHEMA_ORG + "CssSelectorType": "str",
    SCHEMA_ORG + "XPathType": "str",
    SCHEMA_ORG + "PronounceableText": "str",
}

DATE_LIKE_PYTHON_TYPES: FrozenSet[str] = frozenset({"date", "datetime", "time"})
INTERVAL_PYTHON_TYPES: FrozenSet[str] = frozenset({"timedelta"})


# =============================================================================
# STORAGE TYPES
# =============================================================================

class StorageTypes:
    """Column storage type labels understood by the mapping backend."""

    STRING = "string"
    TEXT = "text"
    SIMPLE_ARRAY = "simple_array"
    JSON = "json"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    GUID = "guid"

    # Emitting no explicit type means the backend picks this one
    DEFAULT = STRING


# Native Python type to storage type mapping
STORAGE_TYPE_MAP: Dict[str, str] = {
    "bool": StorageTypes.BOOLEAN,
    "int": StorageTypes.INTEGER,
    "str": StorageTypes.TEXT,
    "float": StorageTypes.FLOAT,
}

ID_STORAGE_TYPES: Dict[str, str] = {
    IdGenerationStrategies.UUID: StorageTypes.GUID,
    IdGenerationStrategies.AUTO: StorageTypes.INTEGER,
}


# =============================================================================
# DECLARATIONS
# =============================================================================

# Matched case-insensitively against class and property names
RESERVED_KEYWORDS: FrozenSet[str] = frozenset({
    "add", "create", "delete", "group", "join", "like", "update", "to",
})

# Literal override key whose entries become independent declarations
INDEXES_OVERRIDE_KEY = "Indexes"


class OrmDeclarations:
    """Persistence-mapping declaration names."""

    ENTITY = "ORM.Entity"
    EMBEDDABLE = "ORM.Embeddable"
    MAPPED_SUPERCLASS = "ORM.MappedSuperclass"
    TABLE = "ORM.Table"
    ID = "ORM.Id"
    GENERATED_VALUE = "ORM.GeneratedValue"
    COLUMN = "ORM.Column"
    EMBEDDED = "ORM.Embedded"
    ONE_TO_ONE = "ORM.OneToOne"
    ONE_TO_MANY = "ORM.OneToMany"
    MANY_TO_ONE = "ORM.ManyToOne"
    MANY_TO_MANY = "ORM.ManyToMany"
    JOIN_COLUMN = "ORM.JoinColumn"
    INVERSE_JOIN_COLUMN = "ORM.InverseJoinColumn"
    JOIN_TABLE = "ORM.JoinTable"


class ApiDeclarations:
    """API resource declaration names."""

    RESOURCE = "ApiResource"
    PROPERTY = "ApiProperty"


class ImportPaths:
    """Symbols imported by generated modules."""

    ORM_MAPPING = "doctrine.orm.mapping"
    ORM_ALIAS = "ORM"
    API_RESOURCE = "api_platform.core.annotation.ApiResource"
    API_PROPERTY = "api_platform.core.annotation.ApiProperty"
    ENUM = "enum.Enum"
    ABC = "abc.ABC"


# Relation option keys moved from column options onto the relation declaration
RELATION_OPTION_KEYS: List[str] = ["cascade", "orphanRemoval"]
# Column option keys that join columns do not accept
JOIN_COLUMN_EXCLUDED_KEYS: List[str] = ["options"]


# =============================================================================
# CODE GENERATION
# =============================================================================

class OperationGroups:
    """Recognized operation groups of a resource."""

    ITEM = "item"
    COLLECTION = "collection"

    ALL = [ITEM, COLLECTION]


class TypeHints:
    """Type hints with special meaning for collection-valued properties."""

    COLLECTION = "Collection"
    LIST = "list"


class GenerationOptions:
    """Code generation options."""

    DEFAULT_INDENT = "    "  # 4 spaces
    DEFAULT_LINE_LENGTH = 120

    CONSTRUCTOR_NAME = "__init__"
    PARENT_CONSTRUCTOR_CALL = "super().__init__()"
    SEE_ALSO_PREFIX = "See: "
