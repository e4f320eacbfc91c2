"""
Type inference for property ranges.

Maps the range of a property either to a storage type label for a column or
to ``None``, meaning the range is a class and the property is a relation.
"""

import logging
from typing import Dict, Optional

from ..constants import (
    PYTHON_TYPE_MAP, STORAGE_TYPE_MAP, TIME_URIS, DATETIME_URIS, DATE_URIS,
    DATE_LIKE_PYTHON_TYPES, INTERVAL_PYTHON_TYPES, StorageTypes
)
from .models import PropertyInfo


logger = logging.getLogger(__name__)


class TypeConverter:
    """Converts datatype ranges to native Python types."""

    def __init__(self, type_map: Optional[Dict[str, str]] = None):
        self.type_map = dict(PYTHON_TYPE_MAP)
        if type_map:
            self.type_map.update(type_map)

    def is_datatype(self, range_uri: Optional[str]) -> bool:
        """Check if the range is a primitive datatype rather than a class."""
        return range_uri is not None and range_uri in self.type_map

    def get_python_type(self, prop: PropertyInfo) -> Optional[str]:
        """Native Python type of a property, or None for relations."""
        if prop.is_enum:
            return "str"
        return self.type_map.get(prop.range) if prop.range else None


def infer_storage_type(prop: PropertyInfo, converter: TypeConverter) -> Optional[str]:
    """
    Infer the storage type of a property.

    Args:
        prop: Property to inspect (range, is_array and is_enum are used)
        converter: Datatype to native type converter

    Returns:
        A storage type label, or None when the property is a relation
    """
    if prop.is_enum:
        return StorageTypes.SIMPLE_ARRAY if prop.is_array else StorageTypes.STRING

    is_datatype = converter.is_datatype(prop.range)
    if prop.is_array and is_datatype:
        return StorageTypes.JSON

    if prop.is_array or not is_datatype:
        return None

    python_type = converter.get_python_type(prop)
    if python_type is None:
        return None

    # Temporal subtypes are told apart by their source identifier
    if prop.range in TIME_URIS:
        return StorageTypes.TIME
    if prop.range in DATETIME_URIS:
        return StorageTypes.DATETIME
    if prop.range in DATE_URIS:
        return StorageTypes.DATE

    if python_type in DATE_LIKE_PYTHON_TYPES:
        return StorageTypes.DATE
    if python_type in INTERVAL_PYTHON_TYPES:
        return StorageTypes.STRING

    storage_type = STORAGE_TYPE_MAP.get(python_type, python_type)
    logger.debug(f"Inferred storage type '{storage_type}' for property '{prop.name}'")
    return storage_type
