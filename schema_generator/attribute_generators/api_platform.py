import logging
from typing import Any, Dict, List

from ..config_validation import validate_operations
from ..constants import ApiDeclarations, ImportPaths, OperationGroups
from ..domain.models import Attribute, ClassInfo, PropertyInfo, Use
from .base import AbstractAttributeGenerator


logger = logging.getLogger(__name__)


class ApiPlatformCoreAttributeGenerator(AbstractAttributeGenerator):
    """Generates API resource metadata (``ApiResource`` / ``ApiProperty``)."""

    def generate_class_attributes(self, class_: ClassInfo) -> List[Attribute]:
        if class_.is_abstract or class_.is_enum:
            return []

        arguments: Dict[str, Any] = {
            'shortName': class_.name,
            'iri': class_.resource_uri,
        }
        if class_.security:
            arguments['security'] = class_.security

        if class_.operations:
            operations = validate_operations(class_.operations, class_name=class_.name)
            for group in OperationGroups.ALL:
                group_operations = getattr(operations, group)
                arguments[f'{group}Operations'] = {
                    method: dict(options) for method, options in group_operations.items()
                }
            logger.debug(f"Added operations to resource '{class_.name}'")

        return [Attribute(ApiDeclarations.RESOURCE, arguments)]

    def generate_property_attributes(self, prop: PropertyInfo, class_name: str) -> List[Attribute]:
        arguments: Dict[str, Any] = {}

        if not prop.is_readable_link:
            arguments['readableLink'] = False
        if not prop.is_writable_link:
            arguments['writableLink'] = False
        if prop.security:
            arguments['security'] = prop.security
        if not prop.is_custom:
            arguments['iri'] = prop.resource_uri

        return [Attribute(ApiDeclarations.PROPERTY, arguments)] if arguments else []

    def generate_uses(self, class_: ClassInfo) -> List[Use]:
        return [Use(ImportPaths.API_RESOURCE), Use(ImportPaths.API_PROPERTY)]
