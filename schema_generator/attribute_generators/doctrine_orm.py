"""
Persistence-mapping attribute generator.

Emits the ``ORM.*`` declarations of entities, embeddables and mapped
superclasses: columns for datatype properties, identifier mappings and
associations for relations.
"""

import logging
from typing import Any, Dict, List, Optional

from ..constants import (
    ID_STORAGE_TYPES, INDEXES_OVERRIDE_KEY, JOIN_COLUMN_EXCLUDED_KEYS, RELATION_OPTION_KEYS,
    IdGenerationStrategies, ImportPaths, OrmDeclarations, StorageTypes
)
from ..domain.cardinality import CardinalityResolver
from ..domain.models import Attribute, ClassInfo, PropertyInfo, Use
from ..domain.naming import is_reserved_keyword
from ..domain.type_inference import infer_storage_type
from ..exceptions import RelationshipError
from .base import AbstractAttributeGenerator


logger = logging.getLogger(__name__)

UNRESOLVED_RELATION_TEMPLATE = 'The type "%(type)s" of the property "%(property)s" from the class "%(class)s" doesn\'t exist'


class DoctrineOrmAttributeGenerator(AbstractAttributeGenerator):
    """
    Generates persistence-mapping declarations.

    Relation targets that cannot be found in the class registry are not
    fatal: the property gets no declaration, the miss is logged and recorded
    in ``resolution_errors``.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cardinality_resolver = CardinalityResolver(self.classes)
        self.resolution_errors: List[RelationshipError] = []

    def generate_class_attributes(self, class_: ClassInfo) -> List[Attribute]:
        override = self.config.doctrine_attributes_for(class_.name)
        if override:
            return self._attributes_from_override(override)

        if class_.is_enum:
            return []

        if class_.is_embeddable:
            return [Attribute(OrmDeclarations.EMBEDDABLE)]

        attributes: List[Attribute] = []
        if class_.is_abstract:
            inheritance_attributes = self.config.doctrine.inheritance_attributes
            if inheritance_attributes:
                return [Attribute(name, dict(args or {})) for name, args in inheritance_attributes.items()]
            attributes.append(Attribute(OrmDeclarations.MAPPED_SUPERCLASS))
        else:
            attributes.append(Attribute(OrmDeclarations.ENTITY))

        if is_reserved_keyword(class_.name):
            attributes.append(Attribute(OrmDeclarations.TABLE, {'name': class_.name.lower()}))

        return attributes

    def _attributes_from_override(self, override: Dict[str, Any]) -> List[Attribute]:
        attributes = []
        for name, args in override.items():
            if name == INDEXES_OVERRIDE_KEY:
                # A list of single-declaration mappings, one per index
                for index_definition in args or []:
                    for index_name, index_args in index_definition.items():
                        attributes.append(Attribute(index_name, dict(index_args or {})))
            else:
                attributes.append(Attribute(name, dict(args or {})))
        return attributes

    def generate_property_attributes(self, prop: PropertyInfo, class_name: str) -> List[Attribute]:
        if prop.range is None or prop.range_name is None:
            return []

        column_options = dict(prop.orm_column or {})
        relation_options = {
            key: column_options.pop(key) for key in RELATION_OPTION_KEYS if key in column_options
        }

        if prop.is_id:
            return self.generate_id_attributes(class_name)

        storage_type = infer_storage_type(prop, self.type_converter)
        if storage_type is not None:
            return [Attribute(OrmDeclarations.COLUMN, self._column_args(prop, storage_type, column_options))]

        relation_name = self.cardinality_resolver.get_relation_name(prop.range_name)
        if relation_name is None:
            context = {'type': prop.range, 'property': prop.name, 'class': class_name}
            logger.error(UNRESOLVED_RELATION_TEMPLATE, context)
            self.resolution_errors.append(RelationshipError(
                UNRESOLVED_RELATION_TEMPLATE % context,
                source_class=class_name,
                property_name=prop.name,
                target=prop.range,
            ))
            return []

        if prop.is_embedded:
            return [Attribute(OrmDeclarations.EMBEDDED, {'class': relation_name, 'columnPrefix': prop.column_prefix})]

        for key in JOIN_COLUMN_EXCLUDED_KEYS:
            column_options.pop(key, None)

        return self.cardinality_resolver.build_relation_attributes(
            prop,
            relation_name,
            relation_table_name=self._relation_table_name(prop, class_name),
            column_options=column_options,
            relation_options=relation_options,
        )

    def _column_args(self, prop: PropertyInfo, storage_type: str, column_options: Dict[str, Any]) -> Dict[str, Any]:
        args: Dict[str, Any] = {}
        if storage_type != StorageTypes.DEFAULT:
            args['type'] = storage_type
        if prop.is_nullable:
            args['nullable'] = True
        if prop.is_unique:
            args['unique'] = True
        if is_reserved_keyword(prop.name):
            args['name'] = f'`{prop.name}`'
        args.update(column_options)
        return args

    def _relation_table_name(self, prop: PropertyInfo, class_name: str) -> Optional[str]:
        configured = self.config.relation_table_name_for(class_name, prop.name)
        return configured if configured is not None else prop.relation_table_name

    def generate_id_attributes(self, class_name: str) -> List[Attribute]:
        """Identifier declarations using ``id`` merged with the class ``pk`` settings."""
        id_config = self.config.id_config_for(class_name)
        strategy = id_config.generation_strategy

        attributes = [Attribute(OrmDeclarations.ID)]
        if strategy != IdGenerationStrategies.NONE and not id_config.writable:
            attributes.append(Attribute(OrmDeclarations.GENERATED_VALUE, {'strategy': strategy.upper()}))
        attributes.append(Attribute(
            OrmDeclarations.COLUMN,
            {'type': ID_STORAGE_TYPES.get(strategy, StorageTypes.STRING)}
        ))
        return attributes

    def generate_uses(self, class_: ClassInfo) -> List[Use]:
        return [] if class_.is_enum else [Use(ImportPaths.ORM_MAPPING, ImportPaths.ORM_ALIAS)]
