"""
Cardinality resolution for relation properties.

This module turns the multiplicity of a relation property into the ordered
list of relational-mapping declarations (association, join column, join table,
inverse join column).
"""

import logging
from typing import List, Dict, Any, Optional

from ..constants import OrmDeclarations
from .models import Attribute, Cardinality, ClassInfo, PropertyInfo


logger = logging.getLogger(__name__)


TO_ONE_CARDINALITIES = (Cardinality.CARDINALITY_0_1, Cardinality.CARDINALITY_1_1)
MANY_TO_ONE_CARDINALITIES = (
    Cardinality.CARDINALITY_UNKNOWN,
    Cardinality.CARDINALITY_N_0,
    Cardinality.CARDINALITY_N_1,
)
TO_MANY_CARDINALITIES = (Cardinality.CARDINALITY_0_N, Cardinality.CARDINALITY_1_N)


class CardinalityResolver:
    """
    Resolves relation properties against a registry of classes.

    The registry maps class names to classes and is only read: relation
    targets are weak references looked up by name.
    """

    def __init__(self, classes: Dict[str, ClassInfo]):
        self.classes = classes

    def get_relation_name(self, range_name: Optional[str]) -> Optional[str]:
        """
        Name to use as relation target.

        Returns the bare range name when it resolves in the registry, None otherwise.
        """
        if range_name is None or range_name not in self.classes:
            return None
        return range_name

    def resolve(
        self,
        prop: PropertyInfo,
        relation_table_name: Optional[str] = None,
        column_options: Optional[Dict[str, Any]] = None,
        relation_options: Optional[Dict[str, Any]] = None,
    ) -> List[Attribute]:
        """
        Resolve a relation property to its declarations.

        Returns an empty list when the relation target does not resolve.
        """
        relation_name = self.get_relation_name(prop.range_name)
        if relation_name is None:
            return []
        return self.build_relation_attributes(
            prop, relation_name, relation_table_name, column_options, relation_options
        )

    def build_relation_attributes(
        self,
        prop: PropertyInfo,
        relation_name: str,
        relation_table_name: Optional[str] = None,
        column_options: Optional[Dict[str, Any]] = None,
        relation_options: Optional[Dict[str, Any]] = None,
    ) -> List[Attribute]:
        """
        Build the declarations of a relation whose target is already resolved.

        Args:
            prop: Relation property (cardinality, mapped_by and inversed_by are used)
            relation_name: Resolved target class name
            relation_table_name: Optional join table name for to-many relations
            column_options: Join column options supplied by configuration
            relation_options: Options for the association itself (cascade, orphanRemoval)
        """
        column_options = dict(column_options or {})
        relation_options = dict(relation_options or {})
        cardinality = prop.cardinality
        attributes: List[Attribute] = []

        if cardinality in TO_ONE_CARDINALITIES:
            attributes.append(Attribute(OrmDeclarations.ONE_TO_ONE, {'targetEntity': relation_name, **relation_options}))
            if cardinality == Cardinality.CARDINALITY_1_1:
                attributes.append(Attribute(OrmDeclarations.JOIN_COLUMN, {'nullable': False, **column_options}))
            else:
                attributes.append(Attribute(OrmDeclarations.JOIN_COLUMN, column_options))

        elif cardinality in MANY_TO_ONE_CARDINALITIES:
            args: Dict[str, Any] = {'targetEntity': relation_name}
            if prop.inversed_by is not None:
                args['inversedBy'] = prop.inversed_by
            attributes.append(Attribute(OrmDeclarations.MANY_TO_ONE, {**args, **relation_options}))
            if cardinality == Cardinality.CARDINALITY_N_1:
                attributes.append(Attribute(OrmDeclarations.JOIN_COLUMN, {'nullable': False, **column_options}))
            else:
                attributes.append(Attribute(OrmDeclarations.JOIN_COLUMN, column_options))

        elif cardinality in TO_MANY_CARDINALITIES:
            if prop.mapped_by is not None:
                attributes.append(Attribute(
                    OrmDeclarations.ONE_TO_MANY,
                    {'targetEntity': relation_name, 'mappedBy': prop.mapped_by, **relation_options}
                ))
            else:
                attributes.append(Attribute(OrmDeclarations.MANY_TO_MANY, {'targetEntity': relation_name, **relation_options}))
            if relation_table_name:
                attributes.append(Attribute(OrmDeclarations.JOIN_TABLE, {'name': relation_table_name}))
            if cardinality == Cardinality.CARDINALITY_1_N:
                attributes.append(Attribute(OrmDeclarations.INVERSE_JOIN_COLUMN, {'nullable': False, 'unique': True}))
            else:
                attributes.append(Attribute(OrmDeclarations.INVERSE_JOIN_COLUMN, {'unique': True}))

        elif cardinality == Cardinality.CARDINALITY_N_N:
            attributes.append(Attribute(OrmDeclarations.MANY_TO_MANY, {'targetEntity': relation_name, **relation_options}))
            if relation_table_name:
                attributes.append(Attribute(OrmDeclarations.JOIN_TABLE, {'name': relation_table_name}))

        logger.debug(f"Resolved {cardinality.value} relation '{prop.name}' to '{relation_name}'")
        return attributes
