# File: tests/conftest.py
# Contains pytest fixtures describing a small vocabulary model.

import pytest
from typing import Dict

from schema_generator.config_validation import GeneratorConfig, validate_and_parse_config
from schema_generator.constants import SCHEMA_ORG, SCHEMA_ORG_ENUMERATION
from schema_generator.domain.models import Cardinality, ClassInfo, Constant, PropertyInfo


def build_registry() -> Dict[str, ClassInfo]:
    """
    Book has a text name, a many-to-many relation to Person and an enum
    property. Person is a plain entity and GenderType an enumeration.
    """
    book = ClassInfo(
        name="Book",
        resource_uri=SCHEMA_ORG + "Book",
        resource_comment="A book.",
        namespace="app.entity",
    )
    book.add_property(PropertyInfo(
        name="name",
        resource_uri=SCHEMA_ORG + "name",
        range=SCHEMA_ORG + "Text",
        range_name="Text",
    ))
    book.add_property(PropertyInfo(
        name="authors",
        resource_uri=SCHEMA_ORG + "author",
        range=SCHEMA_ORG + "Person",
        range_name="Person",
        cardinality=Cardinality.CARDINALITY_N_N,
        is_array=True,
    ))

    person = ClassInfo(name="Person", resource_uri=SCHEMA_ORG + "Person", namespace="app.entity")
    person.add_property(PropertyInfo(
        name="gender",
        resource_uri=SCHEMA_ORG + "gender",
        range=SCHEMA_ORG + "GenderType",
        range_name="GenderType",
        is_enum=True,
    ))

    gender = ClassInfo(
        name="GenderType",
        resource_uri=SCHEMA_ORG + "GenderType",
        namespace="app.enum",
        sub_class_of=[SCHEMA_ORG_ENUMERATION],
    )
    gender.add_constant("MALE", Constant("MALE", SCHEMA_ORG + "Male"))
    gender.add_constant("FEMALE", Constant("FEMALE", SCHEMA_ORG + "Female"))

    return {"Book": book, "Person": person, "GenderType": gender}


# --- Fixtures ---
@pytest.fixture
def registry() -> Dict[str, ClassInfo]:
    """A fresh model for each test; mutators change it in place."""
    return build_registry()


@pytest.fixture
def config() -> GeneratorConfig:
    return validate_and_parse_config({})


@pytest.fixture
def fluent_config() -> GeneratorConfig:
    return validate_and_parse_config({"fluentMutatorMethods": True})
