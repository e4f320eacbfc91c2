"""
Tests for the domain model

This module tests the class and property models and the naming helpers.
"""

from unittest import TestCase

from schema_generator.constants import SCHEMA_ORG, SCHEMA_ORG_ENUMERATION, Visibility
from schema_generator.domain.models import Attribute, ClassInfo, PropertyInfo, Use
from schema_generator.domain.naming import (
    accessor_name,
    is_reserved_keyword,
    parameter_name,
    singularize,
    split_storage_name,
    storage_name,
    ucfirst,
)


class TestClassInfo(TestCase):
    """Test cases for ClassInfo"""

    def test_sorted_properties_puts_identifier_first(self):
        """The identifier comes first, the rest keep model order"""
        class_ = ClassInfo(name="Book")
        class_.add_property(PropertyInfo(name="name"))
        class_.add_property(PropertyInfo(name="isbn"))
        class_.add_property(PropertyInfo(name="id", is_id=True))

        assert [prop.name for prop in class_.sorted_properties()] == ["id", "name", "isbn"]
        assert class_.id_property.name == "id"

    def test_add_property_replaces_same_name(self):
        class_ = ClassInfo(name="Book")
        class_.add_property(PropertyInfo(name="id", range=SCHEMA_ORG + "Text"))
        class_.add_property(PropertyInfo(name="id", is_id=True))

        assert len(class_.properties) == 1
        assert class_.get_property_by_name("id").is_id

    def test_remove_property_by_name(self):
        class_ = ClassInfo(name="Book").add_property(PropertyInfo(name="name"))
        class_.remove_property_by_name("name")
        class_.remove_property_by_name("missing")

        assert not class_.has_property("name")

    def test_parent_is_tri_state(self):
        """None means undetermined, False means explicitly no parent"""
        assert ClassInfo(name="Thing").parent_name is None
        assert ClassInfo(name="Thing", parent=False).parent_name == ''
        assert not ClassInfo(name="Thing", parent=False).has_parent
        assert ClassInfo(name="Book").with_parent("CreativeWork").has_parent

    def test_enum_detection(self):
        assert ClassInfo(name="GenderType", sub_class_of=[SCHEMA_ORG_ENUMERATION]).is_enum
        assert not ClassInfo(name="Book", sub_class_of=[SCHEMA_ORG + "CreativeWork"]).is_enum
        assert ClassInfo(name="GenderType", parent="Enum").is_parent_enum

    def test_attributes_and_uses_are_deduplicated(self):
        """Equal name and arguments means the same declaration"""
        class_ = ClassInfo(name="Book")
        class_.add_attribute(Attribute("ORM.Entity"))
        class_.add_attribute(Attribute("ORM.Entity"))
        class_.add_attribute(Attribute("ORM.Table", {"name": "book"}))
        class_.add_use(Use("doctrine.orm.mapping", "ORM"))
        class_.add_use(Use("doctrine.orm.mapping", "ORM"))

        assert len(class_.attributes) == 2
        assert class_.uses == [Use("doctrine.orm.mapping", "ORM")]

    def test_annotations_keep_paragraph_breaks(self):
        class_ = ClassInfo(name="Book")
        for line in ["First.", "", "Second.", "", "First."]:
            class_.add_annotation(line)

        assert class_.annotations == ["First.", "", "Second.", ""]

    def test_unique_properties(self):
        class_ = ClassInfo(name="Book")
        class_.add_property(PropertyInfo(name="isbn", is_unique=True))
        class_.add_property(PropertyInfo(name="name"))

        assert class_.unique_property_names == ["isbn"]


class TestPropertyInfo(TestCase):
    """Test cases for PropertyInfo"""

    def test_defaults(self):
        prop = PropertyInfo(name="name")

        assert prop.is_nullable
        assert prop.is_readable and prop.is_writable
        assert not prop.is_array

    def test_collection_valued(self):
        """Arrays are collections unless they are enums or plain lists"""
        assert PropertyInfo(name="authors", is_array=True).is_collection_valued
        assert not PropertyInfo(name="tags", is_array=True, type_hint="list").is_collection_valued
        assert not PropertyInfo(name="genders", is_array=True, is_enum=True).is_collection_valued
        assert not PropertyInfo(name="name").is_collection_valued

    def test_type_hinted_as_collection(self):
        assert PropertyInfo(name="authors", type_hint="Collection").is_type_hinted_as_collection
        assert PropertyInfo(name="authors", type_hint="Collection[Person]").is_type_hinted_as_collection
        assert not PropertyInfo(name="authors", type_hint="list").is_type_hinted_as_collection

    def test_mark_as_custom(self):
        assert PropertyInfo(name="slug").mark_as_custom().is_custom


class TestNaming(TestCase):
    """Test cases for naming helpers"""

    def test_accessor_names(self):
        assert ucfirst("birthDate") == "BirthDate"
        assert accessor_name("get", "name") == "getName"
        assert accessor_name("add", singularize("authors")) == "addAuthor"

    def test_singularize_keeps_singular_words(self):
        assert singularize("author") == "author"

    def test_reserved_keywords_are_case_insensitive(self):
        assert is_reserved_keyword("Group")
        assert is_reserved_keyword("LIKE")
        assert not is_reserved_keyword("Book")

    def test_storage_names_round_trip(self):
        for visibility in (Visibility.PUBLIC, Visibility.PROTECTED, Visibility.PRIVATE):
            stored = storage_name("name", visibility)
            assert split_storage_name(stored) == ("name", visibility)

        assert storage_name("name", Visibility.PRIVATE) == "__name"
        assert storage_name("name", Visibility.PROTECTED) == "_name"

    def test_python_keywords_get_a_trailing_underscore(self):
        assert parameter_name("yield") == "yield_"
        assert storage_name("yield", Visibility.PUBLIC) == "yield_"
        assert split_storage_name("yield_") == ("yield", Visibility.PUBLIC)
