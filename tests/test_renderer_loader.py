"""
Tests for rendering generated modules and loading them back
"""

from unittest import TestCase

from schema_generator.ast_codegen import (
    GeneratedAttribute,
    GeneratedClass,
    GeneratedConstant,
    GeneratedFile,
    GeneratedMethod,
    GeneratedProperty,
    load_file,
    render_file,
)
from schema_generator.ast_codegen.artifact import NO_VALUE, RawExpression
from schema_generator.ast_codegen.renderer import render_docstring, render_imports
from schema_generator.domain.models import Use
from schema_generator.exceptions import CodeGenerationError


def _file_with(class_: GeneratedClass, uses=(), header=None) -> GeneratedFile:
    file = GeneratedFile(header=header)
    namespace = file.add_namespace("app.entity")
    for use in uses:
        namespace.add_use(use)
    namespace.add_class(class_)
    return file


class TestRenderer(TestCase):
    """Test cases for render_file"""

    def test_module_layout(self):
        class_ = GeneratedClass("Book", docstring="A book.")
        class_.add_attribute(GeneratedAttribute("ORM.Entity"))
        class_.add_property(GeneratedProperty(
            "name", "private", "Optional[str]", None, "The name.",
            [GeneratedAttribute("ORM.Column", {"type": "text", "nullable": True})],
        ))

        source = render_file(_file_with(class_, [Use("doctrine.orm.mapping", "ORM")], header="Generated."))

        assert source == (
            '"""Generated."""\n'
            "\n"
            "from __future__ import annotations\n"
            "\n"
            "from doctrine.orm import mapping as ORM\n"
            "from typing import Annotated, Optional\n"
            "\n"
            "\n"
            "@ORM.Entity()\n"
            "class Book:\n"
            '    """A book."""\n'
            "\n"
            "    __name: Annotated[Optional[str], ORM.Column(type='text', nullable=True)] = None\n"
            '    """The name."""\n'
        )

    def test_empty_class_gets_pass(self):
        source = render_file(_file_with(GeneratedClass("Thing")))

        assert "class Thing:\n    pass\n" in source

    def test_visibility_and_defaults(self):
        class_ = GeneratedClass("Book")
        class_.add_property(GeneratedProperty("isbn", "protected", "str"))
        class_.add_property(GeneratedProperty("tags", "public", "List[str]", []))
        class_.add_property(GeneratedProperty("yield", "public", None, NO_VALUE))

        source = render_file(_file_with(class_))

        assert "    _isbn: str\n" in source
        assert "    tags: List[str] = []\n" in source
        assert "    yield_: Any\n" in source
        assert "from typing import Any, List\n" in source

    def test_declaration_arguments(self):
        class_ = GeneratedClass("Person")
        class_.add_property(GeneratedProperty("address", "private", "Optional[PostalAddress]", None, attributes=[
            GeneratedAttribute("ORM.Embedded", {"class": "PostalAddress", "columnPrefix": "address_"}),
        ]))
        class_.add_attribute(GeneratedAttribute("ORM.InheritanceType", {0: "JOINED"}))
        class_.add_attribute(GeneratedAttribute("ORM.Table", {"options": RawExpression("TABLE_OPTIONS")}))

        source = render_file(_file_with(class_))

        assert "ORM.Embedded(columnPrefix='address_', **{'class': 'PostalAddress'})" in source
        assert "@ORM.InheritanceType('JOINED')\n" in source
        assert "@ORM.Table(options=TABLE_OPTIONS)\n" in source

    def test_enum_and_abstract_bases(self):
        enum = GeneratedClass("GenderType", extends="Enum")
        enum.add_constant(GeneratedConstant("MALE", "https://schema.org/Male", "A male."))
        abstract = GeneratedClass("Thing", is_abstract=True)

        enum_source = render_file(_file_with(enum, [Use("enum.Enum")]))
        abstract_source = render_file(_file_with(abstract, [Use("abc.ABC")]))

        assert "from enum import Enum\n" in enum_source
        assert "class GenderType(Enum):\n    MALE = 'https://schema.org/Male'\n    \"\"\"A male.\"\"\"\n" in enum_source
        assert "class Thing(ABC):\n" in abstract_source
        assert "from abc import ABC\n" in abstract_source

    def test_multiline_docstring(self):
        assert render_docstring("A book.\n\nSee: https://schema.org/Book", "    ") == [
            '    """',
            "    A book.",
            "",
            "    See: https://schema.org/Book",
            '    """',
        ]

    def test_imports_are_grouped_and_sorted(self):
        lines = render_imports([
            Use("typing.Optional"),
            Use("api_platform.core.annotation.ApiResource"),
            Use("os"),
            Use("typing.List"),
            Use("api_platform.core.annotation.ApiProperty"),
            Use(".person.Person"),
        ], ["import app.legacy"])

        assert lines == [
            "import os",
            "from api_platform.core.annotation import ApiProperty, ApiResource",
            "from typing import List, Optional",
            "from .person import Person",
            "import app.legacy",
        ]

    def test_method_signatures_add_imports(self):
        class_ = GeneratedClass("Book")
        class_.add_method(GeneratedMethod(
            "getPublished", "def getPublished(self) -> Optional[date]:\n    return self.__published"
        ))

        source = render_file(_file_with(class_))

        assert "from datetime import date\n" in source
        assert "from typing import Optional\n" in source

    def test_black_formatting(self):
        class_ = GeneratedClass("Book")
        class_.add_property(GeneratedProperty("name", "private", "Optional[str]", None))

        source = render_file(_file_with(class_), format_code=True)

        assert "    __name: Optional[str] = None\n" in source
        assert render_file(load_file(source, "app.entity"), format_code=True) == source


class TestLoader(TestCase):
    """Test cases for load_file"""

    SOURCE = '''"""Generated."""

from __future__ import annotations

import app.legacy
from doctrine.orm import mapping as ORM
from typing import Annotated, Optional


@ORM.Entity(repositoryClass='BookRepository')
class Book(Product, ABC):
    """A book."""

    KIND = 'book'
    """Kind of product."""

    __name: Annotated[Optional[str], ORM.Column(type='text', nullable=True)] = None
    """The name."""

    _isbn: str

    class Meta:
        ordering = ['name']

    @property
    def title(self) -> str:
        # Shown in listings
        return self.__name or ''


REGISTRY = {}
'''

    def test_structure(self):
        file = load_file(self.SOURCE, "app.entity")
        namespace = file.get_namespace("app.entity")
        book = namespace.get_class("Book")

        assert file.header == "Generated."
        assert Use("doctrine.orm.mapping", "ORM") in namespace.uses
        assert Use("typing.Optional") in namespace.uses
        assert namespace.raw_imports == ["import app.legacy"]
        assert namespace.statements == ["REGISTRY = {}"]

        assert book.docstring == "A book."
        assert book.extends == "Product"
        assert book.is_abstract
        assert book.attributes == [GeneratedAttribute("ORM.Entity", {"repositoryClass": "BookRepository"})]
        assert book.constants["KIND"] == GeneratedConstant("KIND", "book", "Kind of product.")
        assert book.statements == ["class Meta:\n    ordering = ['name']"]

    def test_properties(self):
        book = load_file(self.SOURCE).find_class("Book")
        name = book.get_property("name")
        isbn = book.get_property("isbn")

        assert name.visibility == "private"
        assert name.type == "Optional[str]"
        assert name.default is None
        assert name.docstring == "The name."
        assert name.get_attribute("ORM.Column").args == {"type": "text", "nullable": True}
        assert isbn.visibility == "protected"
        assert not isbn.has_default

    def test_methods_keep_their_source(self):
        method = load_file(self.SOURCE).find_class("Book").get_method("title")

        assert method.source == (
            "@property\n"
            "def title(self) -> str:\n"
            "    # Shown in listings\n"
            "    return self.__name or ''"
        )

    def test_comments_above_and_closing_a_method_are_kept(self):
        source = (
            "class Book:\n"
            "    def getId(self) -> int:\n"
            "        return self.__id\n"
            "\n"
            "    # Names are kept as entered\n"
            "    def getName(self) -> str:\n"
            "        return self.__name\n"
            "        # Trailing whitespace is kept\n"
            "\n"
            "    # Setters follow\n"
            "    def setName(self, name: str) -> None:\n"
            "        self.__name = name\n"
        )

        book = load_file(source).find_class("Book")

        assert book.get_method("getId").source == "def getId(self) -> int:\n    return self.__id"
        assert book.get_method("getName").source == (
            "# Names are kept as entered\n"
            "def getName(self) -> str:\n"
            "    return self.__name\n"
            "    # Trailing whitespace is kept"
        )
        assert book.get_method("setName").source.startswith("# Setters follow\n")

    def test_module_statements_keep_their_order(self):
        source = "LIMIT = 10\n\n\nclass Book:\n    pass\n\n\nREGISTRY = {}\n"

        namespace = load_file(source, "app.entity").get_namespace("app.entity")
        rendered = render_file(load_file(source, "app.entity"))

        assert [getattr(member, "name", member) for member in namespace.members] == ["LIMIT = 10", "Book", "REGISTRY = {}"]
        assert rendered.index("LIMIT = 10") < rendered.index("class Book:") < rendered.index("REGISTRY = {}")

    def test_render_after_load_is_stable(self):
        first = render_file(load_file(self.SOURCE, "app.entity"))

        assert render_file(load_file(first, "app.entity")) == first
        assert "    # Shown in listings\n" in first

    def test_unpacked_keywords_round_trip(self):
        source = (
            "class Person:\n"
            "    address: Annotated[Optional[PostalAddress], "
            "ORM.Embedded(columnPrefix='address_', **{'class': 'PostalAddress'})] = None\n"
        )

        attribute = load_file(source).find_class("Person").get_property("address").attributes[0]

        assert attribute.args == {"columnPrefix": "address_", "class": "PostalAddress"}

    def test_invalid_source(self):
        with self.assertRaises(CodeGenerationError) as context:
            load_file("class Book(:\n", "app.entity")

        assert context.exception.context["namespace"] == "app.entity"
