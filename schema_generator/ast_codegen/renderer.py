"""
Python source renderer for generated modules.

Layout of a rendered module::

    \"\"\"Header.\"\"\"

    from __future__ import annotations

    from api_platform.core.annotation import ApiProperty, ApiResource
    from doctrine.orm import mapping as ORM
    from typing import Annotated, Optional


    @ApiResource(shortName='Book', iri='https://schema.org/Book')
    @ORM.Entity()
    class Book:
        \"\"\"A book.\"\"\"

        __name: Annotated[Optional[str], ORM.Column(type='text', nullable=True)] = None
        \"\"\"The name of the item.\"\"\"

        def getName(self) -> Optional[str]:
            return self.__name

Annotations are postponed (``from __future__ import annotations``) so that
relation targets defined in other modules never have to be importable at
class creation time.
"""

import ast
import logging
import re
import textwrap
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..constants import GenerationOptions
from ..domain.models import Use
from .artifact import GeneratedClass, GeneratedConstant, GeneratedFile, GeneratedProperty
from .base import create_declaration, create_import, create_value
from ..codegen_utils import format_python_code_using_black

logger = logging.getLogger(__name__)

INDENT = GenerationOptions.DEFAULT_INDENT
FUTURE_IMPORT = "from __future__ import annotations"

# Names that generated annotations may reference, with the module providing them
IMPLICIT_IMPORTS: Dict[str, str] = {
    "Annotated": "typing",
    "Any": "typing",
    "Collection": "typing",
    "Dict": "typing",
    "List": "typing",
    "Optional": "typing",
    "Union": "typing",
    "date": "datetime",
    "datetime": "datetime",
    "time": "datetime",
    "timedelta": "datetime",
}
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def render_docstring(content: str, indent: str = "") -> List[str]:
    """Render a docstring; multi-line content is laid out between the quotes."""
    escaped = content.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if "\n" not in escaped:
        if escaped.endswith('"'):
            escaped = escaped[:-1] + '\\"'
        return [f'{indent}"""{escaped}"""']
    lines = [f'{indent}"""']
    lines.extend(f"{indent}{line}" if line else "" for line in escaped.split("\n"))
    lines.append(f'{indent}"""')
    return lines


def split_use(use: Use) -> Tuple[str, Optional[str], int]:
    """Return ``(module, name, level)``; ``name`` is None for a plain ``import``."""
    stripped = use.name.lstrip(".")
    level = len(use.name) - len(stripped)
    if "." in stripped:
        module, name = stripped.rsplit(".", 1)
        return module, name, level
    if level:
        return "", stripped, level
    return stripped, None, 0


def render_imports(uses: Iterable[Use], raw_imports: Iterable[str] = ()) -> List[str]:
    """Render imports sorted by module; names of one module share a statement."""
    plain: List[Use] = []
    grouped: Dict[Tuple[int, str], List[Tuple[str, Optional[str]]]] = {}
    for use in uses:
        module, name, level = split_use(use)
        if name is None:
            plain.append(use)
            continue
        alias = use.alias if use.alias and use.alias != name else None
        names = grouped.setdefault((level, module), [])
        if (name, alias) not in names:
            names.append((name, alias))

    nodes = []
    for use in sorted(plain, key=lambda item: (item.name, item.alias or "")):
        node = create_import(use.name)
        node.names[0].asname = use.alias if use.alias and use.alias != use.name else None
        nodes.append(node)
    for (level, module), names in sorted(grouped.items(), key=lambda item: (item[0][0], item[0][1])):
        nodes.append(create_import(module, sorted(names, key=lambda item: (item[0], item[1] or "")), level))

    lines = [ast.unparse(node) for node in nodes]
    lines.extend(line for line in raw_imports if line not in lines)
    return lines


def render_declaration(name: str, arguments: Dict) -> str:
    return ast.unparse(create_declaration(name, arguments))


def render_annotation(prop: GeneratedProperty) -> str:
    type_source = prop.type or "Any"
    if not prop.attributes:
        return type_source
    metadata = ", ".join(render_declaration(attribute.name, attribute.args) for attribute in prop.attributes)
    return f"Annotated[{type_source}, {metadata}]"


def render_property(prop: GeneratedProperty, indent: str = INDENT) -> List[str]:
    line = f"{indent}{prop.storage_name}: {render_annotation(prop)}"
    if prop.has_default:
        line += f" = {ast.unparse(create_value(prop.default))}"
    lines = [line]
    if prop.docstring:
        lines.extend(render_docstring(prop.docstring, indent))
    return lines


def render_constant(constant: GeneratedConstant, indent: str = INDENT) -> List[str]:
    lines = [f"{indent}{constant.name} = {ast.unparse(create_value(constant.value))}"]
    if constant.comment:
        lines.extend(render_docstring(constant.comment, indent))
    return lines


def _indent_block(source: str, indent: str = INDENT) -> List[str]:
    return [f"{indent}{line}" if line.strip() else "" for line in textwrap.dedent(source).split("\n")]


def render_class(class_: GeneratedClass) -> List[str]:
    lines = [f"@{render_declaration(attribute.name, attribute.args)}" for attribute in class_.attributes]

    bases = list(class_.bases)
    if class_.is_abstract and "ABC" not in bases:
        bases.append("ABC")
    lines.append(f"class {class_.name}({', '.join(bases)}):" if bases else f"class {class_.name}:")

    blocks: List[List[str]] = []
    if class_.docstring:
        blocks.append(render_docstring(class_.docstring, INDENT))
    if class_.constants:
        constant_lines: List[str] = []
        for constant in class_.constants.values():
            constant_lines.extend(render_constant(constant))
        blocks.append(constant_lines)
    blocks.extend(render_property(prop) for prop in class_.properties.values())
    blocks.extend(_indent_block(method.source) for method in class_.methods.values())
    blocks.extend(_indent_block(statement) for statement in class_.statements)

    if not blocks:
        lines.append(f"{INDENT}pass")
        return lines

    for index, block in enumerate(blocks):
        if index:
            lines.append("")
        lines.extend(block)
    return lines


def signature_annotations(source: str) -> List[str]:
    """Parameter and return annotations of a method given as source."""
    function = ast.parse(source).body[0]
    if not isinstance(function, (ast.FunctionDef, ast.AsyncFunctionDef)):
        return []
    arguments = function.args
    annotated = arguments.posonlyargs + arguments.args + arguments.kwonlyargs
    annotated += [arg for arg in (arguments.vararg, arguments.kwarg) if arg is not None]
    annotations = [ast.unparse(arg.annotation) for arg in annotated if arg.annotation is not None]
    if function.returns is not None:
        annotations.append(ast.unparse(function.returns))
    return annotations


def referenced_names(file: GeneratedFile) -> List[str]:
    """Names used by property annotations and generated signatures."""
    sources: List[str] = []
    for namespace in file.namespaces.values():
        for class_ in namespace.classes.values():
            for prop in class_.properties.values():
                sources.append(prop.type or "Any")
                if prop.attributes:
                    sources.append("Annotated")
            for method in class_.methods.values():
                sources.extend(signature_annotations(method.source))
    names: Dict[str, bool] = {}
    for source in sources:
        for name in _IDENTIFIER_PATTERN.findall(source):
            names[name] = True
    return list(names)


def implicit_uses(file: GeneratedFile, declared: Iterable[Use]) -> List[Use]:
    """Imports needed by annotations that no declared import provides."""
    provided = set()
    for use in declared:
        provided.add(use.alias or split_use(use)[1] or use.name)
    needed = []
    for name in referenced_names(file):
        module = IMPLICIT_IMPORTS.get(name)
        if module and name not in provided:
            needed.append(Use(f"{module}.{name}"))
            provided.add(name)
    return needed


def render_file(file: GeneratedFile, format_code: bool = False) -> str:
    """
    Render a generated file to Python source.

    Args:
        file: The file to render
        format_code: Run the result through black

    Returns:
        The module source
    """
    uses: List[Use] = []
    raw_imports: List[str] = []
    members: List[Union[GeneratedClass, str]] = []
    for namespace in file.namespaces.values():
        for use in namespace.uses:
            if use not in uses:
                uses.append(use)
        for line in namespace.raw_imports:
            if line not in raw_imports:
                raw_imports.append(line)
        members.extend(namespace.members)
    uses.extend(implicit_uses(file, uses))

    lines: List[str] = []
    if file.header:
        lines.extend(render_docstring(file.header))
        lines.append("")
    lines.append(FUTURE_IMPORT)
    import_lines = render_imports(uses, raw_imports)
    if import_lines:
        lines.append("")
        lines.extend(import_lines)

    # Statements keep their place relative to the classes that use them
    for member in members:
        lines.extend(["", ""])
        if isinstance(member, GeneratedClass):
            lines.extend(render_class(member))
        else:
            lines.extend(textwrap.dedent(member).split("\n"))

    source = "\n".join(lines) + "\n"
    if format_code:
        module_name = next(iter(file.namespaces), "") or "<generated>"
        source = format_python_code_using_black(module_name, source)
    return source
