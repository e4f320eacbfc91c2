"""
Loader turning an existing Python module back into a ``GeneratedFile``.

Properties, constants, declarations and imports are parsed into structure so
the merge engine can update them. Methods and any other statement are kept as
their exact source text, comments included.
"""

import ast
import inspect
import logging
import textwrap
from typing import List, Optional

from ..domain.models import Use
from ..domain.naming import split_storage_name
from ..exceptions import CodeGenerationError
from .artifact import (
    NO_VALUE, GeneratedAttribute, GeneratedClass, GeneratedConstant,
    GeneratedFile, GeneratedMethod, GeneratedNamespace, GeneratedProperty
)
from .base import literal_or_raw, parse_declaration

logger = logging.getLogger(__name__)

ABSTRACT_BASE = "ABC"


def _string_value(node: Optional[ast.stmt]) -> Optional[str]:
    """Cleaned text of a bare string statement, the form of attribute docstrings."""
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Constant) and isinstance(node.value.value, str):
        return inspect.cleandoc(node.value.value)
    return None


def _comment_indent(line: str) -> Optional[int]:
    stripped = line.lstrip()
    if not stripped.startswith("#"):
        return None
    return len(line) - len(stripped)


def _segment(node: ast.stmt, lines: List[str]) -> str:
    """
    Exact source of a statement, dedented.

    Decorators and the comment lines directly above the statement are
    included, and so are comment lines indented deeper than the statement
    that follow its last line (comments closing a method body).
    """
    decorators = getattr(node, "decorator_list", [])
    start = min([node.lineno] + [decorator.lineno for decorator in decorators])
    while start > 1 and _comment_indent(lines[start - 2]) == node.col_offset:
        start -= 1

    end = node.end_lineno
    index = end
    while index < len(lines):
        if lines[index].strip():
            indent = _comment_indent(lines[index])
            if indent is None or indent <= node.col_offset:
                break
            end = index + 1
        index += 1

    return textwrap.dedent("\n".join(lines[start - 1:end]))


def _is_annotated(node: ast.expr) -> bool:
    if not isinstance(node, ast.Subscript) or not isinstance(node.slice, ast.Tuple):
        return False
    return ast.unparse(node.value) in ("Annotated", "typing.Annotated")


def load_property(node: ast.AnnAssign, docstring: Optional[str]) -> GeneratedProperty:
    name, visibility = split_storage_name(node.target.id)
    prop = GeneratedProperty(name, visibility, docstring=docstring)

    if _is_annotated(node.annotation):
        type_node, *metadata = node.annotation.slice.elts
        prop.type = ast.unparse(type_node)
        for declaration in metadata:
            prop.add_attribute(GeneratedAttribute(*parse_declaration(declaration)))
    else:
        prop.type = ast.unparse(node.annotation)

    prop.default = literal_or_raw(node.value) if node.value is not None else NO_VALUE
    return prop


def load_class(node: ast.ClassDef, lines: List[str]) -> GeneratedClass:
    class_ = GeneratedClass(node.name, docstring=ast.get_docstring(node))

    for decorator in node.decorator_list:
        class_.add_attribute(GeneratedAttribute(*parse_declaration(decorator)))

    for base in (ast.unparse(base) for base in node.bases):
        if base == ABSTRACT_BASE:
            class_.is_abstract = True
        elif class_.extends is None:
            class_.extends = base
        else:
            class_.implements.append(base)

    body = node.body[1:] if class_.docstring is not None else node.body
    index = 0
    while index < len(body):
        statement = body[index]
        following = body[index + 1] if index + 1 < len(body) else None
        documented = _string_value(following)

        if isinstance(statement, ast.AnnAssign) and isinstance(statement.target, ast.Name):
            class_.add_property(load_property(statement, documented))
            index += 2 if documented is not None else 1
            continue

        if (
            isinstance(statement, ast.Assign)
            and len(statement.targets) == 1
            and isinstance(statement.targets[0], ast.Name)
        ):
            class_.add_constant(GeneratedConstant(
                statement.targets[0].id, literal_or_raw(statement.value), documented
            ))
            index += 2 if documented is not None else 1
            continue

        if isinstance(statement, (ast.FunctionDef, ast.AsyncFunctionDef)):
            class_.add_method(GeneratedMethod(statement.name, _segment(statement, lines)))
        elif not isinstance(statement, ast.Pass):
            class_.statements.append(_segment(statement, lines))
        index += 1

    return class_


def _load_import_from(node: ast.ImportFrom, namespace: GeneratedNamespace, lines: List[str]) -> None:
    if node.module == "__future__":
        return
    prefix = "." * node.level + (f"{node.module}." if node.module else "")
    for alias in node.names:
        if alias.name == "*":
            namespace.raw_imports.append(_segment(node, lines))
            return
        namespace.add_use(Use(prefix + alias.name, alias.asname))


def _load_import(node: ast.Import, namespace: GeneratedNamespace) -> None:
    for alias in node.names:
        if "." in alias.name and not alias.asname:
            # ``import a.b`` binds ``a``; no Use renders back to that form
            namespace.raw_imports.append(f"import {alias.name}")
        else:
            namespace.add_use(Use(alias.name, alias.asname))


def load_file(source: str, namespace: str = "") -> GeneratedFile:
    """
    Parse module source into a generated file.

    Args:
        source: Python source of a previously generated or hand-written module
        namespace: Namespace the module's classes belong to

    Raises:
        CodeGenerationError: If the source is not valid Python
    """
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        raise CodeGenerationError(
            f"Cannot parse existing module: {e.msg} (line {e.lineno})",
            component="loader",
            context={'namespace': namespace},
        ) from e

    lines = source.splitlines()
    file = GeneratedFile(header=ast.get_docstring(tree))
    generated_namespace = file.add_namespace(namespace)

    body = tree.body[1:] if file.header is not None else tree.body
    for node in body:
        if isinstance(node, ast.ImportFrom):
            _load_import_from(node, generated_namespace, lines)
        elif isinstance(node, ast.Import):
            _load_import(node, generated_namespace)
        elif isinstance(node, ast.ClassDef):
            generated_namespace.add_class(load_class(node, lines))
        else:
            generated_namespace.add_statement(_segment(node, lines))

    logger.debug(f"Loaded {len(generated_namespace.classes)} classes from module '{namespace}'")
    return file
