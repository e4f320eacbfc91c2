import ast
import keyword
import logging
from typing import Any, Dict, List, Optional, Tuple

from .artifact import RawExpression

logger = logging.getLogger(__name__)

# Key prefix of a non-literal mapping unpacked into a declaration call
UNPACK_PREFIX = "**"


def create_docstring(content: str) -> ast.Expr:
    """Creates an AST node for a docstring."""
    return ast.Expr(value=ast.Constant(value=content))


def create_name(dotted_name: str) -> ast.expr:
    """Creates a Name or Attribute chain node for a dotted name such as ``ORM.Column``."""
    parts = dotted_name.split(".")
    node: ast.expr = ast.Name(id=parts[0], ctx=ast.Load())
    for part in parts[1:]:
        node = ast.Attribute(value=node, attr=part, ctx=ast.Load())
    return node


def create_import(module: str, names: Optional[List[Tuple[str, Optional[str]]]] = None, level: int = 0) -> ast.Import | ast.ImportFrom:
    """Creates an AST node for an import statement; ``names`` holds ``(name, alias)`` pairs."""
    if names:
        return ast.ImportFrom(
            module=module or None,
            names=[ast.alias(name=name, asname=alias) for name, alias in names],
            level=level,
        )
    return ast.Import(names=[ast.alias(name=module)])


def create_value(value: Any) -> ast.expr:
    """Creates an AST node for a literal value, recursing into containers."""
    if isinstance(value, RawExpression):
        return ast.parse(value.source, mode="eval").body
    if isinstance(value, dict):
        return ast.Dict(
            keys=[create_value(key) for key in value],
            values=[create_value(item) for item in value.values()],
        )
    if isinstance(value, list):
        return ast.List(elts=[create_value(item) for item in value], ctx=ast.Load())
    if isinstance(value, tuple):
        return ast.Tuple(elts=[create_value(item) for item in value], ctx=ast.Load())
    return ast.Constant(value=value)


def is_identifier(name: Any) -> bool:
    """Check if a key can be passed as a Python keyword argument."""
    return isinstance(name, str) and name.isidentifier() and not keyword.iskeyword(name)


def create_keyword(arg: Optional[str], value: ast.expr) -> ast.keyword:
    """Creates an AST keyword argument; ``arg=None`` unpacks a mapping."""
    return ast.keyword(arg=arg, value=value)


def create_call(func_name: str, args: Optional[List[ast.expr]] = None, keywords: Optional[List[ast.keyword]] = None) -> ast.Call:
    """Creates an AST node for a call of a (possibly dotted) callable."""
    return ast.Call(
        func=create_name(func_name),
        args=args or [],
        keywords=keywords or [],
    )


def create_declaration(name: str, arguments: Dict[Any, Any]) -> ast.Call:
    """
    Creates the call node of a declaration.

    Integer keys are positional arguments. Keys that are not usable as Python
    keyword arguments (``class`` for instance) are passed in an unpacked mapping.
    """
    args = [create_value(value) for key, value in arguments.items() if isinstance(key, int)]
    keywords = []
    unpacked: Dict[Any, Any] = {}
    for key, value in arguments.items():
        if isinstance(key, int):
            continue
        if isinstance(key, str) and key.startswith(UNPACK_PREFIX) and isinstance(value, RawExpression):
            keywords.append(create_keyword(None, create_value(value)))
        elif is_identifier(key):
            keywords.append(create_keyword(key, create_value(value)))
        else:
            unpacked[key] = value
    if unpacked:
        keywords.append(create_keyword(None, create_value(unpacked)))
    return create_call(name, args, keywords)


def create_function(signature: str, body: List[str], docstring: Optional[str] = None) -> ast.FunctionDef:
    """
    Creates an AST node for a function from its signature and body lines.

    Example:
        >>> ast.unparse(create_function("def getName(self) -> str", ["return self.__name"]))
        'def getName(self) -> str:\\n    return self.__name'
    """
    function = ast.parse(f"{signature}:\n    pass").body[0]
    statements = ast.parse("\n".join(body)).body if body else [ast.Pass()]
    function.body = ([create_docstring(docstring)] if docstring else []) + statements
    return function


def literal_or_raw(node: ast.expr) -> Any:
    """Value of a literal expression node, or its source when it is not a literal."""
    try:
        return ast.literal_eval(node)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError):
        return RawExpression(ast.unparse(node))


def parse_declaration(node: ast.expr) -> Tuple[str, Dict[Any, Any]]:
    """Inverse of :func:`create_declaration`: return ``(name, arguments)``."""
    if not isinstance(node, ast.Call):
        return ast.unparse(node), {}

    arguments: Dict[Any, Any] = {}
    for index, arg in enumerate(node.args):
        arguments[index] = literal_or_raw(arg)
    for keyword_node in node.keywords:
        value = literal_or_raw(keyword_node.value)
        if keyword_node.arg is None and isinstance(value, dict):
            arguments.update(value)
        elif keyword_node.arg is None:
            # Unpacking of something that is not a literal mapping
            arguments[UNPACK_PREFIX + value.source] = value
        else:
            arguments[keyword_node.arg] = value
    return ast.unparse(node.func), arguments
