"""
Synthesis of property types, default values, accessors and constructors.

Generated methods are built as AST nodes and stored as source text, the same
form the loader gives to hand-written methods.
"""

import ast
import logging
from typing import Any, List, Optional

from ..config_validation import GeneratorConfig
from ..constants import GenerationOptions, TypeHints
from ..domain.models import PropertyInfo
from ..domain.naming import accessor_name, parameter_name, singularize
from ..domain.type_inference import TypeConverter
from .artifact import NO_VALUE, GeneratedMethod
from .base import create_function

logger = logging.getLogger(__name__)


def element_type(prop: PropertyInfo, converter: TypeConverter) -> Optional[str]:
    """Python type of a single value of the property."""
    return converter.get_python_type(prop) or prop.range_name


def property_type(prop: PropertyInfo, converter: TypeConverter) -> Optional[str]:
    """
    Annotation of a generated field.

    An explicit type hint is used as is. Otherwise arrays become ``List[...]``
    and nullable scalars ``Optional[...]``. ``None`` means the type is unknown.
    """
    if prop.type_hint:
        base = prop.type_hint
    else:
        element = element_type(prop, converter)
        if element is None:
            return None
        base = f"List[{element}]" if prop.is_array else element

    if prop.is_nullable and not prop.is_array:
        return f"Optional[{base}]"
    return base


def guess_default(prop: PropertyInfo, config: GeneratorConfig) -> Any:
    """Default value of a generated field, or ``NO_VALUE`` when it has none."""
    if prop.is_array and not prop.is_type_hinted_as_collection and (
        prop.is_enum
        or not prop.type_hint
        or prop.type_hint == TypeHints.LIST
        or not config.doctrine.use_collection
    ):
        return []
    if prop.is_nullable:
        return None
    return NO_VALUE


def initialized_by_constructor(prop: PropertyInfo, config: GeneratorConfig) -> bool:
    return config.doctrine.use_collection and prop.is_collection_valued


def _docstring(lines: List[str]) -> Optional[str]:
    return "\n".join(lines) if lines else None


def _method(function: ast.FunctionDef) -> GeneratedMethod:
    return GeneratedMethod(function.name, ast.unparse(function))


def _returns(annotation: Optional[str]) -> str:
    return f" -> {annotation}" if annotation else ""


def _parameter(name: str, annotation: Optional[str]) -> str:
    return f"{name}: {annotation}" if annotation else name


def build_constructor(field_names: List[str], call_parent: bool) -> GeneratedMethod:
    """``__init__`` initializing the given fields with empty lists."""
    body = [GenerationOptions.PARENT_CONSTRUCTOR_CALL] if call_parent else []
    body.extend(f"self.{field_name} = []" for field_name in field_names)
    return _method(create_function(f"def {GenerationOptions.CONSTRUCTOR_NAME}(self) -> None", body))


def build_getter(prop: PropertyInfo, field_name: str, annotation: Optional[str]) -> GeneratedMethod:
    return _method(create_function(
        f"def {accessor_name('get', prop.name)}(self){_returns(annotation)}",
        [f"return self.{field_name}"],
        _docstring(prop.getter_annotations),
    ))


def build_setter(
    prop: PropertyInfo, field_name: str, annotation: Optional[str], class_name: str, fluent: bool
) -> GeneratedMethod:
    param = parameter_name(prop.name)
    body = [f"self.{field_name} = {param}"]
    if fluent:
        body.append("return self")
    return _method(create_function(
        f"def {accessor_name('set', prop.name)}(self, {_parameter(param, annotation)})"
        f"{_returns(class_name if fluent else 'None')}",
        body,
        _docstring(prop.setter_annotations),
    ))


def build_adder(
    prop: PropertyInfo, field_name: str, item_annotation: Optional[str], class_name: str,
    fluent: bool, may_be_none: bool
) -> GeneratedMethod:
    param = parameter_name(singularize(prop.name))
    value = f"str({param})" if prop.is_enum else param
    body = []
    if may_be_none:
        body.extend([f"if self.{field_name} is None:", f"    self.{field_name} = []"])
    body.append(f"self.{field_name}.append({value})")
    if fluent:
        body.append("return self")
    return _method(create_function(
        f"def {accessor_name('add', singularize(prop.name))}(self, {_parameter(param, item_annotation)})"
        f"{_returns(class_name if fluent else 'None')}",
        body,
        _docstring(prop.adder_annotations),
    ))


def build_remover(
    prop: PropertyInfo, field_name: str, item_annotation: Optional[str], class_name: str,
    fluent: bool, may_be_none: bool
) -> GeneratedMethod:
    param = parameter_name(singularize(prop.name))
    value = f"str({param})" if prop.is_enum else param
    collection = f"(self.{field_name} or [])" if may_be_none else f"self.{field_name}"
    body = [f"if {value} in {collection}:", f"    self.{field_name}.remove({value})"]
    if fluent:
        body.append("return self")
    return _method(create_function(
        f"def {accessor_name('remove', singularize(prop.name))}(self, {_parameter(param, item_annotation)})"
        f"{_returns(class_name if fluent else 'None')}",
        body,
        _docstring(prop.remover_annotations),
    ))


def build_accessors(
    prop: PropertyInfo,
    field_name: str,
    class_name: str,
    config: GeneratorConfig,
    converter: TypeConverter,
) -> List[GeneratedMethod]:
    """
    Accessors of a property, in the order they are added to the class.

    Readable properties get a getter. Writable scalars get a setter and
    writable arrays an adder and a remover.
    """
    annotation = property_type(prop, converter)
    fluent = config.fluent_mutator_methods
    methods = []

    if prop.is_readable:
        methods.append(build_getter(prop, field_name, annotation))

    if prop.is_writable:
        if prop.is_array:
            item_annotation = prop.adder_remover_type_hint or element_type(prop, converter)
            may_be_none = guess_default(prop, config) is None and not initialized_by_constructor(prop, config)
            methods.append(build_adder(prop, field_name, item_annotation, class_name, fluent, may_be_none))
            methods.append(build_remover(prop, field_name, item_annotation, class_name, fluent, may_be_none))
        else:
            methods.append(build_setter(prop, field_name, annotation, class_name, fluent))

    return methods
