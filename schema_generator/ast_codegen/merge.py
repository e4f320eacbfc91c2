"""
Merge engine.

Folds the generated form of a class into a (possibly hand-edited) module
without destroying manual edits:

- declarations, constants, imports and methods are only ever added;
- properties of the model are re-synthesized in place, keeping their
  declarations and documentation;
- properties that are not part of the model are kept after the generated ones.

Merging the same class twice is a no-op.
"""

import logging
from typing import Dict, Optional

from ..config_validation import GeneratorConfig
from ..constants import GenerationOptions, ImportPaths
from ..domain.models import ClassInfo, PropertyInfo, Use
from ..domain.naming import storage_name
from ..domain.type_inference import TypeConverter
from .accessors import build_accessors, build_constructor, guess_default, initialized_by_constructor, property_type
from .artifact import (
    GeneratedAttribute, GeneratedClass, GeneratedConstant, GeneratedFile,
    GeneratedNamespace, GeneratedProperty
)

logger = logging.getLogger(__name__)

ENUM_BASE = "Enum"


def class_to_file(
    class_: ClassInfo,
    config: GeneratorConfig,
    file: Optional[GeneratedFile] = None,
    type_converter: Optional[TypeConverter] = None,
) -> GeneratedFile:
    """
    Merge a class of the model into ``file`` (a new file when omitted).

    Args:
        class_: Class after the mutators ran
        config: Validated generator configuration
        file: Previously generated or loaded module, modified in place
        type_converter: Converter used to type the generated fields

    Returns:
        The merged file
    """
    file = file if file is not None else GeneratedFile()
    converter = type_converter or TypeConverter()

    if config.header and not file.header:
        file.header = config.header

    namespace = _namespace_for(file, class_)
    for use in class_.uses:
        namespace.add_use(use)

    generated_class = namespace.get_class(class_.name)
    if generated_class is None:
        generated_class = namespace.add_class(GeneratedClass(class_.name))
        logger.debug(f"Created class '{class_.name}' in namespace '{namespace.name}'")

    _merge_class_header(class_, generated_class, namespace)
    _merge_constants(class_, generated_class)
    _merge_properties(class_, generated_class, config, converter)
    _merge_constructor(class_, generated_class, config)
    if config.accessor_methods:
        _merge_accessors(class_, generated_class, config, converter)

    return file


def _namespace_for(file: GeneratedFile, class_: ClassInfo) -> GeneratedNamespace:
    for namespace in file.namespaces.values():
        if class_.name in namespace.classes:
            return namespace
    return file.add_namespace(class_.namespace)


def _merge_class_header(class_: ClassInfo, generated_class: GeneratedClass, namespace: GeneratedNamespace) -> None:
    present = {attribute.name for attribute in generated_class.attributes}
    for attribute in class_.attributes:
        if attribute.name not in present:
            generated_class.add_attribute(GeneratedAttribute.from_attribute(attribute))

    if not generated_class.docstring and class_.annotations:
        generated_class.docstring = "\n".join(class_.annotations)

    generated_class.is_abstract = class_.is_abstract
    if class_.is_abstract:
        namespace.add_use(Use(ImportPaths.ABC))

    if not generated_class.extends:
        if class_.is_enum or class_.is_parent_enum:
            generated_class.extends = ENUM_BASE
            namespace.add_use(Use(ImportPaths.ENUM))
        elif class_.has_parent:
            generated_class.extends = class_.parent

    interface = class_.interface_name
    if interface and interface not in generated_class.implements and interface != generated_class.extends:
        generated_class.implements.append(interface)


def _merge_constants(class_: ClassInfo, generated_class: GeneratedClass) -> None:
    for constant in class_.constants.values():
        if not generated_class.has_constant(constant.name):
            generated_class.add_constant(GeneratedConstant(constant.name, constant.value, constant.comment))


def _merge_properties(
    class_: ClassInfo, generated_class: GeneratedClass, config: GeneratorConfig, converter: TypeConverter
) -> None:
    merged: Dict[str, GeneratedProperty] = {}
    for prop in class_.sorted_properties():
        existing = generated_class.get_property(prop.name)
        merged[prop.name] = _synthesize_property(prop, existing, config, converter)

    # Properties added by hand stay, after the generated ones
    for name, existing in generated_class.properties.items():
        if name not in merged:
            merged[name] = existing

    generated_class.properties = merged


def _synthesize_property(
    prop: PropertyInfo,
    existing: Optional[GeneratedProperty],
    config: GeneratorConfig,
    converter: TypeConverter,
) -> GeneratedProperty:
    generated = existing if existing is not None else GeneratedProperty(prop.name, config.field_visibility)
    generated.visibility = config.field_visibility
    generated.type = property_type(prop, converter)
    generated.default = guess_default(prop, config)

    present = {attribute.name for attribute in generated.attributes}
    for attribute in prop.attributes:
        if attribute.name not in present:
            generated.add_attribute(GeneratedAttribute.from_attribute(attribute))

    if not generated.docstring and prop.annotations:
        generated.docstring = "\n".join(prop.annotations)

    return generated


def _merge_constructor(class_: ClassInfo, generated_class: GeneratedClass, config: GeneratorConfig) -> None:
    if not (config.doctrine.use_collection and class_.has_constructor):
        return
    if generated_class.has_method(GenerationOptions.CONSTRUCTOR_NAME):
        return

    field_names = [
        storage_name(prop.name, config.field_visibility)
        for prop in class_.sorted_properties()
        if initialized_by_constructor(prop, config)
    ]
    if not field_names:
        return

    generated_class.add_method(build_constructor(field_names, class_.parent_has_constructor), first=True)
    logger.debug(f"Added constructor to class '{class_.name}'")


def _merge_accessors(
    class_: ClassInfo, generated_class: GeneratedClass, config: GeneratorConfig, converter: TypeConverter
) -> None:
    for prop in class_.sorted_properties():
        field_name = storage_name(prop.name, config.field_visibility)
        for method in build_accessors(prop, field_name, class_.name, config, converter):
            if not generated_class.has_method(method.name):
                generated_class.add_method(method)
