"""
Naming convention utilities for the schema generator.

This module provides the naming rules shared by the generators and the merge
engine: accessor method names, singular forms for adders and removers,
visibility-dependent storage names and reserved keyword detection.
"""

import keyword
from typing import Tuple

import inflect

from ..constants import RESERVED_KEYWORDS, Visibility


# Initialize inflect engine for singularization
p = inflect.engine()


def ucfirst(name: str) -> str:
    """
    Uppercase the first character, leaving the rest untouched.

    Example:
        >>> ucfirst("birthDate")
        'BirthDate'
    """
    return name[:1].upper() + name[1:]


def singularize(name: str) -> str:
    """
    Return the singular form of a property name.

    Example:
        >>> singularize("authors")
        'author'
        >>> singularize("author")
        'author'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    # inflect returns False if the word is already singular
    singular = p.singular_noun(name)
    return singular if singular else name


def accessor_name(prefix: str, property_name: str) -> str:
    """
    Build an accessor method name.

    Example:
        >>> accessor_name("get", "name")
        'getName'
    """
    return prefix + ucfirst(property_name)


def is_reserved_keyword(name: str) -> bool:
    """Check (case-insensitively) if a name clashes with a reserved SQL keyword."""
    return name.lower() in RESERVED_KEYWORDS


def parameter_name(name: str) -> str:
    """Name usable as a Python parameter (``yield`` becomes ``yield_``)."""
    return f"{name}_" if keyword.iskeyword(name) else name


def storage_name(name: str, visibility: str) -> str:
    """
    Name under which a property is stored on the generated class.

    Protected fields get one leading underscore and private fields two.
    """
    if visibility == Visibility.PRIVATE:
        return f"__{name}"
    if visibility == Visibility.PROTECTED:
        return f"_{name}"
    return parameter_name(name)


def split_storage_name(stored: str) -> Tuple[str, str]:
    """Inverse of :func:`storage_name`: return ``(name, visibility)``."""
    if stored.startswith("__") and not stored.endswith("__"):
        return stored[2:], Visibility.PRIVATE
    if stored.startswith("_") and not stored.startswith("__"):
        return stored[1:], Visibility.PROTECTED
    if stored.endswith("_") and keyword.iskeyword(stored[:-1]):
        return stored[:-1], Visibility.PUBLIC
    return stored, Visibility.PUBLIC
