"""Utility functions for CRUD generation."""
import keyword
import re

from crudgen.core.errors import InvalidEntityName
from crudgen.generators.crud_gen.types import EntityNames


RESERVED_FIELD_NAMES = {"id"}


def to_pascal_case(name: str) -> str:
    """Upper-case the first character, leave the rest unchanged."""
    return name[:1].upper() + name[1:]


def to_camel_case(name: str) -> str:
    """Lower-case the first character, leave the rest unchanged."""
    return name[:1].lower() + name[1:]


def to_snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1)
    return s2.lower()


def pluralize(name: str) -> str:
    """Plural form used for tables and routes: a plain ``s`` suffix."""
    return name + "s"


def derive_names(entity_name: str) -> EntityNames:
    """Compute every naming variant of an entity.

    ``Product`` / ``product`` / ``products`` for ``"product"``. Raises
    InvalidEntityName for an empty name, one that is not an identifier, one
    that does not start with a letter, or one whose type or instance form is
    a Python keyword.
    """
    name = (entity_name or "").strip()
    instance_name = to_camel_case(name)
    type_name = to_pascal_case(name)
    # Both variants become identifiers in generated code (None, True, class ...)
    if (
        not name
        or not name[0].isalpha()
        or not name.isidentifier()
        or keyword.iskeyword(instance_name)
        or keyword.iskeyword(type_name)
    ):
        raise InvalidEntityName(entity_name)

    return EntityNames(
        type_name=type_name,
        instance_name=instance_name,
        collection_name=pluralize(instance_name),
    )


def is_reserved_field(field_name: str) -> bool:
    """True only for the exact primary key name, not for names like ``parentId``."""
    return field_name in RESERVED_FIELD_NAMES
