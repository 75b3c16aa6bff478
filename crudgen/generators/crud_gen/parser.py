"""Parser for the compact field specification (``name:string,price?:number``)."""
import keyword
import logging
from typing import List, Tuple

from crudgen.core.errors import EmptySpec, MalformedFieldSpec
from crudgen.generators.crud_gen.type_map import is_known_type, resolve_type
from crudgen.generators.crud_gen.types import FieldSpec

log = logging.getLogger(__name__)

OPTIONAL_MARKER = "?"
DEFAULT_TYPE_TOKEN = "string"


def _strip_marker(part: str) -> Tuple[str, bool]:
    part = part.strip()
    if part.endswith(OPTIONAL_MARKER):
        return part[:-1].strip(), True
    return part, False


def parse_field(token: str, index: int) -> FieldSpec:
    """Parse one ``name[?]:type[?]`` token.

    The optional marker may sit on the name or on the type; either marks the
    field optional.
    """
    if ":" not in token:
        raise MalformedFieldSpec(token, index)

    raw_name, raw_type = token.split(":", 1)
    name, name_optional = _strip_marker(raw_name)
    type_token, type_optional = _strip_marker(raw_type)

    if not name:
        raise MalformedFieldSpec(token, index, "field name is empty")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise MalformedFieldSpec(token, index, f"{name!r} is not a valid identifier")

    if not type_token:
        type_token = DEFAULT_TYPE_TOKEN
    elif not is_known_type(type_token):
        log.warning("Unknown type %r for field %r, falling back to string", type_token, name)

    mapping = resolve_type(type_token)
    return FieldSpec(
        name=name,
        raw_type=type_token,
        optional=name_optional or type_optional,
        value_type=mapping.value_type,
        column_type=mapping.column_type,
    )


def parse_fields(spec: str) -> List[FieldSpec]:
    """Parse a comma-separated field specification, preserving order."""
    if spec is None or not spec.strip():
        raise EmptySpec()

    fields = []
    seen = set()
    for index, token in enumerate(spec.split(",")):
        field = parse_field(token, index)
        if field.name in seen:
            raise MalformedFieldSpec(token, index, f"duplicate field name {field.name!r}")
        seen.add(field.name)
        fields.append(field)
    return fields
