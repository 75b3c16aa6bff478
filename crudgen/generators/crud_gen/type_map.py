"""Type tables shared by every emitter.

A type token is resolved exactly once, by the parser, into a ``TypeMapping``
that is cached on the ``FieldSpec``. Emitters only read the cached values and
render them through the helpers below, so the model, the migration, the DTOs and
the client interface cannot disagree about a field's type.
"""
from typing import Dict, Set

import sqlalchemy as sa
from sqlalchemy.types import TypeEngine

from crudgen.generators.crud_gen.types import FieldSpec, FieldType, TypeMapping


# Auto-increment primary key emitted first in every column-declaring artifact.
PRIMARY_KEY_COLUMN = sa.Integer()

# Unrecognized tokens resolve to this mapping.
DEFAULT_MAPPING = TypeMapping(FieldType.TEXT, sa.String(length=255))

TYPE_TABLE: Dict[str, TypeMapping] = {
    "string": DEFAULT_MAPPING,
    "text": TypeMapping(FieldType.TEXT, sa.Text()),
    "number": TypeMapping(FieldType.INTEGER, sa.Integer()),
    "int": TypeMapping(FieldType.INTEGER, sa.Integer()),
    "float": TypeMapping(FieldType.DECIMAL, sa.Numeric(precision=12, scale=2)),
    "decimal": TypeMapping(FieldType.DECIMAL, sa.Numeric(precision=12, scale=2)),
    "boolean": TypeMapping(FieldType.BOOLEAN, sa.Boolean()),
    "date": TypeMapping(FieldType.TIMESTAMP, sa.DateTime()),
    "uuid": TypeMapping(FieldType.IDENTIFIER, sa.Uuid()),
}

PYTHON_TYPES: Dict[FieldType, str] = {
    FieldType.TEXT: "str",
    FieldType.INTEGER: "int",
    FieldType.DECIMAL: "Decimal",
    FieldType.BOOLEAN: "bool",
    FieldType.TIMESTAMP: "datetime",
    FieldType.IDENTIFIER: "UUID",
}

PYTHON_IMPORTS: Dict[FieldType, str] = {
    FieldType.DECIMAL: "from decimal import Decimal",
    FieldType.TIMESTAMP: "from datetime import datetime",
    FieldType.IDENTIFIER: "from uuid import UUID",
}

TS_TYPES: Dict[FieldType, str] = {
    FieldType.TEXT: "string",
    FieldType.INTEGER: "number",
    FieldType.DECIMAL: "number",
    FieldType.BOOLEAN: "boolean",
    FieldType.TIMESTAMP: "Date",
    FieldType.IDENTIFIER: "string",
}


def resolve_type(token: str) -> TypeMapping:
    """Resolve a raw type token (case-insensitive) to its TypeMapping."""
    return TYPE_TABLE.get(token.strip().lower(), DEFAULT_MAPPING)


def is_known_type(token: str) -> bool:
    return token.strip().lower() in TYPE_TABLE


def render_column_type(column_type: TypeEngine, prefix: str = "sa.") -> str:
    """Render a column type the way Alembic autogenerate does (``sa.String(length=255)``)."""
    return f"{prefix}{column_type!r}"


def python_type(field: FieldSpec) -> str:
    """Python annotation for a field, wrapped in Optional when the field is optional."""
    base = PYTHON_TYPES[field.value_type]
    return f"Optional[{base}]" if field.optional else base


def ts_type(field: FieldSpec) -> str:
    """TypeScript type for a field, unioned with null when the field is optional."""
    base = TS_TYPES[field.value_type]
    return f"{base} | null" if field.optional else base


def python_imports(fields) -> Set[str]:
    """Import lines needed by the Python annotations of the given fields."""
    return {PYTHON_IMPORTS[f.value_type] for f in fields if f.value_type in PYTHON_IMPORTS}
