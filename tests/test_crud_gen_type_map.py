"""Tests for the shared type tables and cross-artifact type agreement."""
from datetime import datetime

import pytest

from crudgen.generators.crud_gen.parser import parse_fields
from crudgen.generators.crud_gen.render_client import render_client_model
from crudgen.generators.crud_gen.render_entity import render_create_dto, render_entity_model
from crudgen.generators.crud_gen.render_migration import render_migration
from crudgen.generators.crud_gen.type_map import (
    DEFAULT_MAPPING,
    PYTHON_TYPES,
    TS_TYPES,
    TYPE_TABLE,
    render_column_type,
    resolve_type,
)
from crudgen.generators.crud_gen.types import FieldType, MigrationStamp
from crudgen.generators.crud_gen.utils import derive_names


EXPECTED = {
    "string": FieldType.TEXT,
    "text": FieldType.TEXT,
    "number": FieldType.INTEGER,
    "int": FieldType.INTEGER,
    "float": FieldType.DECIMAL,
    "decimal": FieldType.DECIMAL,
    "boolean": FieldType.BOOLEAN,
    "date": FieldType.TIMESTAMP,
    "uuid": FieldType.IDENTIFIER,
}


def test_table_covers_recognized_tokens():
    assert {token: m.value_type for token, m in TYPE_TABLE.items()} == EXPECTED


def test_every_value_type_has_python_and_ts_types():
    for value_type in FieldType:
        assert value_type in PYTHON_TYPES
        assert value_type in TS_TYPES


@pytest.mark.parametrize("token", ["BOOLEAN", " Boolean ", "boolean"])
def test_resolution_is_case_insensitive(token):
    assert resolve_type(token) is TYPE_TABLE["boolean"]


def test_resolution_is_a_pure_function_of_the_token():
    assert resolve_type("date") is resolve_type("date")
    assert resolve_type("whatever") is DEFAULT_MAPPING


def test_column_types_render_like_alembic():
    assert render_column_type(TYPE_TABLE["string"].column_type) == "sa.String(length=255)"
    assert render_column_type(TYPE_TABLE["text"].column_type) == "sa.Text()"
    assert render_column_type(TYPE_TABLE["boolean"].column_type) == "sa.Boolean()"


@pytest.mark.parametrize("token", sorted(EXPECTED))
def test_types_agree_across_artifacts(token):
    """The same field renders the same column type in model and migration,
    and the matching value type in the DTO and the client interface."""
    field = parse_fields(f"value:{token}")[0]
    names = derive_names("sample")
    column = render_column_type(field.column_type)

    model = render_entity_model(names, [field])
    migration = render_migration(names, [field], MigrationStamp(datetime(2026, 1, 1, 12, 0, 0)))
    create_dto = render_create_dto(names, [field])
    client = render_client_model(names, [field])

    assert f"mapped_column({column}, nullable=False)" in model
    assert f"sa.Column('value', {column}, nullable=False)" in migration
    assert f"    value: {PYTHON_TYPES[field.value_type]}" in create_dto
    assert f"  value: {TS_TYPES[field.value_type]};" in client
