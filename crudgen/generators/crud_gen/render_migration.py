"""Alembic migration rendering.

The table is assembled as a real ``sa.Table`` from the same cached column types
the model uses, then rendered with Alembic's own autogenerate renderer.
"""
from typing import List, Optional

import sqlalchemy as sa
from alembic.autogenerate import render_python_code
from alembic.operations import ops

from crudgen.generators.crud_gen.render_entity import entity_fields
from crudgen.generators.crud_gen.type_map import PRIMARY_KEY_COLUMN
from crudgen.generators.crud_gen.types import EntityNames, FieldSpec, MigrationStamp
from crudgen.generators.crud_gen.utils import to_snake_case


def migration_revision(names: EntityNames, stamp: MigrationStamp) -> str:
    """Revision identity, e.g. ``CreateProductTable20260101120000``."""
    return f"Create{names.type_name}Table{stamp.compact}"


def migration_filename(names: EntityNames, stamp: MigrationStamp) -> str:
    """File name, e.g. ``2026_01_01_120000_create_products_table.py``."""
    return f"{stamp.human}_create_{to_snake_case(names.collection_name)}_table.py"


def build_table(names: EntityNames, fields: List[FieldSpec]) -> sa.Table:
    """Build the entity table; ``id`` first, then fields in declaration order."""
    columns = [sa.Column("id", PRIMARY_KEY_COLUMN, primary_key=True, autoincrement=True)]
    for field in entity_fields(fields):
        columns.append(sa.Column(field.name, field.column_type, nullable=field.optional))
    return sa.Table(names.collection_name, sa.MetaData(), *columns)


def render_migration(
    names: EntityNames,
    fields: List[FieldSpec],
    stamp: MigrationStamp,
    down_revision: Optional[str] = None,
) -> str:
    """Generate an Alembic revision that creates (and drops) the entity table."""
    table = build_table(names, fields)
    upgrade_body = render_python_code(ops.UpgradeOps(ops=[ops.CreateTableOp.from_table(table)]))
    downgrade_body = render_python_code(ops.DowngradeOps(ops=[ops.DropTableOp.from_table(table)]))
    revision = migration_revision(names, stamp)

    lines = [
        f'"""Create {names.type_name} table',
        "",
        f"Revision ID: {revision}",
        f"Revises: {down_revision}" if down_revision else "Revises:",
        f"Create Date: {stamp.moment.strftime('%Y-%m-%d %H:%M:%S')}",
        '"""',
        "",
        "from alembic import op",
        "import sqlalchemy as sa",
        "",
        f'revision = "{revision}"',
        f"down_revision = {down_revision!r}",
        "branch_labels = None",
        "depends_on = None",
        "",
        "",
        "def upgrade():",
        f"    {upgrade_body}",
        "",
        "",
        "def downgrade():",
        f"    {downgrade_body}",
        "",
    ]
    return "\n".join(lines)
