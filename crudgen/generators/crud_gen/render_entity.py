"""Server-side rendering functions: ORM model, DTOs, service and router."""
from typing import List

from crudgen.generators.crud_gen.type_map import (
    PRIMARY_KEY_COLUMN,
    PYTHON_TYPES,
    python_imports,
    python_type,
    render_column_type,
)
from crudgen.generators.crud_gen.types import EntityNames, FieldSpec
from crudgen.generators.crud_gen.utils import is_reserved_field


def entity_fields(fields: List[FieldSpec]) -> List[FieldSpec]:
    """Fields that become columns; the primary key is always emitted separately."""
    return [f for f in fields if not is_reserved_field(f.name)]


def _typing_header(fields: List[FieldSpec], extra: str = "") -> List[str]:
    lines = []
    if any(f.optional for f in fields):
        lines.append("from typing import Optional")
    lines.extend(sorted(python_imports(fields)))
    if extra:
        lines.append(extra)
    return lines


def render_entity_model(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the SQLAlchemy model for an entity."""
    columns = entity_fields(fields)

    lines = _typing_header(columns)
    lines += [
        "import sqlalchemy as sa",
        "from sqlalchemy.orm import Mapped, mapped_column",
        "from app.db.session import Base",
        "",
        "",
        f"class {names.type_name}(Base):",
        f'    __tablename__ = "{names.collection_name}"',
        "",
        f"    id: Mapped[int] = mapped_column({render_column_type(PRIMARY_KEY_COLUMN)}, primary_key=True, autoincrement=True)",
    ]
    for field in columns:
        nullable = "True" if field.optional else "False"
        lines.append(
            f"    {field.name}: Mapped[{python_type(field)}] = "
            f"mapped_column({render_column_type(field.column_type)}, nullable={nullable})"
        )
    lines += [
        "",
        "    def to_dict(self) -> dict:",
        "        return {column.name: getattr(self, column.name) for column in self.__table__.columns}",
        "",
    ]
    return "\n".join(lines)


def render_create_dto(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the Pydantic create model. Optional fields default to None."""
    columns = entity_fields(fields)

    lines = _typing_header(columns)
    lines += [
        "from pydantic import BaseModel",
        "",
        "",
        f"class Create{names.type_name}(BaseModel):",
    ]
    for field in columns:
        default = " = None" if field.optional else ""
        lines.append(f"    {field.name}: {python_type(field)}{default}")
    if not columns:
        lines.append("    pass")
    lines.append("")
    return "\n".join(lines)


def render_update_dto(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the Pydantic update model.

    Every field may be omitted. Required fields keep a non-Optional annotation,
    so an explicit null is still rejected; callers apply the payload with
    ``model_dump(exclude_unset=True)``.
    """
    columns = entity_fields(fields)

    lines = _typing_header(columns)
    lines += [
        "from pydantic import BaseModel, Field",
        "",
        "",
        f"class Update{names.type_name}(BaseModel):",
    ]
    for field in columns:
        if field.optional:
            lines.append(f"    {field.name}: {python_type(field)} = None")
        else:
            lines.append(f"    {field.name}: {PYTHON_TYPES[field.value_type]} = Field(default=None)")
    if not columns:
        lines.append("    pass")
    lines.append("")
    return "\n".join(lines)


def render_entity_service(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the persistence service wrapping a SQLAlchemy session."""
    type_name = names.type_name
    var = names.instance_name

    lines = [
        "from typing import List, Optional",
        "from sqlalchemy import select",
        "from sqlalchemy.orm import Session",
        f"from app.models.{var} import {type_name}",
        f"from app.schemas.create_{var} import Create{type_name}",
        f"from app.schemas.update_{var} import Update{type_name}",
        "",
        "",
        f"class {type_name}Service:",
        "    def __init__(self, db: Session):",
        "        self.db = db",
        "",
    ]

    # Create
    lines.append(f"    def create(self, data: Create{type_name}) -> {type_name}:")
    lines.append(f"        {var} = {type_name}(**data.model_dump())")
    lines.append(f"        self.db.add({var})")
    lines.append("        self.db.commit()")
    lines.append(f"        self.db.refresh({var})")
    lines.append(f"        return {var}")
    lines.append("")

    # Find all
    lines.append(f"    def find_all(self) -> List[{type_name}]:")
    lines.append(f"        return list(self.db.scalars(select({type_name})))")
    lines.append("")

    # Find one
    lines.append(f"    def find_one(self, id: int) -> Optional[{type_name}]:")
    lines.append(f"        return self.db.get({type_name}, id)")
    lines.append("")

    # Update
    lines.append(f"    def update(self, id: int, data: Update{type_name}) -> Optional[{type_name}]:")
    lines.append(f"        {var} = self.find_one(id)")
    lines.append(f"        if {var} is None:")
    lines.append("            return None")
    lines.append("        for key, value in data.model_dump(exclude_unset=True).items():")
    lines.append(f"            setattr({var}, key, value)")
    lines.append("        self.db.commit()")
    lines.append(f"        self.db.refresh({var})")
    lines.append(f"        return {var}")
    lines.append("")

    # Remove
    lines.append("    def remove(self, id: int) -> bool:")
    lines.append(f"        {var} = self.find_one(id)")
    lines.append(f"        if {var} is None:")
    lines.append("            return False")
    lines.append(f"        self.db.delete({var})")
    lines.append("        self.db.commit()")
    lines.append("        return True")
    lines.append("")

    return "\n".join(lines)


def render_entity_router(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the CRUD router for an entity."""
    type_name = names.type_name
    var = names.instance_name
    not_found = f'f"{type_name} with id {{id}} not found"'

    lines = [
        "from fastapi import APIRouter, Depends, HTTPException",
        "from sqlalchemy.orm import Session",
        "from app.db.session import get_db",
        f"from app.schemas.create_{var} import Create{type_name}",
        f"from app.schemas.update_{var} import Update{type_name}",
        f"from app.services.{var}_service import {type_name}Service",
        "",
        f'router = APIRouter(prefix="/{names.collection_name}", tags=["{type_name}"])',
        "",
        "",
        f"def get_{var}_service(db: Session = Depends(get_db)) -> {type_name}Service:",
        f"    return {type_name}Service(db)",
        "",
    ]
    service_arg = f"service: {type_name}Service = Depends(get_{var}_service)"

    # Create endpoint
    lines.append('@router.post("", status_code=201)')
    lines.append(f"def create_{var}(data: Create{type_name}, {service_arg}):")
    lines.append("    return service.create(data).to_dict()")
    lines.append("")

    # List endpoint
    lines.append('@router.get("")')
    lines.append(f"def list_{names.collection_name}({service_arg}):")
    lines.append(f"    return [{var}.to_dict() for {var} in service.find_all()]")
    lines.append("")

    # Get endpoint
    lines.append('@router.get("/{id}")')
    lines.append(f"def get_{var}(id: int, {service_arg}):")
    lines.append(f"    {var} = service.find_one(id)")
    lines.append(f"    if {var} is None:")
    lines.append(f"        raise HTTPException(status_code=404, detail={not_found})")
    lines.append(f"    return {var}.to_dict()")
    lines.append("")

    # Patch endpoint
    lines.append('@router.patch("/{id}")')
    lines.append(f"def update_{var}(id: int, data: Update{type_name}, {service_arg}):")
    lines.append(f"    {var} = service.update(id, data)")
    lines.append(f"    if {var} is None:")
    lines.append(f"        raise HTTPException(status_code=404, detail={not_found})")
    lines.append(f"    return {var}.to_dict()")
    lines.append("")

    # Delete endpoint
    lines.append('@router.delete("/{id}", status_code=204)')
    lines.append(f"def delete_{var}(id: int, {service_arg}):")
    lines.append("    if not service.remove(id):")
    lines.append(f"        raise HTTPException(status_code=404, detail={not_found})")
    lines.append("    return None")
    lines.append("")

    return "\n".join(lines)
