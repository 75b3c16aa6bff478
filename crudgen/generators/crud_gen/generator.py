"""Orchestrator for CRUD code generation."""
import logging
from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import Dict, List, Optional

from crudgen.core.config import Settings, settings as default_settings
from crudgen.generators.crud_gen.manifest import (
    client_manifest_entries,
    merge_manifest,
    server_manifest_entries,
)
from crudgen.generators.crud_gen.parser import parse_fields
from crudgen.generators.crud_gen.render_client import render_client_model, render_client_service
from crudgen.generators.crud_gen.render_entity import (
    render_create_dto,
    render_entity_model,
    render_entity_router,
    render_entity_service,
    render_update_dto,
)
from crudgen.generators.crud_gen.render_migration import migration_filename, render_migration
from crudgen.generators.crud_gen.types import (
    ArtifactKind,
    EntityNames,
    FieldSpec,
    GenerationReport,
    GenerationUnit,
    ManifestEntry,
    MigrationStamp,
)
from crudgen.generators.crud_gen.utils import derive_names, is_reserved_field
from crudgen.generators.crud_gen.writer import FileStore, write_units

log = logging.getLogger(__name__)


def build_server_units(
    names: EntityNames,
    fields: List[FieldSpec],
    stamp: MigrationStamp,
    server_dir: str,
    down_revision: Optional[str] = None,
) -> List[GenerationUnit]:
    """Emit the backend artifacts for an entity."""
    var = names.instance_name
    app_dir = f"{server_dir}/app"
    return [
        GenerationUnit(ArtifactKind.MODEL, f"{app_dir}/models/{var}.py", render_entity_model(names, fields)),
        GenerationUnit(ArtifactKind.CREATE_DTO, f"{app_dir}/schemas/create_{var}.py", render_create_dto(names, fields)),
        GenerationUnit(ArtifactKind.UPDATE_DTO, f"{app_dir}/schemas/update_{var}.py", render_update_dto(names, fields)),
        GenerationUnit(ArtifactKind.SERVICE, f"{app_dir}/services/{var}_service.py", render_entity_service(names, fields)),
        GenerationUnit(ArtifactKind.CONTROLLER, f"{app_dir}/api/{var}.py", render_entity_router(names, fields)),
        GenerationUnit(
            ArtifactKind.MIGRATION,
            f"{server_dir}/alembic/versions/{migration_filename(names, stamp)}",
            render_migration(names, fields, stamp, down_revision),
        ),
    ]


def build_client_units(
    names: EntityNames,
    fields: List[FieldSpec],
    client_dir: str,
    api_prefix: str = "/api",
) -> List[GenerationUnit]:
    """Emit the frontend artifacts for an entity."""
    var = names.instance_name
    return [
        GenerationUnit(ArtifactKind.CLIENT_MODEL, f"{client_dir}/models/{var}.ts", render_client_model(names, fields)),
        GenerationUnit(
            ArtifactKind.CLIENT_SERVICE,
            f"{client_dir}/services/{var}.service.ts",
            render_client_service(names, fields, api_prefix),
        ),
    ]


def update_manifests(entries: List[ManifestEntry], store: FileStore, report: GenerationReport) -> None:
    """Merge entries into their manifests; each manifest is read and written at most once."""
    grouped: Dict[str, List[str]] = {}
    for entry in entries:
        grouped.setdefault(entry.path, []).append(entry.line)

    for path, lines in grouped.items():
        result = merge_manifest(store.read_if_exists(path), lines)
        report.manifest_lines_skipped.extend(result.skipped)
        if not result.changed:
            log.info("Manifest %s already up to date", path, extra={"artifact": "manifest"})
            continue
        store.ensure_dir(str(PurePosixPath(path).parent))
        store.write(path, result.content)
        report.manifests_updated.append(path)
        log.info("Updated manifest %s (+%d lines)", path, len(result.added), extra={"artifact": "manifest"})


def generate_crud(
    entity_name: str,
    fields_spec: str,
    store: FileStore,
    *,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
    include_client: bool = True,
    down_revision: Optional[str] = None,
) -> GenerationReport:
    """
    Generate the full artifact set for one entity.

    Args:
        entity_name: Entity name, e.g. "product"
        fields_spec: Field specification, e.g. "name:string,price:number,isActive?:boolean"
        store: File store that receives generated files and manifests
        settings: Output layout; defaults to the process settings
        now: Migration timestamp; defaults to the current UTC time
        include_client: Also emit the client model and service
        down_revision: Alembic revision the migration follows

    Returns:
        GenerationReport describing what was written
    """
    cfg = settings or default_settings

    # Validate everything before any write
    fields = parse_fields(fields_spec)
    names = derive_names(entity_name)
    ctx = {"entity": names.type_name}

    for field in fields:
        if is_reserved_field(field.name):
            log.warning("Field %r is reserved for the primary key and will be skipped", field.name, extra=ctx)

    stamp = MigrationStamp(now or datetime.now(timezone.utc))
    log.info("Generating %s with %d fields", names.type_name, len(fields), extra=ctx)

    units = build_server_units(names, fields, stamp, cfg.server_dir, down_revision)
    entries = server_manifest_entries(names, cfg.server_dir)
    if include_client:
        units += build_client_units(names, fields, cfg.client_dir, cfg.api_prefix)
        entries += client_manifest_entries(names, cfg.client_dir)

    report = GenerationReport(names=names)
    report.written = write_units(units, store)
    update_manifests(entries, store, report)

    log.info("Generated %d files for %s", len(report.written), names.type_name, extra=ctx)
    return report
