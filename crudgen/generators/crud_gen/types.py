"""Dataclasses for CRUD generation."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

from sqlalchemy.types import TypeEngine


class FieldType(str, Enum):
    """Closed set of value types a field can resolve to."""
    TEXT = "Text"
    INTEGER = "Integer"
    DECIMAL = "Decimal"
    BOOLEAN = "Boolean"
    TIMESTAMP = "Timestamp"
    IDENTIFIER = "Identifier"


class ArtifactKind(str, Enum):
    MODEL = "model"
    CREATE_DTO = "create-dto"
    UPDATE_DTO = "update-dto"
    SERVICE = "service"
    CONTROLLER = "controller"
    MIGRATION = "migration"
    CLIENT_MODEL = "client-model"
    CLIENT_SERVICE = "client-service"


@dataclass(frozen=True)
class TypeMapping:
    """Resolved (value type, column type) pair for one type token."""
    value_type: FieldType
    column_type: TypeEngine


@dataclass(frozen=True)
class FieldSpec:
    """One requested column, with its types resolved once at parse time."""
    name: str
    raw_type: str
    optional: bool
    value_type: FieldType
    column_type: TypeEngine


@dataclass(frozen=True)
class EntityNames:
    """Naming variants shared by every emitter."""
    type_name: str  # Product
    instance_name: str  # product
    collection_name: str  # products


@dataclass(frozen=True)
class MigrationStamp:
    """One timestamp per run, formatted for the file name and the revision id."""
    moment: datetime

    @property
    def human(self) -> str:
        return self.moment.strftime("%Y_%m_%d_%H%M%S")

    @property
    def compact(self) -> str:
        return self.moment.strftime("%Y%m%d%H%M%S")


@dataclass(frozen=True)
class GenerationUnit:
    """Represents a generated file."""
    kind: ArtifactKind
    path: str  # Relative path from project root
    content: str  # File contents


@dataclass(frozen=True)
class ManifestEntry:
    """A line that must be present in an index file."""
    path: str
    line: str


@dataclass
class GenerationReport:
    """Outcome of one generation run."""
    names: EntityNames
    written: List[str] = field(default_factory=list)
    manifests_updated: List[str] = field(default_factory=list)
    manifest_lines_skipped: List[str] = field(default_factory=list)
    dry_run: bool = False
