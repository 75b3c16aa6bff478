"""Idempotent "insert if absent" merge for index files."""
from dataclasses import dataclass, field
from typing import Iterable, List

from crudgen.generators.crud_gen.types import EntityNames, ManifestEntry


@dataclass
class MergeResult:
    content: str
    added: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added)


def merge_manifest(current: str, candidates: Iterable[str]) -> MergeResult:
    """Append each candidate line that is not already a full line of ``current``.

    Presence is exact line equality, so ``export * from './user';`` is not
    considered present just because ``export * from './user';  // x`` is. Prior
    content is never reordered or rewritten.
    """
    present = set(current.splitlines())
    added = []
    skipped = []
    for line in candidates:
        if line in present:
            skipped.append(line)
            continue
        present.add(line)
        added.append(line)

    if not added:
        return MergeResult(content=current, skipped=skipped)

    prefix = current
    if prefix and not prefix.endswith("\n"):
        prefix += "\n"
    content = prefix + "".join(f"{line}\n" for line in added)
    return MergeResult(content=content, added=added, skipped=skipped)


def server_manifest_entries(names: EntityNames, server_dir: str) -> List[ManifestEntry]:
    var = names.instance_name
    return [
        ManifestEntry(
            path=f"{server_dir}/app/models/__init__.py",
            line=f"from app.models.{var} import {names.type_name}  # noqa: F401",
        ),
        ManifestEntry(
            path=f"{server_dir}/app/api/__init__.py",
            line=f"from app.api.{var} import router as {var}_router  # noqa: F401",
        ),
    ]


def client_manifest_entries(names: EntityNames, client_dir: str) -> List[ManifestEntry]:
    var = names.instance_name
    return [
        ManifestEntry(path=f"{client_dir}/models/index.ts", line=f"export * from './{var}';"),
        ManifestEntry(path=f"{client_dir}/services/index.ts", line=f"export * from './{var}.service';"),
    ]
