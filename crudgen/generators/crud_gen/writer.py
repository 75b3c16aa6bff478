"""File store abstraction used by the generator.

The generator only talks to a FileStore, so parsing and emission can run
against an in-memory store (dry runs, tests) as well as the real disk.
"""
import logging
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

from crudgen.core.errors import FileSystemError
from crudgen.generators.crud_gen.types import GenerationUnit

log = logging.getLogger(__name__)


class FileStore:
    """Read-if-exists / write / ensure-directory over paths relative to a root."""

    def read_if_exists(self, path: str) -> str:
        raise NotImplementedError

    def write(self, path: str, content: str) -> None:
        raise NotImplementedError

    def ensure_dir(self, path: str) -> None:
        raise NotImplementedError


class DiskFileStore(FileStore):
    def __init__(self, root: Path):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def read_if_exists(self, path: str) -> str:
        file_path = self._resolve(path)
        if not file_path.exists():
            return ""
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(str(file_path), str(e)) from e

    def write(self, path: str, content: str) -> None:
        file_path = self._resolve(path)
        try:
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileSystemError(str(file_path), str(e)) from e

    def ensure_dir(self, path: str) -> None:
        dir_path = self._resolve(path)
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileSystemError(str(dir_path), str(e)) from e


class MemoryFileStore(FileStore):
    """Keeps writes in memory. Reads of unwritten paths go to ``fallback`` when given."""

    def __init__(self, files: Dict[str, str] = None, fallback: Optional[FileStore] = None):
        self.files: Dict[str, str] = dict(files or {})
        self.fallback = fallback
        self.dirs = set()
        self.writes: List[str] = []

    def read_if_exists(self, path: str) -> str:
        if path in self.files:
            return self.files[path]
        if self.fallback is not None:
            return self.fallback.read_if_exists(path)
        return ""

    def write(self, path: str, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)

    def ensure_dir(self, path: str) -> None:
        self.dirs.add(path)


def write_units(units: List[GenerationUnit], store: FileStore) -> List[str]:
    """
    Write generated units through the store, creating parent directories.

    Args:
        units: List of GenerationUnit objects to write
        store: Target file store

    Returns:
        Paths written, in order
    """
    written = []
    for unit in units:
        parent = str(PurePosixPath(unit.path).parent)
        store.ensure_dir(parent)
        store.write(unit.path, unit.content)
        log.info("Wrote %s", unit.path, extra={"artifact": unit.kind.value})
        written.append(unit.path)
    return written
