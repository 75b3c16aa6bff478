"""
Command-line entry point.
Usage: crudgen <entity> ["name:string,price:number,isActive?:boolean"]
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from crudgen.core.config import settings
from crudgen.core.errors import CrudGenError
from crudgen.core.logging import configure_logging
from crudgen.generators.crud_gen import generate_crud
from crudgen.generators.crud_gen.writer import DiskFileStore, MemoryFileStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Generate model, DTOs, service, router, migration and client files for an entity",
    )
    parser.add_argument("entity", help="Entity name, e.g. product")
    parser.add_argument(
        "fields",
        nargs="?",
        default=settings.default_fields,
        help=f'Comma-separated name[?]:type list (default: "{settings.default_fields}")',
    )
    parser.add_argument(
        "--root",
        default=settings.project_root,
        help="Project root that receives the generated files (default: %(default)s)",
    )
    parser.add_argument("--no-client", action="store_true", help="Skip the client model and service")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be generated without writing")
    parser.add_argument("--down-revision", default=None, help="Alembic revision the new migration follows")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    root = Path(args.root)
    store = DiskFileStore(root)
    if args.dry_run:
        store = MemoryFileStore(fallback=store)

    try:
        report = generate_crud(
            args.entity,
            args.fields,
            store,
            include_client=not args.no_client,
            down_revision=args.down_revision,
        )
        report.dry_run = args.dry_run
    except CrudGenError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    names = report.names
    verb = "would be generated" if args.dry_run else "generated successfully"
    print(f"✅ CRUD resource '{names.type_name}' {verb}!")
    for path in report.written:
        print(f"📄 {root / path}")
    for path in report.manifests_updated:
        print(f"📝 Updated {root / path}")
    if report.manifest_lines_skipped:
        print(f"⏭️  {len(report.manifest_lines_skipped)} manifest line(s) already present")
    return 0


if __name__ == "__main__":
    sys.exit(main())
