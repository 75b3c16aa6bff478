"""Tests for the crudgen command-line entry point."""
import tempfile
from pathlib import Path

import pytest

from crudgen.main import build_parser, main


def test_cli_generates_files(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        exit_code = main(["product", "name:string,price:number,isActive?:boolean", "--root", str(root)])

        assert exit_code == 0
        assert (root / "backend/app/models/product.py").exists()
        assert (root / "frontend/src/app/core/services/product.service.ts").exists()
        out = capsys.readouterr().out
        assert "CRUD resource 'Product' generated successfully!" in out


def test_cli_default_fields_are_two_text_fields():
    args = build_parser().parse_args(["product"])

    assert args.fields == "name:string,description:string"


def test_cli_missing_entity_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
    assert "entity" in capsys.readouterr().err


def test_cli_malformed_spec_reports_error(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        exit_code = main(["product", "name", "--root", str(root)])

        assert exit_code == 1
        assert "Malformed field #0 'name'" in capsys.readouterr().err
        assert list(root.iterdir()) == []


def test_cli_dry_run_writes_nothing(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        exit_code = main(["product", "name:string", "--root", str(root), "--dry-run"])

        assert exit_code == 0
        assert list(root.iterdir()) == []
        assert "would be generated" in capsys.readouterr().out


def test_cli_no_client(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        exit_code = main(["product", "name:string", "--root", str(root), "--no-client"])

        assert exit_code == 0
        assert not (root / "frontend").exists()
        assert (root / "backend/app/api/product.py").exists()


def test_cli_duplicate_field_reports_error(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        exit_code = main(["product", "name:string,name:number", "--root", str(root)])

        assert exit_code == 1
        assert "duplicate field name 'name'" in capsys.readouterr().err
        assert list(root.iterdir()) == []


def test_cli_undecodable_manifest_reports_file_system_error(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        manifest = root / "backend/app/models/__init__.py"
        manifest.parent.mkdir(parents=True)
        manifest.write_bytes(b"# caf\xe9\n")

        exit_code = main(["product", "name:string", "--root", str(root)])

        assert exit_code == 1
        assert "File system error" in capsys.readouterr().err
        assert manifest.read_bytes() == b"# caf\xe9\n"
