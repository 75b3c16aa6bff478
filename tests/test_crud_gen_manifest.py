"""Tests for the idempotent manifest merge."""
from crudgen.generators.crud_gen.manifest import (
    client_manifest_entries,
    merge_manifest,
    server_manifest_entries,
)
from crudgen.generators.crud_gen.utils import derive_names


def test_merge_into_empty_manifest():
    result = merge_manifest("", ["export * from './product';"])

    assert result.content == "export * from './product';\n"
    assert result.added == ["export * from './product';"]
    assert result.changed


def test_merge_preserves_existing_content_and_order():
    current = "// Export all model interfaces here\nexport * from './user';\n"
    result = merge_manifest(current, ["export * from './product';", "export * from './order';"])

    assert result.content == current + "export * from './product';\nexport * from './order';\n"


def test_merge_adds_separator_when_trailing_newline_missing():
    result = merge_manifest("export * from './user';", ["export * from './product';"])

    assert result.content == "export * from './user';\nexport * from './product';\n"


def test_merge_is_idempotent():
    candidates = ["export * from './product';", "export * from './product.service';"]
    once = merge_manifest("export * from './user';\n", candidates)
    twice = merge_manifest(once.content, candidates)

    assert twice.content == once.content
    assert not twice.changed
    assert twice.skipped == candidates


def test_repeated_candidates_are_added_once():
    result = merge_manifest("", ["a", "a", "b"])

    assert result.content == "a\nb\n"


def test_presence_is_full_line_not_substring():
    """A line that only appears inside a longer line is not considered present."""
    current = "export * from './product-category';\n"
    result = merge_manifest(current, ["export * from './product"])

    assert result.changed
    assert result.content.splitlines() == ["export * from './product-category';", "export * from './product"]


def test_crlf_manifest_lines_are_recognised():
    result = merge_manifest("export * from './user';\r\n", ["export * from './user';"])

    assert not result.changed


def test_manifest_entries_use_derived_names():
    names = derive_names("product")
    server = server_manifest_entries(names, "backend")
    client = client_manifest_entries(names, "frontend/src/app/core")

    assert [(e.path, e.line) for e in server] == [
        ("backend/app/models/__init__.py", "from app.models.product import Product  # noqa: F401"),
        ("backend/app/api/__init__.py", "from app.api.product import router as product_router  # noqa: F401"),
    ]
    assert [(e.path, e.line) for e in client] == [
        ("frontend/src/app/core/models/index.ts", "export * from './product';"),
        ("frontend/src/app/core/services/index.ts", "export * from './product.service';"),
    ]
