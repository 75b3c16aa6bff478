"""Tests for entity name derivation."""
import pytest

from crudgen.core.errors import InvalidEntityName
from crudgen.generators.crud_gen.utils import derive_names, is_reserved_field


def test_product_names():
    names = derive_names("product")

    assert names.type_name == "Product"
    assert names.instance_name == "product"
    assert names.collection_name == "products"


@pytest.mark.parametrize("entity", ["product", "Category", "userLink", "URL", "a"])
def test_name_variants_share_their_tail(entity):
    names = derive_names(entity)

    assert names.type_name[0].isupper()
    assert names.instance_name[0].islower()
    assert names.collection_name == names.instance_name + "s"
    assert names.type_name[1:] == names.instance_name[1:] == names.collection_name[1:-1]


def test_pluralization_is_a_plain_suffix():
    """No irregular plurals: category -> categorys."""
    assert derive_names("category").collection_name == "categorys"


def test_surrounding_whitespace_is_ignored():
    assert derive_names("  order ").type_name == "Order"


@pytest.mark.parametrize("entity", ["", "   ", "my entity", "1product", "user-link", "class", "Class", "_product", "none", "true", "false"])
def test_invalid_entity_names_are_rejected(entity):
    with pytest.raises(InvalidEntityName):
        derive_names(entity)


def test_reserved_field_is_exact_match_only():
    assert is_reserved_field("id")
    assert not is_reserved_field("parentId")
    assert not is_reserved_field("identifier")
