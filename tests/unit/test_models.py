"""Tests for registry document models."""

import pytest
from pydantic import ValidationError

from ui_registry.models import (
    IndexEntry,
    RegistryIndex,
    RegistryItem,
    RegistryItemFile,
    RegistryItemType,
    ResolvedTree,
)


@pytest.mark.unit
def test_registry_item_camel_case():
    """Wire keys map onto snake_case attributes."""
    item = RegistryItem.model_validate(
        {
            "name": "button",
            "type": "registry:ui",
            "devDependencies": ["@types/react"],
            "registryDependencies": ["utils"],
            "cssVars": {"light": {"ring": "0 0% 0%"}},
            "unknownKey": True,
        }
    )

    assert item.dev_dependencies == ["@types/react"]
    assert item.registry_dependencies == ["utils"]
    assert item.css_vars.light == {"ring": "0 0% 0%"}
    assert item.css_vars.dark == {}


def test_registry_item_rejects_unknown_type():
    """Only known type tags are accepted."""
    with pytest.raises(ValidationError):
        RegistryItem.model_validate({"name": "x", "type": "registry:widget"})


def test_registry_item_type_values():
    """Type tags compare equal to their wire strings."""
    item = RegistryItem(name="x", type=RegistryItemType.HOOK)

    assert item.type == "registry:hook"
    assert item.to_wire() == {"name": "x", "type": "registry:hook"}


def test_index_accepts_string_and_object_files():
    """Index entries may list files as paths or objects."""
    index = RegistryIndex.validate_python(
        [
            {"name": "a", "files": ["ui/a.tsx"]},
            {"name": "b", "files": [{"path": "ui/b.tsx", "type": "registry:ui"}]},
        ]
    )

    assert index[0].files == ["ui/a.tsx"]
    assert isinstance(index[1].files[0], RegistryItemFile)


def test_index_entry_requires_name():
    """Name is the key of an index entry."""
    with pytest.raises(ValidationError):
        IndexEntry.model_validate({"registryDependencies": []})


def test_resolved_tree_wire_keys():
    """Resolved trees dump with wire keys."""
    tree = ResolvedTree(dev_dependencies=["vitest"])

    wire = tree.to_wire()

    assert wire["devDependencies"] == ["vitest"]
    assert wire["cssVars"] == {"light": {}, "dark": {}}
