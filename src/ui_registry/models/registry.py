"""
Registry document schemas.
Typed models for everything the registry serves, with camelCase wire keys.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class RegistryItemType(str, Enum):
    """Item type tags; the tag governs where an item is placed."""

    STYLE = "registry:style"
    LIB = "registry:lib"
    EXAMPLE = "registry:example"
    BLOCK = "registry:block"
    COMPONENT = "registry:component"
    UI = "registry:ui"
    HOOK = "registry:hook"
    THEME = "registry:theme"
    PAGE = "registry:page"


class RegistryModel(BaseModel):
    """Base for registry documents: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with wire (camelCase) keys, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class RegistryItemFile(RegistryModel):
    """One file shipped by an item."""

    path: str
    content: str | None = None
    type: RegistryItemType
    target: str | None = None


class RegistryItemCssVars(RegistryModel):
    """CSS variables for the light and dark color schemes."""

    light: dict[str, str] = Field(default_factory=dict)
    dark: dict[str, str] = Field(default_factory=dict)


class IndexEntry(RegistryModel):
    """Lightweight descriptor from the global index."""

    name: str
    type: str | None = None
    description: str | None = None
    dependencies: list[str] | None = None
    dev_dependencies: list[str] | None = None
    registry_dependencies: list[str] | None = None
    files: list[str | RegistryItemFile] | None = None


class RegistryItem(RegistryModel):
    """Full definition for one component."""

    name: str
    type: RegistryItemType
    description: str | None = None
    dependencies: list[str] | None = None
    dev_dependencies: list[str] | None = None
    registry_dependencies: list[str] | None = None
    files: list[RegistryItemFile] | None = None
    tailwind: dict[str, Any] | None = None
    css_vars: RegistryItemCssVars | None = None
    meta: dict[str, Any] | None = None
    docs: str | None = None


class BaseColor(RegistryModel):
    """Named palette providing light/dark CSS variable values."""

    css_vars: RegistryItemCssVars
    inline_colors: RegistryItemCssVars | None = None
    inline_colors_template: str | None = None
    css_vars_template: str | None = None


class Style(RegistryModel):
    """Entry of the style list."""

    name: str
    label: str


class BaseColorOption(RegistryModel):
    """Selectable base color."""

    name: str
    label: str


class ResolvedTree(RegistryModel):
    """Merged payload ready for installation."""

    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list)
    files: list[RegistryItemFile] = Field(default_factory=list)
    tailwind: dict[str, Any] = Field(default_factory=dict)
    css_vars: RegistryItemCssVars = Field(default_factory=RegistryItemCssVars)


RegistryIndex = TypeAdapter(list[IndexEntry])
RegistryItemList = TypeAdapter(list[RegistryItem])
StyleList = TypeAdapter(list[Style])
