"""
Models package - registry documents and project configuration.
"""

from .config import AliasesConfig, ProjectConfig, TailwindConfig
from .registry import (
    BaseColor,
    BaseColorOption,
    IndexEntry,
    RegistryIndex,
    RegistryItem,
    RegistryItemCssVars,
    RegistryItemFile,
    RegistryItemList,
    RegistryItemType,
    ResolvedTree,
    Style,
    StyleList,
)

__all__ = [
    # Registry documents
    "BaseColor",
    "BaseColorOption",
    "IndexEntry",
    "RegistryIndex",
    "RegistryItem",
    "RegistryItemCssVars",
    "RegistryItemFile",
    "RegistryItemList",
    "RegistryItemType",
    "ResolvedTree",
    "Style",
    "StyleList",
    # Project config
    "AliasesConfig",
    "ProjectConfig",
    "TailwindConfig",
]
