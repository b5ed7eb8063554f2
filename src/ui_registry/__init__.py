"""
ui-registry
Resolves component registry items into one installable payload.
"""

from .clients import RegistryFetcher
from .core import (
    ErrorKind,
    RegistryError,
    Settings,
    close_container,
    configure_logging,
    create_container,
    get_settings,
)
from .models import ProjectConfig, RegistryItem, ResolvedTree
from .registry import (
    Registry,
    get_item_target_path,
    get_registry_item_file_target_path,
    get_theme,
    resolve_items_tree,
    resolve_items_tree_result,
    resolve_tree,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "ProjectConfig",
    "Registry",
    "RegistryError",
    "RegistryFetcher",
    "RegistryItem",
    "ResolvedTree",
    "Settings",
    "configure_logging",
    "create_container",
    "close_container",
    "get_item_target_path",
    "get_registry_item_file_target_path",
    "get_settings",
    "get_theme",
    "resolve_items_tree",
    "resolve_items_tree_result",
    "resolve_tree",
]
