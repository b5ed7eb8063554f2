"""
Registry resolution
Index lookup, dependency expansion, theming and merging.
"""

from .api import BASE_COLORS, Registry, base_color_path, item_path
from .assembler import (
    collect_payload_result,
    merge_items,
    resolve_items_tree,
    resolve_items_tree_result,
)
from .paths import get_item_target_path, get_registry_item_file_target_path
from .resolver import resolve_tree
from .theme import build_tailwind_theme_colors_from_css_vars, build_theme, get_theme, get_theme_result

__all__ = [
    "BASE_COLORS",
    "Registry",
    "base_color_path",
    "item_path",
    "collect_payload_result",
    "merge_items",
    "resolve_items_tree",
    "resolve_items_tree_result",
    "get_item_target_path",
    "get_registry_item_file_target_path",
    "resolve_tree",
    "build_tailwind_theme_colors_from_css_vars",
    "build_theme",
    "get_theme",
    "get_theme_result",
]
