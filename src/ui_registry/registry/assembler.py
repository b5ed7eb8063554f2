"""
Items Tree Assembler
Resolves requested items into one merged payload.
"""

import asyncio

from returns.result import Failure, Result, Success

from ui_registry.core import LogContext, get_logger
from ui_registry.core.errors import ErrorKind, RegistryError, report_error
from ui_registry.core.merge import merge_all_records, merge_dependencies, merge_keyed
from ui_registry.models import ProjectConfig, RegistryItem, RegistryItemCssVars, ResolvedTree

from .api import Registry
from .resolver import resolve_tree
from .theme import get_theme

logger = get_logger(__name__)

INDEX_ITEM = "index"


def _nothing_resolved(names: list[str]) -> Result[list[RegistryItem], RegistryError]:
    error = RegistryError(
        kind=ErrorKind.NOT_FOUND,
        message=f"None of the requested items could be resolved: {', '.join(names)}",
    )
    report_error(error)
    return Failure(error)


def merge_items(payload: list[RegistryItem]) -> ResolvedTree:
    """
    Merge items in payload order into one tree.

    Args:
        payload: Items, earliest first; later items win on collision

    Returns:
        Merged tree
    """
    css_vars = [item.css_vars or RegistryItemCssVars() for item in payload]

    return ResolvedTree(
        dependencies=merge_dependencies(item.dependencies for item in payload),
        dev_dependencies=merge_dependencies(item.dev_dependencies for item in payload),
        files=merge_keyed((item.files for item in payload), key=lambda file: file.path),
        tailwind=merge_all_records(item.tailwind for item in payload),
        css_vars=RegistryItemCssVars(
            light=merge_all_records(v.light for v in css_vars),
            dark=merge_all_records(v.dark for v in css_vars),
        ),
    )


async def collect_payload_result(
    registry: Registry, names: list[str], config: ProjectConfig
) -> Result[list[RegistryItem], RegistryError]:
    """
    Fetch every item that contributes to the tree, in merge order.

    The order is theme (if a base color is set), the style's index item
    (if "index" was requested), then the resolved items.

    Args:
        registry: Registry facade
        names: Requested item names
        config: Resolved project config

    Returns:
        Payload items, or why collection stopped
    """
    index_result = await registry.get_registry_index_result()
    if isinstance(index_result, Failure):
        return index_result
    index = index_result.unwrap()

    fetched = await asyncio.gather(
        *(registry.get_registry_item(config.style, name) for name in names)
    )
    items = [item for item in fetched if item is not None]
    if not items:
        return _nothing_resolved(names)

    registry_dependencies: dict[str, None] = {}
    for item in items:
        for dependency in item.registry_dependencies or []:
            registry_dependencies.setdefault(dependency, None)

    tree = resolve_tree(index, [*names, *registry_dependencies])
    payload_result = await registry.fetch_tree_result(config.style, tree)
    if isinstance(payload_result, Failure):
        return payload_result
    payload = payload_result.unwrap()

    if INDEX_ITEM in names:
        index_item = await registry.get_registry_item(config.style, INDEX_ITEM)
        if index_item is not None:
            payload.insert(0, index_item)

    if config.tailwind.base_color:
        theme = await get_theme(registry, config.tailwind.base_color, config)
        if theme is not None:
            payload.insert(0, theme)

    return Success(payload)


async def resolve_items_tree_result(
    registry: Registry, names: list[str], config: ProjectConfig
) -> Result[ResolvedTree, RegistryError]:
    """
    Resolve requested items, their registry dependencies and the theme.

    Args:
        registry: Registry facade
        names: Requested item names
        config: Resolved project config

    Returns:
        Merged tree, or why resolution stopped
    """
    with LogContext(style=config.style, names=",".join(names)):
        payload_result = await collect_payload_result(registry, names, config)
        if isinstance(payload_result, Failure):
            return payload_result
        payload = payload_result.unwrap()

        resolved = merge_items(payload)
        logger.info(
            "tree_resolved",
            items=len(payload),
            files=len(resolved.files),
            dependencies=len(resolved.dependencies),
        )
        return Success(resolved)


async def resolve_items_tree(
    registry: Registry, names: list[str], config: ProjectConfig
) -> ResolvedTree | None:
    """Merged tree for the requested items, or None if nothing could be resolved."""
    return (await resolve_items_tree_result(registry, names, config)).value_or(None)
