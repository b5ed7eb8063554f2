"""Registry dependency resolution."""

from ui_registry.core import get_logger
from ui_registry.models import IndexEntry

logger = get_logger(__name__)


def resolve_tree(index: list[IndexEntry], names: list[str]) -> list[IndexEntry]:
    """
    Expand names into the index entries they transitively depend on.

    Depth-first: each entry is followed by its registry dependencies before
    the next requested name. Names missing from the index are skipped. Each
    entry appears once, at its first visit. A cycle is cut at the revisit.

    Args:
        index: Global registry index
        names: Requested item names

    Returns:
        Ordered, de-duplicated index entries
    """
    by_name: dict[str, IndexEntry] = {}
    for entry in index:
        # First match wins, as in a linear scan
        by_name.setdefault(entry.name, entry)

    tree: list[IndexEntry] = []
    visited: set[str] = set()
    path: list[str] = []

    def expand(requested: list[str]) -> None:
        for name in requested:
            if name in visited:
                if name in path:
                    logger.warning(
                        "registry_dependency_cycle", name=name, path=" -> ".join([*path, name])
                    )
                continue

            entry = by_name.get(name)
            if entry is None:
                continue

            visited.add(name)
            tree.append(entry)

            if entry.registry_dependencies:
                path.append(name)
                expand(entry.registry_dependencies)
                path.pop()

    expand(names)
    return tree
