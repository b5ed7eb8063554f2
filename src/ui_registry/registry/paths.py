"""Target directories for registry items and files."""

from pathlib import Path

from ui_registry.models import ProjectConfig, RegistryItem, RegistryItemFile, RegistryItemType

# File type -> resolved_paths key; anything else lands in components
FILE_TARGETS: dict[str, str] = {
    RegistryItemType.UI.value: "ui",
    RegistryItemType.LIB.value: "lib",
    RegistryItemType.BLOCK.value: "components",
    RegistryItemType.HOOK.value: "hooks",
}


def get_item_target_path(
    config: ProjectConfig, item: RegistryItem, override: str | None = None
) -> str | None:
    """
    Directory an item installs into.

    Args:
        config: Resolved project config
        item: Registry item
        override: Explicit target, wins over everything

    Returns:
        Target directory, or None if the item's type prefix has no configured path
    """
    if override:
        return override

    if item.type == RegistryItemType.UI and config.aliases.ui:
        return config.resolved_paths.get("ui")

    parent, _, kind = (item.type or "").partition(":")
    if parent not in config.resolved_paths:
        return None

    return str(Path(config.resolved_paths[parent]) / kind)


def get_registry_item_file_target_path(
    file: RegistryItemFile, config: ProjectConfig, override: str | None = None
) -> str | None:
    """Directory a single item file installs into."""
    if override:
        return override

    return config.resolved_paths.get(FILE_TARGETS.get(file.type, "components"))
