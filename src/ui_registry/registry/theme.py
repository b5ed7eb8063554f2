"""Theme item derived from a base color."""

from typing import Any

from returns.result import Result

from ui_registry.core import get_logger
from ui_registry.core.errors import RegistryError
from ui_registry.models import (
    BaseColor,
    ProjectConfig,
    RegistryItem,
    RegistryItemCssVars,
    RegistryItemType,
)

from .api import Registry

logger = get_logger(__name__)

DEFAULT_RADIUS = "0.5rem"

BORDER_RADIUS = {
    "lg": "var(--radius)",
    "md": "calc(var(--radius) - 2px)",
    "sm": "calc(var(--radius) - 4px)",
}


def build_tailwind_theme_colors_from_css_vars(css_vars: dict[str, str]) -> dict[str, Any]:
    """
    Tailwind color tokens pointing at CSS variables.

    ``primary`` and ``primary-foreground`` become
    ``{"primary": {"DEFAULT": "hsl(var(--primary))", "foreground": "hsl(var(--primary-foreground))"}}``.

    Args:
        css_vars: Variable name -> value (values are not read)

    Returns:
        Nested color token record
    """
    result: dict[str, Any] = {}

    for key in css_vars:
        color, _, sub = key.partition("-")

        if not sub:
            if isinstance(result.get(color), dict):
                result[color]["DEFAULT"] = f"hsl(var(--{key}))"
            else:
                result[color] = f"hsl(var(--{key}))"
            continue

        if not isinstance(result.get(color), dict):
            result[color] = {"DEFAULT": f"hsl(var(--{color}))"}
        result[color][sub] = f"hsl(var(--{key}))"

    # Seeded DEFAULTs only survive when the bare variable exists
    for color, value in result.items():
        if (
            isinstance(value, dict)
            and value.get("DEFAULT") == f"hsl(var(--{color}))"
            and color not in css_vars
        ):
            del value["DEFAULT"]

    return result


def build_theme(name: str, base_color: BaseColor, css_variables: bool) -> RegistryItem:
    """
    Synthetic theme item for a base color.

    With CSS variables on, the base color's variables fill in under the
    theme's own, and Tailwind colors are derived from the dark scheme.
    """
    colors: dict[str, Any] = {}
    css_vars = RegistryItemCssVars(light={"radius": DEFAULT_RADIUS}, dark={})

    if css_variables:
        colors = {**colors, **build_tailwind_theme_colors_from_css_vars(base_color.css_vars.dark)}
        css_vars = RegistryItemCssVars(
            light={**base_color.css_vars.light, **css_vars.light},
            dark={**base_color.css_vars.dark, **css_vars.dark},
        )

    return RegistryItem(
        name=name,
        type=RegistryItemType.THEME,
        tailwind={
            "config": {
                "theme": {
                    "extend": {
                        "borderRadius": dict(BORDER_RADIUS),
                        "colors": colors,
                    },
                },
            },
        },
        css_vars=css_vars,
    )


async def get_theme_result(
    registry: Registry, name: str, config: ProjectConfig
) -> Result[RegistryItem, RegistryError]:
    """Theme item for the named base color, or why it could not be built."""
    result = await registry.get_registry_base_color_result(name)
    return result.map(
        lambda base_color: build_theme(name, base_color, config.tailwind.css_variables)
    )


async def get_theme(registry: Registry, name: str, config: ProjectConfig) -> RegistryItem | None:
    """Theme item for the named base color, or None if the palette is unavailable."""
    theme = (await get_theme_result(registry, name, config)).value_or(None)
    if theme is not None:
        logger.debug("theme_built", base_color=name, css_variables=config.tailwind.css_variables)
    return theme
