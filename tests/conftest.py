"""Pytest configuration and fixtures."""

import os
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio
import respx

from ui_registry.clients import RegistryFetcher
from ui_registry.core import configure_logging
from ui_registry.models import ProjectConfig
from ui_registry.registry import Registry


REGISTRY_URL = "https://registry.test"
STYLE = "new-york"


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["COMPONENTS_LOG_LEVEL"] = "DEBUG"
    os.environ.pop("COMPONENTS_REGISTRY_URL", None)
    configure_logging("DEBUG")


# ============================================================================
# Registry Data Fixtures
# ============================================================================

@pytest.fixture
def registry_index() -> list[dict[str, Any]]:
    """Global index served at index.json."""
    return [
        {"name": "utils", "type": "registry:lib"},
        {"name": "button", "type": "registry:ui"},
        {"name": "card", "type": "registry:ui", "registryDependencies": ["button"]},
        {"name": "alert", "type": "registry:ui"},
        {"name": "dialog", "type": "registry:ui", "registryDependencies": ["button"]},
        {"name": "index", "type": "registry:style", "registryDependencies": ["utils"]},
    ]


@pytest.fixture
def registry_items() -> dict[str, dict[str, Any]]:
    """Per-style item bodies keyed by name."""
    return {
        "utils": {
            "name": "utils",
            "type": "registry:lib",
            "dependencies": ["clsx", "tailwind-merge"],
            "files": [{"path": "lib/utils.ts", "content": "export function cn() {}", "type": "registry:lib"}],
        },
        "button": {
            "name": "button",
            "type": "registry:ui",
            "dependencies": ["react@18.3.1", "@radix-ui/react-slot"],
            "files": [{"path": "ui/button.tsx", "content": "export function Button() {}", "type": "registry:ui"}],
        },
        "card": {
            "name": "card",
            "type": "registry:ui",
            "dependencies": ["react@18.2.0", "clsx"],
            "registryDependencies": ["button"],
            "files": [{"path": "ui/card.tsx", "content": "export function Card() {}", "type": "registry:ui"}],
        },
        "alert": {
            "name": "alert",
            "type": "registry:ui",
            "files": [{"path": "ui/alert.tsx", "content": "export function Alert() {}", "type": "registry:ui"}],
            "tailwind": {"config": {"theme": {"extend": {"keyframes": {"alert-in": {"from": {"opacity": "0"}}}}}}},
            "cssVars": {"light": {"alert": "38 92% 50%"}},
        },
        "dialog": {
            "name": "dialog",
            "type": "registry:ui",
            "dependencies": ["@radix-ui/react-dialog@1.0.5"],
            "registryDependencies": ["button"],
            "files": [{"path": "ui/dialog.tsx", "content": "export function Dialog() {}", "type": "registry:ui"}],
        },
        "index": {
            "name": "index",
            "type": "registry:style",
            "dependencies": ["tailwindcss-animate", "class-variance-authority"],
            "registryDependencies": ["utils"],
            "tailwind": {"config": {"plugins": ['require("tailwindcss-animate")']}},
            "cssVars": {},
            "files": [],
        },
    }


@pytest.fixture
def zinc_base_color() -> dict[str, Any]:
    """Base color served at colors/zinc.json."""
    return {
        "inlineColors": {
            "light": {"background": "white", "foreground": "zinc-950"},
            "dark": {"background": "zinc-950", "foreground": "zinc-50"},
        },
        "cssVars": {
            "light": {
                "background": "0 0% 100%",
                "foreground": "240 10% 3.9%",
                "primary": "240 5.9% 10%",
                "primary-foreground": "0 0% 98%",
            },
            "dark": {
                "background": "240 10% 3.9%",
                "foreground": "0 0% 98%",
                "primary": "0 0% 98%",
                "primary-foreground": "240 5.9% 10%",
                "muted-foreground": "240 5% 64.9%",
            },
        },
        "inlineColorsTemplate": "@tailwind base;",
        "cssVarsTemplate": "@tailwind base;",
    }


@pytest.fixture
def project_config() -> ProjectConfig:
    """Project config without a base color."""
    return ProjectConfig.model_validate(
        {
            "style": STYLE,
            "tailwind": {"cssVariables": True},
            "aliases": {"components": "@/components", "utils": "@/lib/utils", "ui": "@/components/ui"},
            "resolvedPaths": {
                "components": "/app/components",
                "ui": "/app/components/ui",
                "lib": "/app/lib",
                "hooks": "/app/hooks",
            },
        }
    )


# ============================================================================
# HTTP/Network Fixtures
# ============================================================================

@pytest.fixture
def serve_registry(
    registry_index, registry_items, zinc_base_color
) -> Callable[..., None]:
    """
    Register respx routes for the sample registry.

    Must be called inside an active respx mock.
    """

    def _serve(overrides: dict[str, httpx.Response] | None = None) -> None:
        routes: dict[str, httpx.Response] = {
            "index.json": httpx.Response(200, json=registry_index),
            "styles/index.json": httpx.Response(
                200, json=[{"name": "new-york", "label": "New York"}, {"name": "default", "label": "Default"}]
            ),
            "colors/zinc.json": httpx.Response(200, json=zinc_base_color),
        }
        for name, body in registry_items.items():
            routes[f"styles/{STYLE}/{name}.json"] = httpx.Response(200, json=body)
        routes.update(overrides or {})

        for path, response in routes.items():
            respx.get(f"{REGISTRY_URL}/registry/{path}").mock(return_value=response)
        respx.route(url__startswith=f"{REGISTRY_URL}/registry/").mock(
            return_value=httpx.Response(404)
        )

    return _serve


@pytest_asyncio.fixture
async def fetcher():
    """Registry fetcher pointed at the test registry."""
    async with RegistryFetcher(registry_url=REGISTRY_URL) as client:
        yield client


@pytest.fixture
def registry(fetcher) -> Registry:
    """Registry facade over the test fetcher."""
    return Registry(fetcher)
