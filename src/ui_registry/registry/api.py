"""
Registry Facade
Typed access to the documents served by a component registry.
"""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from returns.result import Failure, Result, Success

from ui_registry.clients import RegistryFetcher
from ui_registry.core import get_logger
from ui_registry.core.errors import ErrorKind, RegistryError, report_error
from ui_registry.models import (
    BaseColor,
    BaseColorOption,
    IndexEntry,
    RegistryIndex,
    RegistryItem,
    RegistryItemList,
    Style,
    StyleList,
)

logger = get_logger(__name__)

T = TypeVar("T")

INDEX_PATH = "index.json"
STYLES_PATH = "styles/index.json"

ItemAdapter = TypeAdapter(RegistryItem)
BaseColorAdapter = TypeAdapter(BaseColor)

BASE_COLORS: list[BaseColorOption] = [
    BaseColorOption(name="neutral", label="Neutral"),
    BaseColorOption(name="gray", label="Gray"),
    BaseColorOption(name="zinc", label="Zinc"),
    BaseColorOption(name="stone", label="Stone"),
    BaseColorOption(name="slate", label="Slate"),
]


def item_path(style: str, name: str) -> str:
    """Registry-relative path of a style-scoped item."""
    return f"styles/{style}/{name}.json"


def base_color_path(name: str) -> str:
    """Registry-relative path of a base color palette."""
    return f"colors/{name}.json"


class Registry:
    """
    Typed registry access.

    The ``*_result`` methods return a Result carrying the error kind. The
    plain getters report nothing themselves and collapse a failure to None.
    """

    def __init__(self, fetcher: RegistryFetcher) -> None:
        self.fetcher = fetcher

    async def aclose(self) -> None:
        """Close the underlying fetcher"""
        await self.fetcher.aclose()

    async def __aenter__(self) -> "Registry":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    # ========================================================================
    # Result-returning accessors
    # ========================================================================

    async def get_registry_index_result(self) -> Result[list[IndexEntry], RegistryError]:
        """Fetch the global index."""
        return await self._fetch_document(INDEX_PATH, RegistryIndex)

    async def get_registry_styles_result(self) -> Result[list[Style], RegistryError]:
        """Fetch the list of styles."""
        return await self._fetch_document(STYLES_PATH, StyleList)

    async def get_registry_item_result(
        self, style: str, name: str
    ) -> Result[RegistryItem, RegistryError]:
        """Fetch one style-scoped item."""
        return await self._fetch_document(item_path(style, name), ItemAdapter)

    async def get_registry_base_color_result(self, name: str) -> Result[BaseColor, RegistryError]:
        """Fetch a base color palette."""
        return await self._fetch_document(base_color_path(name), BaseColorAdapter)

    async def fetch_tree_result(
        self, style: str, tree: list[IndexEntry]
    ) -> Result[list[RegistryItem], RegistryError]:
        """
        Fetch the full bodies of resolved index entries.

        Args:
            style: Active style
            tree: Resolved index entries

        Returns:
            Items in tree order, or the first failure
        """
        paths = [item_path(style, entry.name) for entry in tree]
        result = await self.fetcher.fetch(paths)
        return result.bind(lambda documents: self._validate(documents, RegistryItemList, paths))

    # ========================================================================
    # Optional-returning accessors
    # ========================================================================

    async def get_registry_index(self) -> list[IndexEntry] | None:
        """Global index, or None if unavailable."""
        return (await self.get_registry_index_result()).value_or(None)

    async def get_registry_styles(self) -> list[Style]:
        """Available styles, or an empty list if unavailable."""
        return (await self.get_registry_styles_result()).value_or([])

    async def get_registry_item(self, style: str, name: str) -> RegistryItem | None:
        """Style-scoped item, or None if it cannot be fetched."""
        return (await self.get_registry_item_result(style, name)).value_or(None)

    async def get_registry_base_color(self, name: str) -> BaseColor | None:
        """Base color palette, or None if it cannot be fetched."""
        return (await self.get_registry_base_color_result(name)).value_or(None)

    async def fetch_tree(self, style: str, tree: list[IndexEntry]) -> list[RegistryItem] | None:
        """Full item bodies for a resolved tree, or None on any failure."""
        return (await self.fetch_tree_result(style, tree)).value_or(None)

    @staticmethod
    def get_registry_base_colors() -> list[BaseColorOption]:
        """The fixed set of selectable base colors."""
        return list(BASE_COLORS)

    # ========================================================================
    # Helpers
    # ========================================================================

    async def _fetch_document(
        self, path: str, adapter: TypeAdapter[T]
    ) -> Result[T, RegistryError]:
        result = await self.fetcher.fetch([path])
        return result.bind(lambda documents: self._validate(documents[0], adapter, [path]))

    def _validate(
        self, document: Any, adapter: TypeAdapter[T], paths: list[str]
    ) -> Result[T, RegistryError]:
        try:
            return Success(adapter.validate_python(document))
        except ValidationError as e:
            url = self.fetcher.url_for(paths[0]) if len(paths) == 1 else None
            error = RegistryError(
                kind=ErrorKind.VALIDATION,
                message=f"Invalid registry document ({', '.join(paths)}): {e.error_count()} errors",
                url=url,
            )
            report_error(error)
            logger.debug("validation_details", errors=e.errors(include_url=False))
            return Failure(error)
