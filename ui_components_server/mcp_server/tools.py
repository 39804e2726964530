"""MCP tools exposing the component catalog and design tokens."""

from ui_components_server.core.cache import CATALOG_KEY, MemoCache, details_key
from ui_components_server.core.catalog import (
    assemble_component,
    build_catalog,
    resolve_description,
)
from ui_components_server.core.details import DetailExtractor
from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.core.index_loader import StorybookIndexLoader
from ui_components_server.core.logging import get_logger
from ui_components_server.core.tokens import TokenExtractor
from ui_components_server.mcp_server.config import Config
from ui_components_server.models.api.responses import (
    CatalogRefreshResponse,
    ComponentExamplesResponse,
    ComponentNotFound,
    ComponentSearchResponse,
)
from ui_components_server.models.domain.components import Component, ComponentDetails
from ui_components_server.models.domain.tokens import TokenCategory, TokenSet

logger = get_logger(__name__)


class UIComponentsTools:
    """Query layer over the catalog built from the documentation site."""

    def __init__(
        self,
        client: DocsSiteClient,
        config: Config,
        cache: MemoCache | None = None,
    ):
        """Initialize tools with a site client and configuration."""
        self.client = client
        self.config = config
        settings = config.settings

        self.cache = cache or MemoCache(ttl=settings.cache_ttl)
        self.index_loader = StorybookIndexLoader(client, settings.index_path)
        self.detail_extractor = DetailExtractor(client, config.selectors.details)
        self.token_extractor = TokenExtractor(
            client, config.selectors, settings.tokens_path
        )

    # Catalog

    async def list_components(self) -> list[Component]:
        """Return the full catalog, built from the story index when not cached.

        An unreachable index yields an empty catalog, which is not cached so
        the next call retries.
        """

        async def build() -> list[Component]:
            entries = await self.index_loader.load_index()
            catalog = build_catalog(entries)
            logger.info("Built component catalog", components=len(catalog))
            return catalog

        catalog = await self.cache.get_or_build(CATALOG_KEY, build, should_cache=bool)
        return list(catalog)

    async def _find_component(self, component_name: str) -> Component | None:
        wanted = component_name.lower()
        for component in await self.list_components():
            if component.name.lower() == wanted:
                return component
        return None

    async def _get_details(self, component: Component) -> ComponentDetails:
        return await self.cache.get_or_build(
            details_key(component.docs_url),
            lambda: self.detail_extractor.extract_details(component.docs_url),
            should_cache=lambda details: not details.is_empty,
        )

    # Component tools

    async def get_component(
        self, component_name: str
    ) -> Component | ComponentNotFound:
        """Get a component by name, merged with its documentation page details.

        Args:
            component_name: Component name, matched case-insensitively

        Returns:
            The assembled Component, or ComponentNotFound if no component has
            that name
        """
        component = await self._find_component(component_name)
        if component is None:
            logger.info("Component not found", component=component_name)
            return ComponentNotFound.for_name(component_name)

        details = await self._get_details(component)
        return assemble_component(component, details, self.client.base_url)

    async def search_components(self, query: str) -> ComponentSearchResponse:
        """Search components by name or description.

        Args:
            query: Case-insensitive substring; an empty query matches everything

        Returns:
            ComponentSearchResponse with matches in catalog order
        """
        needle = query.lower()
        fetch_details = self.config.settings.search_fetch_details
        matches = []

        for component in await self.list_components():
            if fetch_details:
                resolved = assemble_component(
                    component, await self._get_details(component), self.client.base_url
                )
            else:
                resolved = component.model_copy(
                    update={"description": resolve_description(component)}
                )

            if needle in resolved.name.lower() or needle in resolved.description.lower():
                matches.append(resolved)

        logger.info("Searched components", query=query, results=len(matches))
        return ComponentSearchResponse(
            query=query, total_results=len(matches), components=matches
        )

    async def get_component_examples(
        self, component_name: str
    ) -> ComponentExamplesResponse | ComponentNotFound:
        """Get only the usage examples of a component.

        A missing component yields the same ComponentNotFound result that
        ``get_component`` produces.
        """
        result = await self.get_component(component_name)
        if isinstance(result, ComponentNotFound):
            return result

        return ComponentExamplesResponse(
            component=component_name, examples=result.examples or []
        )

    # Design tokens

    async def get_design_tokens(self, category: str = "all") -> TokenSet:
        """Get design tokens for one category or all of them.

        Raises:
            ValueError: For an unknown category
            FetchError: If the tokens page cannot be retrieved
        """
        return await self.token_extractor.extract_tokens(category)

    async def get_all_design_tokens(self) -> TokenSet:
        return await self.get_design_tokens(TokenCategory.ALL)

    # Maintenance

    async def refresh_catalog(self) -> CatalogRefreshResponse:
        """Drop every memoized catalog and detail entry."""
        cleared = self.cache.invalidate()
        logger.info("Cleared component cache", entries=cleared)
        return CatalogRefreshResponse(
            cleared=cleared,
            message=f"Cleared {cleared} cached entries; the catalog will be rebuilt on next use.",
        )
