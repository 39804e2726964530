"""Loads the Storybook story index and derives component identities."""

from pydantic import ValidationError

from ui_components_server.core.errors import FailurePolicy, FetchError
from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.core.logging import get_logger
from ui_components_server.models.domain.components import StoryEntry

logger = get_logger(__name__)


def docs_url_for(base_url: str, story_id: str) -> str:
    """Docs view URL for the component owning ``story_id``."""
    return f"{base_url}/?path=/docs/{story_id.split('--')[0]}--docs"


def story_url_for(base_url: str, story_id: str) -> str:
    """Canvas view URL for a single story."""
    return f"{base_url}/?path=/story/{story_id}"


def _string_fields_ok(entry: dict, story_id: object) -> bool:
    if not isinstance(entry["title"], str) or not isinstance(story_id, str):
        return False
    return all(
        entry.get(field) is None or isinstance(entry.get(field), str)
        for field in ("name", "componentPath")
    )


def parse_index(data: dict, base_url: str) -> list[StoryEntry]:
    """Turn a raw ``index.json`` payload into story entries.

    Only entries of type ``story`` whose title has at least two ``/``
    segments are kept; the last segment names the component and the rest
    form its category. Malformed entries are logged and skipped so one bad
    record does not cost the rest of the catalog.
    """
    entries = data.get("entries") if isinstance(data, dict) else None
    if not isinstance(entries, dict):
        return []

    stories = []
    for key, entry in entries.items():
        if not isinstance(entry, dict):
            continue
        if entry.get("type") != "story" or not entry.get("title"):
            continue

        story_id = entry.get("id") or key
        if not _string_fields_ok(entry, story_id):
            logger.warning("Skipping malformed index entry", entry=key)
            continue

        title_parts = entry["title"].split("/")
        if len(title_parts) < 2:
            continue

        try:
            story = StoryEntry(
                id=story_id,
                type=entry["type"],
                title=entry["title"],
                name=entry.get("name"),
                component_path=entry.get("componentPath"),
                component_name=title_parts[-1],
                category="/".join(title_parts[:-1]),
                docs_url=docs_url_for(base_url, story_id),
                story_url=story_url_for(base_url, story_id),
            )
        except ValidationError as e:
            logger.warning(
                "Skipping invalid index entry", entry=key, errors=e.error_count()
            )
            continue
        stories.append(story)

    return stories


class StorybookIndexLoader:
    """Fetches the story index from the documentation site."""

    def __init__(self, client: DocsSiteClient, index_path: str = "/index.json"):
        self.client = client
        self.index_path = index_path

    async def load_index(
        self, policy: FailurePolicy = FailurePolicy.SWALLOW
    ) -> list[StoryEntry]:
        """Fetch and parse the story index.

        Args:
            policy: SWALLOW returns ``[]`` on fetch failure so the other tools
                stay usable; SURFACE re-raises

        Raises:
            FetchError: Only under ``FailurePolicy.SURFACE``
        """
        try:
            data = await self.client.fetch_json(self.index_path)
        except FetchError as e:
            if policy is FailurePolicy.SURFACE:
                raise
            logger.warning(
                "Story index unavailable, using empty catalog",
                path=self.index_path,
                error=e.message,
            )
            return []

        stories = parse_index(data, self.client.base_url or "")
        logger.info("Loaded story index", stories=len(stories))
        return stories
