"""Component catalog domain models."""

from pydantic import Field

from ui_components_server.models.domain.base import CamelModel


class StoryEntry(CamelModel):
    """A story record from the Storybook index plus its derived catalog fields."""

    id: str
    type: str
    title: str
    name: str | None = None
    component_path: str | None = None

    # Derived by the index loader
    component_name: str
    category: str
    docs_url: str
    story_url: str


class Story(CamelModel):
    """A navigable usage variant of a component."""

    name: str | None = None
    story_url: str


class Example(CamelModel):
    """A code block found on a component documentation page."""

    title: str
    code: str
    language: str = "text"


class PropDefinition(CamelModel):
    """One row of a component props table."""

    name: str | None = None
    type: str | None = None
    description: str | None = None
    required: bool = False


class ComponentDetails(CamelModel):
    """Raw output of detail extraction; every field may be missing."""

    description: str | None = None
    examples: list[Example] = Field(default_factory=list)
    props: list[PropDefinition] = Field(default_factory=list)
    api_reference: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.description is None
            and not self.examples
            and not self.props
            and self.api_reference is None
        )


class StorybookLinks(CamelModel):
    """Where a component lives on the documentation site."""

    base_url: str | None = None
    docs_url: str
    stories_count: int


class Component(CamelModel):
    """A catalog record grouping every story of one component."""

    name: str
    title: str
    category: str
    component_path: str | None = None
    docs_url: str
    stories: list[Story] = Field(default_factory=list)
    description: str | None = None
    examples: list[Example] | None = None
    props: list[PropDefinition] | None = None
    api_reference: str | None = None
    storybook: StorybookLinks | None = None


__all__ = [
    "StoryEntry",
    "Story",
    "Example",
    "PropDefinition",
    "ComponentDetails",
    "StorybookLinks",
    "Component",
]
