"""Groups story entries into catalog components and applies field defaults."""

from ui_components_server.models.domain.components import (
    Component,
    ComponentDetails,
    Story,
    StoryEntry,
    StorybookLinks,
)


def default_description(component_name: str) -> str:
    return f"{component_name} component from the UI library"


def build_catalog(entries: list[StoryEntry]) -> list[Component]:
    """Fold story entries into one component per component name.

    The first entry seen for a name supplies the shared metadata; every entry
    contributes a story. Components and their stories keep encounter order.
    """
    components: dict[str, Component] = {}

    for entry in entries:
        component = components.get(entry.component_name)
        if component is None:
            component = Component(
                name=entry.component_name,
                title=entry.title,
                category=entry.category,
                component_path=entry.component_path,
                docs_url=entry.docs_url,
            )
            components[entry.component_name] = component

        component.stories.append(Story(name=entry.name, story_url=entry.story_url))

    return list(components.values())


def resolve_description(
    component: Component, details: ComponentDetails | None = None
) -> str:
    """Description shown for a component, falling back to a generated one."""
    if details is not None and details.description:
        return details.description
    return component.description or default_description(component.name)


def assemble_component(
    component: Component,
    details: ComponentDetails | None = None,
    base_url: str | None = None,
) -> Component:
    """Return a copy of ``component`` with every optional field resolved.

    This is the single place where missing extracted data is defaulted:
    description falls back to a generated sentence, lists fall back to empty.
    """
    details = details or ComponentDetails()
    return component.model_copy(
        update={
            "stories": list(component.stories),
            "description": resolve_description(component, details),
            "examples": list(details.examples),
            "props": list(details.props),
            "api_reference": details.api_reference,
            "storybook": StorybookLinks(
                base_url=base_url,
                docs_url=component.docs_url,
                stories_count=len(component.stories),
            ),
        }
    )
