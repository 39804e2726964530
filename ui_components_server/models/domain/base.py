"""Shared base model for domain objects exchanged as camelCase JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that accepts snake_case or camelCase and emits camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize for a tool or resource response, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["CamelModel"]
