"""
Base models for the jira_cloud API models.

Jira sends camelCase JSON. Models declare snake_case fields and the base
configuration maps them to camelCase aliases, so the same model can decode a
response and serialize a request payload.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base model for all API models.

    Unknown keys in API responses are ignored; fields can be populated by
    their Python name or their JSON alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_api_payload(self) -> dict[str, Any]:
        """
        Convert the model to the JSON body Jira expects.

        Returns:
            A camelCase dictionary without the fields that were left unset
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
