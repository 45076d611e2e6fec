"""
Base model for the dashboard's API models.

Models are built from Jira/Confluence payloads with ``from_api_response`` and
rendered back to camelCase JSON for the browser with ``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a JSON-ready dictionary using field aliases.

        Returns:
            A dictionary keyed the way the browser expects
        """
        return self.model_dump(by_alias=True, exclude_none=True)
