"""
Confluence page summary result model.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel


class ConfluenceSummaryResult(ApiModel):
    """Outcome of summarising one Confluence page.

    ``summary``, ``title`` and ``error`` are always present in the JSON form
    (``null`` when not applicable) so the browser can rely on the shape.
    """

    success: bool = False
    summary: str | None = None
    title: str | None = None
    error: str | None = None
    page_id: str | None = Field(default=None, alias="pageId")
    version: int | None = None

    @classmethod
    def failure(cls, error: str) -> "ConfluenceSummaryResult":
        return cls(success=False, error=error)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSummaryResult":
        """Build a successful result from a Confluence content payload.

        Args:
            data: The content payload (``title``, ``id``, ``version``)
            **kwargs: ``summary`` - the extracted summary text

        Returns:
            A successful ConfluenceSummaryResult
        """
        version_data = data.get("version")
        version = (
            version_data.get("number") if isinstance(version_data, dict) else None
        ) or 1
        return cls(
            success=True,
            summary=kwargs.get("summary"),
            title=data.get("title"),
            page_id=str(data["id"]) if data.get("id") is not None else None,
            version=version,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result = {
            "success": self.success,
            "summary": self.summary,
            "title": self.title,
            "error": self.error,
        }
        if self.page_id is not None:
            result["pageId"] = self.page_id
        if self.version is not None:
            result["version"] = self.version
        return result
