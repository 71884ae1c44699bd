"""Data models for video metadata extraction."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Platform identifiers; "unknown" is only ever used on failed records
Platform = Literal["tiktok", "instagram", "youtube", "unknown"]


class VideoMetadata(BaseModel):
    """Normalized metadata for a single video URL.

    Serialized with camelCase keys (``creatorUrl``, ``originalUrl``,
    ``deepLink``). ``error`` is only present on failed records.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    platform: Platform
    creator: str = ""
    creator_url: str = Field(default="", alias="creatorUrl")
    title: str = ""
    thumbnail: str = ""
    original_url: str = Field(alias="originalUrl")
    deep_link: str = Field(default="", alias="deepLink")
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_error_matches_success(self) -> "VideoMetadata":
        if self.success and self.error is not None:
            raise ValueError("successful metadata must not carry an error")
        if not self.success and self.error is None:
            raise ValueError("failed metadata must carry an error")
        return self

    @classmethod
    def failure(cls, original_url: str, platform: Platform, error: str) -> "VideoMetadata":
        """Build a failed record with every descriptive field left empty."""
        return cls(
            success=False,
            platform=platform,
            original_url=original_url,
            error=error,
        )

    def to_response(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys and no ``error`` key on success."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ExtractRequest(BaseModel):
    """Request body: either a single ``url`` or a batch of ``urls``."""

    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    urls: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def _ignore_urls_when_url_given(cls, data: Any) -> Any:
        # ``urls`` is only consulted when ``url`` is empty
        if isinstance(data, dict) and isinstance(data.get("url"), str) and data["url"]:
            return {k: v for k, v in data.items() if k != "urls"}
        return data


class BatchResponse(BaseModel):
    results: List[VideoMetadata] = Field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        return {"results": [result.to_response() for result in self.results]}


class ErrorResponse(BaseModel):
    error: str
