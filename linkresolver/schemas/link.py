"""Link resolution API schemas."""

from pydantic import BaseModel, Field

from linkresolver.domain.enums import ExpressionKind
from linkresolver.domain.value_objects import ResolutionResult


class LinkResolutionResponse(BaseModel):
    """Response for GET /links/display-name and GET /links/url."""

    kind: ExpressionKind = Field(..., description="Matched expression kind")
    value: int | str = Field(..., description="Entity id or raw url/file value")
    resolved: str = Field(
        default="", description="Display name or URL; empty when nothing was found"
    )
    language_id: int = Field(
        ..., description="Requested language id (0 = working language)"
    )

    @classmethod
    def from_result(
        cls, result: ResolutionResult, language_id: int
    ) -> "LinkResolutionResponse":
        return cls(
            kind=result.kind,
            value=result.value,
            resolved=result.resolved,
            language_id=language_id,
        )


class CacheClearResponse(BaseModel):
    """Response for DELETE /links/cache."""

    cleared: bool = Field(default=True)
    removed: int = Field(..., description="Number of cache entries removed")
