"""Feed list models."""

from pydantic import BaseModel, Field, field_validator


class FeedEntry(BaseModel):
    """One ``<feed>`` element of a feed list document."""

    url: str = Field(..., min_length=1, description="RSS feed URL or local path")
    name: str = Field(..., min_length=1, description="Link text on the index page")
    file: str = Field(..., min_length=1, description="Output HTML file name")

    @field_validator("file")
    @classmethod
    def file_is_plain_name(cls, value: str) -> str:
        """Keep generated pages inside the output directory."""
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("file must be a plain file name without path separators")
        return value


class FeedList(BaseModel):
    """A feed list document: index title plus ordered feeds."""

    title: str = Field(default="RSS Aggregator", description="Index page title")
    feeds: list[FeedEntry] = Field(default_factory=list)
