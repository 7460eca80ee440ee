"""Core data models for clippings2org application."""

from pydantic import BaseModel, Field


class ConversionStats(BaseModel):
    """Statistics for a conversion run."""

    titles: int = Field(default=0, description="Number of distinct source titles")
    total_entries: int = Field(default=0, description="Total number of clippings parsed")
    highlights: int = Field(default=0, description="Number of highlight or note clippings")
    bookmarks: int = Field(default=0, description="Number of bookmark clippings")


class ConversionResult(BaseModel):
    """The rendered outline together with the statistics of the run."""

    document: str = Field(description="Rendered Org-mode outline")
    stats: ConversionStats = Field(default_factory=ConversionStats)
