from pydantic import BaseModel, Field


class EntryFields(BaseModel):
    """The per-entry metadata of a clipping, with the source title factored out."""

    is_highlight: bool = Field(description="True for highlight/note content, False for a bare bookmark")
    page: str | None = Field(default=None, description="Page number or page range")
    location: str | None = Field(default=None, description="Location number or location range")
    date: str | None = Field(default=None, description="Free-form date text from the 'Added on' line")
    content: str = Field(default="", description="Content of the clipping")
    header: str | None = Field(default=None, description="Descriptor text between the leading dash and the first '|'")

    @property
    def is_bookmark(self) -> bool:
        return not self.is_highlight


class ClippingEntry(EntryFields):
    """Represents a single Kindle clipping (highlight, note, or bookmark)."""

    title: str = Field(description="The title line of the source book or document")

    def entry_fields(self) -> EntryFields:
        """Return every attribute except the title."""
        return EntryFields(**self.model_dump(exclude={"title"}))
