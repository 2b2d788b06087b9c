"""Movie Schema — field rules for Movie documents.

Invariants:
    - id and movieId are non-empty and identical after service stamping
    - textSearch is stored lower-cased and always begins with the lower-cased title,
      so substring search on it never matches on another document type's fields
    - textSearch defaults to the lower-cased title when omitted
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

FIRST_FILM_YEAR = 1874
MAX_YEAR = 2100


class MovieDocument(BaseModel):
    """Movie document as persisted in the shared collection."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1, max_length=100)
    movieId: str = Field(min_length=1, max_length=100)
    partitionKey: str = Field(min_length=1, max_length=100)
    type: Literal["Movie"] = "Movie"
    title: str = Field(min_length=1, max_length=300)
    year: int | None = Field(None, ge=FIRST_FILM_YEAR, le=MAX_YEAR)
    runtime: int | None = Field(None, ge=0, le=1000)
    rating: float | None = Field(None, ge=0.0, le=10.0)
    votes: int | None = Field(None, ge=0)
    genres: list[str] = Field(default_factory=list)
    roles: list[dict[str, Any]] = Field(default_factory=list)
    textSearch: str | None = Field(None, max_length=2000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("textSearch")
    @classmethod
    def lower_text_search(cls, v: str | None) -> str | None:
        return v.lower() if v is not None else None

    @model_validator(mode="after")
    def check_text_search_prefix(self):
        title = self.title.lower()
        if not self.textSearch:
            self.textSearch = title
        elif not self.textSearch.startswith(title):
            raise ValueError("textSearch must begin with the lower-cased title")
        return self
