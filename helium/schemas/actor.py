"""Actor Schema — field rules for Actor documents.

Invariants:
    - id and actorId are non-empty and identical after service stamping
    - textSearch is stored lower-cased; defaults to the lower-cased name
    - deathYear, when present, is not earlier than birthYear
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_YEAR = 1800
MAX_YEAR = 2100


class ActorDocument(BaseModel):
    """Actor document as persisted in the shared collection."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1, max_length=100)
    actorId: str = Field(min_length=1, max_length=100)
    partitionKey: str = Field(min_length=1, max_length=100)
    type: Literal["Actor"] = "Actor"
    name: str = Field(min_length=1, max_length=200)
    birthYear: int | None = Field(None, ge=MIN_YEAR, le=MAX_YEAR)
    deathYear: int | None = Field(None, ge=MIN_YEAR, le=MAX_YEAR)
    profession: list[str] = Field(default_factory=list)
    movies: list[str] = Field(default_factory=list)
    textSearch: str | None = Field(None, max_length=2000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("textSearch")
    @classmethod
    def lower_text_search(cls, v: str | None) -> str | None:
        return v.lower() if v is not None else None

    @model_validator(mode="after")
    def check_lifespan_and_search(self):
        if (
            self.birthYear is not None
            and self.deathYear is not None
            and self.deathYear < self.birthYear
        ):
            raise ValueError("deathYear cannot be earlier than birthYear")
        if not self.textSearch:
            self.textSearch = self.name.lower()
        return self
