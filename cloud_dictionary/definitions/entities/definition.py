from pydantic import BaseModel, Field, field_validator


class Author(BaseModel):
    name: str = ""


class Definition(BaseModel):
    id: str
    word: str
    content: str
    tag: str = ""
    abbreviation: str = ""
    author: Author = Field(default_factory=Author)

    @field_validator("id")
    def _validate_id(cls, definition_id: str) -> str:
        if not definition_id.strip():
            raise ValueError("Definition id cannot be empty.")
        return definition_id


class WordDefinition(BaseModel):
    """A definition reduced to its id and word, for word listings."""

    id: str
    word: str
