import re
from dataclasses import dataclass, field
from typing import Any

from cloud_dictionary.definitions.entities.definition import Definition
from cloud_dictionary.definitions.exceptions import InvalidPaginationError

NORMALIZED_FIELD = "normalized"
SEARCHABLE_FIELDS = ("word", "content", "author_name", "tag", "abbreviation")


def normalize(value: str | None) -> str:
    """Fold a value to the canonical case used for all case-insensitive matching."""
    return (value or "").casefold()


def normalized_fields(definition: Definition) -> dict[str, str]:
    """The case-folded copies of the searchable fields stored alongside a definition."""
    return {
        "word": normalize(definition.word),
        "content": normalize(definition.content),
        "author_name": normalize(definition.author.name),
        "tag": normalize(definition.tag),
        "abbreviation": normalize(definition.abbreviation),
    }


@dataclass(frozen=True)
class DefinitionQuery:
    filter: dict[str, Any] = field(default_factory=dict)
    skip: int | None = None
    limit: int | None = None


class DefinitionQueryComposer:
    """
    Translates the dictionary's lookups into filtered, paginated definition queries.

    Matching is case-insensitive: the query terms are folded with the same normalization that is
    applied to the stored copies of the searchable fields.
    """

    TAG_DEFAULT_SKIP = 0
    TAG_DEFAULT_BATCH_SIZE = 100
    SEARCH_DEFAULT_SKIP = 0
    SEARCH_DEFAULT_BATCH_SIZE = 20

    def by_id(self, definition_id: str) -> DefinitionQuery:
        return DefinitionQuery(filter={"id": definition_id}, limit=1)

    def by_word(self, word: str) -> DefinitionQuery:
        # At most one definition per word is assumed; extra matches collapse to the first.
        return DefinitionQuery(filter={f"{NORMALIZED_FIELD}.word": normalize(word)}, limit=1)

    def by_tag(
        self, tag: str, skip: int | None = TAG_DEFAULT_SKIP, batch_size: int | None = TAG_DEFAULT_BATCH_SIZE
    ) -> DefinitionQuery:
        skip = self.TAG_DEFAULT_SKIP if skip is None else skip
        batch_size = self.TAG_DEFAULT_BATCH_SIZE if batch_size is None else batch_size
        self._validate_bounds(skip, batch_size)

        return DefinitionQuery(filter={f"{NORMALIZED_FIELD}.tag": normalize(tag)}, skip=skip, limit=batch_size)

    def by_search(
        self, term: str, skip: int | None = SEARCH_DEFAULT_SKIP, batch_size: int | None = SEARCH_DEFAULT_BATCH_SIZE
    ) -> DefinitionQuery:
        """
        Substring match of the term against the word, content, author name, tag and abbreviation.
        A definition matching in any one of these fields is returned.
        """
        self._validate_bounds(skip, batch_size)

        pattern = re.escape(normalize(term))
        query_filter = {
            "$or": [{f"{NORMALIZED_FIELD}.{name}": {"$regex": pattern}} for name in SEARCHABLE_FIELDS]
        }
        return DefinitionQuery(filter=query_filter, skip=skip, limit=batch_size)

    def all_definitions(self, skip: int | None = None, batch_size: int | None = None) -> DefinitionQuery:
        self._validate_bounds(skip, batch_size)
        return DefinitionQuery(skip=skip, limit=batch_size)

    def at_offset(self, index: int) -> DefinitionQuery:
        self._validate_bounds(index, 1)
        return DefinitionQuery(skip=index, limit=1)

    @staticmethod
    def _validate_bounds(skip: int | None, batch_size: int | None) -> None:
        if skip is not None and skip < 0:
            raise InvalidPaginationError(f"Skip must be zero or positive, got {skip}.")
        if batch_size is not None and batch_size <= 0:
            raise InvalidPaginationError(f"Batch size must be positive, got {batch_size}.")
