"""
Movie list selectors.

A movie listing is driven by exactly one selector: search text, a category
name (popular, top_rated, upcoming, ...), a numeric genre id, or nothing.
Callers either build the variant directly or let choose_selector() apply the
precedence search > category > genre > none.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SearchText:
    """Free-text movie search."""

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("SearchText requires non-empty text")


@dataclass(frozen=True)
class CategoryName:
    """TMDB movie category such as 'top_rated' or 'upcoming'."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("CategoryName requires a non-empty name")


@dataclass(frozen=True)
class GenreId:
    """Numeric TMDB genre id."""

    genre_id: int

    def __post_init__(self):
        if isinstance(self.genre_id, bool) or not isinstance(self.genre_id, int):
            raise TypeError(f"GenreId requires an int, got {type(self.genre_id).__name__}")


@dataclass(frozen=True)
class NoSelector:
    """No selector; resolves to popular movies."""


MovieSelector = Union[SearchText, CategoryName, GenreId, NoSelector]


def _present(text: Optional[str]) -> bool:
    return text is not None and bool(text.strip())


def choose_selector(
    search_query: Optional[str] = None,
    category: Optional[str] = None,
    genre_id: Optional[int] = None,
) -> MovieSelector:
    """
    Pick the single selector for a movie listing.

    Empty or whitespace-only text and a zero genre id count as absent and
    fall through to the next candidate.

    Args:
        search_query: Search text (highest precedence)
        category: Category name
        genre_id: Genre id (lowest precedence before the popular default)

    Returns:
        Exactly one MovieSelector
    """
    if _present(search_query):
        return SearchText(search_query)
    if _present(category):
        return CategoryName(category)
    if genre_id:
        return GenreId(genre_id)
    return NoSelector()


def selector_from_value(value: Union[int, str, None]) -> MovieSelector:
    """
    Convert a combined "genre id or category name" value into a selector.

    Ints are genre ids, strings are category names, None and empty values
    give NoSelector.
    """
    if isinstance(value, str):
        return choose_selector(category=value)
    if value is None:
        return NoSelector()
    return choose_selector(genre_id=value)
