"""
Unit tests for movie selectors and their precedence.
"""

import pytest

from tmdb_gateway.core.endpoints.selectors import (
    CategoryName,
    GenreId,
    NoSelector,
    SearchText,
    choose_selector,
    selector_from_value,
)


class TestChooseSelector:
    """Test precedence: search > category > genre > popular."""

    @pytest.mark.parametrize("category", [None, "upcoming"])
    @pytest.mark.parametrize("genre_id", [None, 28])
    def test_search_always_wins(self, category, genre_id):
        selector = choose_selector(search_query="matrix", category=category, genre_id=genre_id)
        assert selector == SearchText("matrix")

    def test_category_over_genre(self):
        assert choose_selector(category="now_playing", genre_id=12) == CategoryName("now_playing")

    def test_genre(self):
        assert choose_selector(genre_id=28) == GenreId(28)

    def test_nothing_is_popular(self):
        assert choose_selector() == NoSelector()

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_search_falls_through(self, blank):
        """Empty search text counts as absent."""
        assert choose_selector(search_query=blank, category="top_rated") == CategoryName("top_rated")
        assert choose_selector(search_query=blank, genre_id=18) == GenreId(18)

    @pytest.mark.parametrize("blank", ["", "  "])
    def test_blank_category_falls_through(self, blank):
        """Empty category counts as absent."""
        assert choose_selector(category=blank, genre_id=18) == GenreId(18)
        assert choose_selector(category=blank) == NoSelector()

    def test_zero_genre_is_popular(self):
        """Genre id 0 counts as absent."""
        assert choose_selector(genre_id=0) == NoSelector()


class TestSelectorVariants:
    """Test variant construction rules."""

    @pytest.mark.parametrize("blank", ["", " "])
    def test_blank_text_rejected(self, blank):
        """Directly constructed text selectors must not be blank."""
        with pytest.raises(ValueError):
            SearchText(blank)
        with pytest.raises(ValueError):
            CategoryName(blank)

    @pytest.mark.parametrize("value", ["28", 28.0, True, None])
    def test_genre_requires_int(self, value):
        with pytest.raises(TypeError):
            GenreId(value)

    def test_selectors_are_hashable(self):
        """Selectors are frozen and usable as keys."""
        assert len({GenreId(1), GenreId(1), NoSelector(), NoSelector()}) == 2


class TestSelectorFromValue:
    """Test the combined genre-id-or-category conversion."""

    def test_int_is_genre(self):
        assert selector_from_value(35) == GenreId(35)

    def test_str_is_category(self):
        assert selector_from_value("top_rated") == CategoryName("top_rated")

    @pytest.mark.parametrize("value", [None, "", 0])
    def test_absent(self, value):
        assert selector_from_value(value) == NoSelector()
