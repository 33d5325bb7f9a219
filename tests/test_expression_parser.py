"""Tests for the ingredient expression parser."""
import pytest

from label_creator.ingestion.expression_parser import (
    normalize_whitespace,
    parse_ingredient_list,
    split_top_level,
)


class TestSplitTopLevel:
    """Tests for split_top_level."""

    def test_split_keeps_parenthetical_commas(self):
        """Test that commas inside a group stay with the item."""
        assert split_top_level("Cookie Mix (flour, sugar), Butter") == [
            "Cookie Mix (flour, sugar)",
            "Butter",
        ]

    def test_split_simple_list(self):
        """Test a flat comma-separated list."""
        assert split_top_level("Flour, Sugar, Salt") == ["Flour", "Sugar", "Salt"]

    def test_split_nested_parentheses(self):
        """Test that nested groups are kept whole."""
        expr = "Chocolate Chips (sugar, chocolate (cocoa, vanilla)), Salt"
        assert split_top_level(expr) == [
            "Chocolate Chips (sugar, chocolate (cocoa, vanilla))",
            "Salt",
        ]

    def test_split_trims_and_drops_empty_items(self):
        """Test that whitespace is trimmed and empty items are dropped."""
        assert split_top_level("  Eggs ,, , Milk  ,") == ["Eggs", "Milk"]

    def test_split_empty_expression(self):
        """Test empty and whitespace-only input."""
        assert split_top_level("") == []
        assert split_top_level("   ") == []
        assert split_top_level(None) == []

    def test_split_unclosed_group_runs_to_end(self):
        """Test that an unclosed group absorbs the rest of the string."""
        assert split_top_level("Mix (flour, sugar, Butter") == ["Mix (flour, sugar, Butter"]

    def test_split_extra_closing_paren_is_tolerated(self):
        """Test that a stray ')' drives depth negative without failing."""
        result = split_top_level("Salt), Pepper, Oil")
        assert result == ["Salt), Pepper, Oil"]

    def test_split_round_trip_item_boundaries(self):
        """Test that rejoining items reproduces the top-level structure."""
        expressions = [
            "Spices (Cinnamon, Nutmeg), Vanilla, Salt",
            "Eggs",
            "A (b, c (d, e)), F, G (h)",
        ]
        for expr in expressions:
            items = split_top_level(expr)
            assert split_top_level(", ".join(items)) == items
            assert ", ".join(items) == expr


class TestParseIngredientList:
    """Tests for parse_ingredient_list."""

    def test_parse_free_text(self):
        """Test splitting free-text additions."""
        assert parse_ingredient_list("Vanilla, Salt") == ["Vanilla", "Salt"]

    def test_parse_ignores_parentheses(self):
        """Test that free text is split on every comma."""
        assert parse_ingredient_list("Mix (a, b)") == ["Mix (a", "b)"]

    @pytest.mark.parametrize("text", ["", "   ", " , ,", None])
    def test_parse_empty(self, text):
        """Test inputs that hold no ingredients."""
        assert parse_ingredient_list(text) == []


class TestNormalizeWhitespace:
    """Tests for normalize_whitespace."""

    def test_collapses_runs(self):
        """Test collapsing tabs, newlines and repeated spaces."""
        assert normalize_whitespace("  Flour,\n\tSugar   (cane)  ") == "Flour, Sugar (cane)"

    def test_empty(self):
        """Test empty input."""
        assert normalize_whitespace("") == ""
        assert normalize_whitespace(None) == ""
