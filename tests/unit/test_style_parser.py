"""Tests for inline style attribute parsing."""

from __future__ import annotations

from hudmark.styles.parser import parse_style_attribute


class TestParseStyleAttribute:
    """Tests for parse_style_attribute."""

    def test_basic_declarations(self) -> None:
        result = parse_style_attribute("Color: #FFF; font-size:16")
        assert result == {"color": "#FFF", "font-size": "16"}

    def test_splits_on_first_colon_only(self) -> None:
        result = parse_style_attribute("background: url(a:b)")
        assert result == {"background": "url(a:b)"}

    def test_ignores_declarations_without_colon(self) -> None:
        result = parse_style_attribute("bogus; color: red")
        assert result == {"color": "red"}

    def test_ignores_empty_names(self) -> None:
        assert parse_style_attribute(": red;") == {}

    def test_empty_input(self) -> None:
        assert parse_style_attribute("") == {}
        assert parse_style_attribute(" ; ; ") == {}

    def test_later_declaration_overrides(self) -> None:
        result = parse_style_attribute("color: red; font-size: 2; color: blue")
        assert result["color"] == "blue"
        assert list(result) == ["color", "font-size"]

    def test_state_prefixed_names_kept(self) -> None:
        result = parse_style_attribute("--hover-Background: #222;")
        assert result == {"--hover-background": "#222"}
