"""Tests for rewriting the Ghostty theme directive."""

from themesync.sync.pairs import THEME_PAIRS
from themesync.sync.rewriter import (
    current_theme_value,
    pair_directive,
    rewrite_for_pair,
    rewrite_pinned,
    rewrite_theme_line,
    theme_directive,
)


class TestDirectives:
    """Tests for directive formatting."""

    def test_theme_directive(self) -> None:
        assert theme_directive("Everforest Dark") == "theme = Everforest Dark"

    def test_pair_directive(self) -> None:
        assert pair_directive(THEME_PAIRS["everforest"]) == "light:Everforest Light,dark:Everforest Dark"


class TestCurrentThemeValue:
    """Tests for reading the current directive."""

    def test_reads_first_theme_line(self) -> None:
        text = "font-size = 12\ntheme = High Contrast Dark\ntheme = ignored\n"
        assert current_theme_value(text) == "High Contrast Dark"

    def test_missing_theme_line(self) -> None:
        assert current_theme_value("font-size = 12\n") is None

    def test_crlf_value_excludes_carriage_return(self) -> None:
        assert current_theme_value("theme = Everforest Dark\r\nfont-size = 12\r\n") == "Everforest Dark"


class TestRewriteThemeLine:
    """Tests for rewrite_theme_line."""

    def test_replaces_line_and_keeps_the_rest(self) -> None:
        text = "font-size = 14\ntheme = Catppuccin Mocha\nwindow-theme = auto\n"
        result = rewrite_for_pair(text, THEME_PAIRS["everforest"])
        assert result.changed is True
        assert result.text == (
            "font-size = 14\ntheme = light:Everforest Light,dark:Everforest Dark\nwindow-theme = auto\n"
        )

    def test_same_value_is_unchanged(self) -> None:
        text = "theme = Everforest Dark\n"
        result = rewrite_theme_line(text, "Everforest Dark")
        assert result.changed is False
        assert result.text == text

    def test_rewrite_is_idempotent(self) -> None:
        text = "a = 1\ntheme = Old\nb = 2\n"
        once = rewrite_theme_line(text, "light:X,dark:Y")
        twice = rewrite_theme_line(once.text, "light:X,dark:Y")
        assert once.changed is True
        assert twice.changed is False
        assert twice.text == once.text

    def test_no_theme_line_is_left_alone(self) -> None:
        """Nothing is appended when the config has no theme line."""
        text = "font-size = 14\nwindow-theme = auto\n"
        result = rewrite_theme_line(text, "Everforest Dark")
        assert result.changed is False
        assert result.text == text

    def test_only_first_match_is_replaced(self) -> None:
        text = "theme = One\nfoo = bar\ntheme = Two\n"
        result = rewrite_theme_line(text, "New")
        assert result.text == "theme = New\nfoo = bar\ntheme = Two\n"

    def test_whitespace_variants_match(self) -> None:
        result = rewrite_theme_line("theme=Old\n", "New")
        assert result.text == "theme = New\n"

    def test_indented_or_commented_lines_do_not_match(self) -> None:
        text = "# theme = Commented\n  theme = Indented\n"
        result = rewrite_theme_line(text, "New")
        assert result.changed is False

    def test_similar_keys_do_not_match(self) -> None:
        text = "window-theme = auto\ntheme-extra = 1\n"
        assert rewrite_theme_line(text, "New").changed is False

    def test_backslashes_stay_literal(self) -> None:
        result = rewrite_theme_line("theme = Old\n", r"Odd\1Name")
        assert result.text == "theme = Odd\\1Name\n"

    def test_pinned_replaces_composite(self) -> None:
        text = "theme = light:Catppuccin Latte Sync,dark:Catppuccin Mocha Sync\n"
        result = rewrite_pinned(text, "Catppuccin Mocha Sync")
        assert result.text == "theme = Catppuccin Mocha Sync\n"
        assert "light:" not in result.text
        assert "dark:" not in result.text


    def test_crlf_lines_are_preserved(self) -> None:
        text = "font-size = 14\r\ntheme = Old\r\nwindow-theme = auto\r\n"
        result = rewrite_theme_line(text, "New")
        assert result.text == "font-size = 14\r\ntheme = New\r\nwindow-theme = auto\r\n"

    def test_crlf_same_value_is_unchanged(self) -> None:
        text = "theme = Everforest Dark\r\n"
        result = rewrite_theme_line(text, "Everforest Dark")
        assert result.changed is False
        assert result.text == text

    def test_crlf_last_line_without_newline(self) -> None:
        result = rewrite_theme_line("a = 1\r\ntheme = Old", "New")
        assert result.text == "a = 1\r\ntheme = New"
