"""
Unit tests for wildcard search pattern building.
"""

from hourbook.infrastructure.db.search import build_like_pattern


class TestBuildLikePattern:

    def test_blank_terms_add_no_filter(self):
        assert build_like_pattern(None) is None
        assert build_like_pattern("") is None
        assert build_like_pattern("   ") is None

    def test_plain_term_is_wrapped(self):
        assert build_like_pattern("acme") == "%acme%"

    def test_term_is_trimmed(self):
        assert build_like_pattern("  acme ") == "%acme%"

    def test_star_is_wildcard(self):
        assert build_like_pattern("Tech*") == "%Tech%%"
        assert build_like_pattern("web*site") == "%web%site%"

    def test_like_metacharacters_are_escaped(self):
        assert build_like_pattern("50%") == "%50\\%%"
        assert build_like_pattern("a_b") == "%a\\_b%"

    def test_escape_character_is_escaped_first(self):
        assert build_like_pattern("a\\b") == "%a\\\\b%"
        assert build_like_pattern("\\%") == "%\\\\\\%%"
