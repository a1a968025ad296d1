# -*- coding: utf-8 -*-
"""
Unit тесты построения slug
"""

from studydeck.utils.slugify import DEFAULT_SLUG, slugify


class TestSlugify:
    def test_lowercase_and_hyphens(self):
        assert slugify("Cell Biology: Basics!") == "cell-biology-basics"

    def test_strips_diacritics(self):
        assert slugify("Café Crème") == "cafe-creme"

    def test_collapses_and_trims_separators(self):
        assert slugify("  --Hello___World--  ") == "hello-world"

    def test_truncates_without_trailing_hyphen(self):
        slug = slugify("a" * 9 + " " + "b" * 20, max_length=10)
        assert slug == "a" * 9
        assert len(slug) <= 10

    def test_empty_and_non_latin_fall_back(self):
        assert slugify("") == DEFAULT_SLUG
        assert slugify(None) == DEFAULT_SLUG
        assert slugify("Биология") == DEFAULT_SLUG
