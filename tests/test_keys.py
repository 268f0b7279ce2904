"""
Tests for cache key derivation
"""
import hashlib

import pytest

from translation_service.utils.keys import generate_translation_key


def test_key_is_md5_of_stripped_text_and_language():
    expected = hashlib.md5("Welcome_es".encode("utf-8")).hexdigest()
    assert generate_translation_key("Welcome", "es") == expected
    assert len(expected) == 32


def test_key_ignores_surrounding_whitespace():
    assert generate_translation_key("  Welcome \n", "es") == generate_translation_key("Welcome", "es")


def test_key_is_deterministic():
    keys = {generate_translation_key("Save changes", "fr") for _ in range(5)}
    assert len(keys) == 1


def test_key_differs_per_language_and_text():
    assert generate_translation_key("Welcome", "es") != generate_translation_key("Welcome", "fr")
    assert generate_translation_key("Welcome", "es") != generate_translation_key("Goodbye", "es")


def test_inner_whitespace_is_significant():
    assert generate_translation_key("Save  changes", "es") != generate_translation_key("Save changes", "es")


@pytest.mark.parametrize("text,code", [("", "es"), ("Welcome", ""), (None, "es")])
def test_key_requires_text_and_language(text, code):
    with pytest.raises(ValueError):
        generate_translation_key(text, code)
