import html
import string

import pytest

from korelite.util import generate_random_string, sanitize_html


@pytest.mark.parametrize("length", [0, 2, 32, 64])
def test_random_string_has_requested_length_and_is_hex(length):
    value = generate_random_string(length)
    assert len(value) == length
    assert set(value) <= set(string.hexdigits.lower())


def test_random_string_odd_length():
    assert len(generate_random_string(7)) == 7


def test_random_strings_are_unique_across_many_calls():
    values = [generate_random_string(32) for _ in range(50)]
    assert len(set(values)) == len(values)
    assert all(len(value) == 32 for value in values)


def test_random_string_rejects_negative_length():
    with pytest.raises(ValueError):
        generate_random_string(-1)


def test_sanitize_html_escapes_each_special_character():
    assert sanitize_html("<") == "&lt;"
    assert sanitize_html(">") == "&gt;"
    assert sanitize_html("&") == "&amp;"
    assert sanitize_html('"') == "&quot;"
    assert sanitize_html("'") == "&#x27;"


def test_sanitize_html_leaves_plain_text():
    assert sanitize_html("plain text 123") == "plain text 123"


def test_sanitize_html_none():
    assert sanitize_html(None) is None


@pytest.mark.parametrize(
    "text", ["<script>alert('x')</script>", 'a & b "c"', "", "&lt; already"]
)
def test_sanitize_html_round_trips_through_unescape(text):
    escaped = sanitize_html(text)
    assert "<" not in escaped and ">" not in escaped
    assert html.unescape(escaped) == text