"""Tests for Confluence URL helpers."""

import pytest

from jira_dashboard.confluence.utils import (
    derive_base_url,
    extract_page_id,
    extract_space_key,
    extract_url,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://wiki.example.com/wiki/spaces/ENG/pages/123456789/Title", "123456789"),
        ("https://wiki.example.com/pages/viewpage.action?pageId=42", "42"),
        ("https://wiki.example.com/display/ENG/Some+Page", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_page_id(url, expected):
    assert extract_page_id(url) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://wiki/x", "https://wiki/x"),
        ("wiki/x", None),
        ({"url": "https://a", "value": "https://b"}, "https://a"),
        ({"value": "https://b", "href": "https://c"}, "https://b"),
        ({"href": "https://c"}, "https://c"),
        ({"title": "no link"}, None),
        (None, None),
        (12345, None),
    ],
)
def test_extract_url(value, expected):
    assert extract_url(value) == expected


def test_extract_space_key():
    assert extract_space_key("https://wiki/wiki/spaces/ENG/pages/1/T") == "ENG"
    assert extract_space_key("https://wiki/wiki/spaces/~jdoe?x=1") == "~jdoe"
    assert extract_space_key("https://wiki/pages/viewpage.action?pageId=1") is None


@pytest.mark.parametrize(
    "url, expected",
    [
        (
            "https://example.atlassian.net/wiki/spaces/ENG/pages/1/T",
            "https://example.atlassian.net/wiki",
        ),
        (
            "https://wiki.example.com/pages/viewpage.action?pageId=1",
            "https://wiki.example.com",
        ),
        ("https://wiki.example.com/display/ENG/Page", "https://wiki.example.com"),
        ("https://wiki.example.com/x/AbCd", None),
    ],
)
def test_derive_base_url(url, expected):
    assert derive_base_url(url) == expected
