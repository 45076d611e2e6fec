"""Tests for the HTTP session helpers."""

import requests

from jira_dashboard.utils.http import (
    build_proxies,
    clean_token,
    configure_session,
    create_session,
)


def test_clean_token():
    assert clean_token("  abc\r\n") == "abc"
    assert clean_token("ab\ncd") == "abcd"
    assert clean_token(None) == ""


def test_build_proxies_omits_unset():
    assert build_proxies() == {}
    assert build_proxies("http://p:1", None, "localhost") == {
        "http": "http://p:1",
        "no_proxy": "localhost",
    }


def test_configure_session_disables_verification(caplog):
    session = requests.Session()
    configure_session(session, "Jira", ssl_verify=False)
    assert session.verify is False
    assert "Jira SSL verification disabled" in caplog.text


def test_create_session_applies_proxies():
    session = create_session("Confluence", proxies={"https": "http://proxy:3128"})
    assert session.verify is True
    assert session.proxies["https"] == "http://proxy:3128"
