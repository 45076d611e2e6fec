"""Authentication strategies for Jira search requests.

Jira deployments differ in which scheme they accept: basic auth may be
disabled instance-wide and the PAT header name varies. Search requests
therefore walk an ordered list of strategies until one returns JSON.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

from requests.auth import AuthBase, HTTPBasicAuth

from ..utils.http import clean_token
from .config import JiraConfig
from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    JSON_HEADERS,
    PAT_HEADER_FORMATS,
    TOKEN_REQUEST_TIMEOUT,
)

logger = logging.getLogger("jira-dashboard.jira.auth")

FailureKind = Literal["http", "malformed", "network", "timeout"]


@dataclass(frozen=True)
class AuthStrategy:
    """One way of authenticating a search request."""

    name: str
    headers: dict[str, str] = field(hash=False)
    timeout: float | None = DEFAULT_REQUEST_TIMEOUT
    auth: AuthBase | None = field(default=None, hash=False, compare=False)

    def request_headers(self) -> dict[str, str]:
        return {**JSON_HEADERS, **self.headers}


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of trying one strategy: either ``data`` or a failure description."""

    strategy: AuthStrategy
    data: dict[str, Any] | None = None
    error: str | None = None
    kind: FailureKind | None = None
    status: int | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None


def bearer_strategy(token: str) -> AuthStrategy:
    return AuthStrategy(
        name="Bearer Token",
        headers={"Authorization": f"Bearer {clean_token(token)}"},
        timeout=TOKEN_REQUEST_TIMEOUT,
    )


def pat_header_strategies(token: str) -> list[AuthStrategy]:
    cleaned = clean_token(token)
    return [
        AuthStrategy(
            name=f"PAT Header ({name})",
            headers={header: template.format(token=cleaned)},
            timeout=TOKEN_REQUEST_TIMEOUT,
        )
        for name, header, template in PAT_HEADER_FORMATS
    ]


def basic_usernames(username: str, domain: str | None) -> list[str]:
    """Username formats to try: bare, with domain, and the '@'-aware choice."""
    if not domain:
        return [username]
    with_domain = f"{username}@{domain}"
    smart = username if "@" in username else with_domain
    formats: list[str] = []
    for candidate in (username, with_domain, smart):
        if candidate not in formats:
            formats.append(candidate)
    return formats


def basic_auth_strategies(
    username: str | None, token: str, domain: str | None = None
) -> list[AuthStrategy]:
    if not username:
        return []
    cleaned = clean_token(token)
    return [
        AuthStrategy(
            name=f"Basic Auth ({user_format})",
            headers={},
            timeout=DEFAULT_REQUEST_TIMEOUT,
            auth=HTTPBasicAuth(user_format, cleaned),
        )
        for user_format in basic_usernames(username, domain)
    ]


def build_strategies(config: JiraConfig, token: str | None = None) -> list[AuthStrategy]:
    """Build the ordered strategy list for a search.

    Args:
        config: Jira configuration (configured token, username, domain)
        token: Token supplied by the caller, if any

    Returns:
        ``[bearer]`` when the caller supplied a token, otherwise the PAT
        header variants followed by the basic-auth variants
    """
    if clean_token(token):
        return [bearer_strategy(token)]
    strategies = pat_header_strategies(config.personal_token)
    strategies.extend(
        basic_auth_strategies(
            config.username, config.personal_token, config.basic_auth_domain
        )
    )
    logger.debug(f"Built {len(strategies)} fallback auth strategies")
    return strategies
