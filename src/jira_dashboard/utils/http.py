"""HTTP session helpers shared by the Jira and Confluence clients."""

import logging

from requests import Session

logger = logging.getLogger("jira-dashboard.utils.http")


def clean_token(token: str | None) -> str:
    """Strip surrounding whitespace and embedded line breaks from a token."""
    if not token:
        return ""
    return token.strip().replace("\r", "").replace("\n", "")


def build_proxies(
    http_proxy: str | None = None,
    https_proxy: str | None = None,
    no_proxy: str | None = None,
) -> dict[str, str]:
    """Build a requests-style proxies mapping, omitting unset entries."""
    proxies: dict[str, str] = {}
    if http_proxy:
        proxies["http"] = http_proxy
    if https_proxy:
        proxies["https"] = https_proxy
    if no_proxy:
        proxies["no_proxy"] = no_proxy
    return proxies


def configure_session(
    session: Session,
    service_name: str,
    ssl_verify: bool = True,
    proxies: dict[str, str] | None = None,
) -> Session:
    """Apply SSL verification and proxy settings to a requests session.

    Args:
        session: The session to configure
        service_name: Name of the service for logging (e.g., "Jira")
        ssl_verify: Whether SSL certificates should be verified
        proxies: Optional proxies mapping

    Returns:
        The same session, for chaining
    """
    if not ssl_verify:
        logger.warning(
            f"{service_name} SSL verification disabled. This is insecure and should only be used in testing environments."
        )
        session.verify = False
    if proxies:
        logger.debug(f"{service_name} using proxies: {sorted(proxies)}")
        session.proxies.update(proxies)
    return session


def create_session(
    service_name: str,
    ssl_verify: bool = True,
    proxies: dict[str, str] | None = None,
) -> Session:
    """Create a new requests session configured for a service."""
    return configure_session(Session(), service_name, ssl_verify, proxies)
