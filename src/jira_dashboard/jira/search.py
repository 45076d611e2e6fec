"""Module for Jira search operations."""

import logging
import time
from collections.abc import Iterable
from typing import Any

import requests

from ..exceptions import (
    AuthExhaustedError,
    MalformedResponseError,
    NetworkError,
    TrackerHttpError,
    TrackerTimeoutError,
)
from ..models.jira import JiraSearchResult
from ..utils.logging import mask_sensitive
from .auth import AttemptResult, AuthStrategy, build_strategies
from .client import JiraClient
from .constants import HTML_MARKERS, SEARCH_PATH

logger = logging.getLogger("jira-dashboard.jira.search")

AUTH_STATUSES = (401, 403)


def looks_like_html(content_type: str, text: str, parsed_json: bool = False) -> bool:
    """Whether a response is an HTML page (typically a login redirect).

    Body markers are only consulted when the body did not parse as JSON, so
    issue text that mentions HTML tags is not mistaken for a login page.
    """
    if "text/html" in (content_type or "").lower():
        return True
    if parsed_json:
        return False
    head = (text or "")[:2048].lower()
    return any(marker in head for marker in HTML_MARKERS)


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def _attempt_search(
        self, strategy: AuthStrategy, payload: dict[str, Any]
    ) -> AttemptResult:
        """Run one search request with a single auth strategy.

        Never raises: every failure is described in the returned AttemptResult.
        """
        url = f"{self.config.base_url}/{SEARCH_PATH}"
        try:
            response = self.session.post(
                url,
                json=payload,
                headers=strategy.request_headers(),
                auth=strategy.auth,
                timeout=strategy.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.Timeout as e:
            return AttemptResult(
                strategy, error=self.extract_error_message(error=e), kind="timeout"
            )
        except requests.exceptions.RequestException as e:
            return AttemptResult(
                strategy, error=self.extract_error_message(error=e), kind="network"
            )

        status = response.status_code
        content_type = response.headers.get("Content-Type", "")
        try:
            data = response.json()
            parsed = True
        except ValueError:
            data = None
            parsed = False
        if status != 200:
            if status in (301, 302, 303, 307, 308):
                error = "Authentication redirect detected. Please verify your token is correct."
                return AttemptResult(strategy, error=error, kind="malformed", status=status)
            if status not in AUTH_STATUSES and looks_like_html(
                content_type, response.text, parsed
            ):
                error = "Received HTML instead of JSON. Please check your token is valid."
                return AttemptResult(strategy, error=error, kind="malformed", status=status)
            return AttemptResult(
                strategy,
                error=self.extract_error_message(response),
                kind="http",
                status=status,
            )

        if looks_like_html(content_type, response.text, parsed):
            error = "Received HTML response instead of JSON. Please verify your token."
            return AttemptResult(strategy, error=error, kind="malformed", status=status)
        if not isinstance(data, dict):
            error = f"Invalid response format from Jira API. Expected JSON but got: {type(data).__name__}"
            return AttemptResult(strategy, error=error, kind="malformed", status=status)
        return AttemptResult(strategy, data=data, status=status)

    def search(
        self,
        jql: str | None,
        fields: Iterable[str],
        token: str | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues with JQL, falling back across auth strategies.

        Args:
            jql: JQL query string; the configured default is used if empty
            fields: Ordered field names to request
            token: Caller-supplied bearer token. When given, only the bearer
                strategy is attempted.

        Returns:
            JiraSearchResult with the issues and total count

        Raises:
            AuthExhaustedError: If every strategy failed on authentication
            MalformedResponseError: If the last strategy got HTML/non-JSON back
            TrackerHttpError: If Jira rejected the request for another reason
            NetworkError: If Jira could not be reached
            TrackerTimeoutError: If the last attempt timed out
        """
        query = jql or self.config.jql
        field_list = list(dict.fromkeys(f for f in fields if f))
        payload = {
            "jql": query,
            "maxResults": self.config.max_results,
            "fields": field_list,
        }
        strategies = build_strategies(self.config, token)
        logger.info(
            f"Searching Jira with JQL '{query}' ({len(field_list)} fields, "
            f"token: {'caller ' + mask_sensitive(token) if token else 'configured'})"
        )

        failures: list[AttemptResult] = []
        for strategy in strategies:
            started = time.monotonic()
            logger.debug(f"Trying {strategy.name}...")
            result = self._attempt_search(strategy, payload)
            elapsed = time.monotonic() - started
            if result.ok:
                search_result = JiraSearchResult.from_api_response(result.data)
                logger.info(
                    f"{strategy.name} authentication successful: "
                    f"{len(search_result.issues)} of {search_result.total} issues in {elapsed:.2f}s"
                )
                return search_result
            logger.warning(
                f"{strategy.name} failed after {elapsed:.2f}s "
                f"(status={result.status}, kind={result.kind}): {result.error}"
            )
            failures.append(result)

        raise self._exhausted_error(failures)

    def _exhausted_error(
        self, failures: list[AttemptResult]
    ) -> AuthExhaustedError | TrackerHttpError | NetworkError | TrackerTimeoutError:
        """Classify the failure once every strategy has been tried."""
        if not failures:
            return AuthExhaustedError("No authentication methods available")
        last = failures[-1]
        message = f"All authentication methods failed. Last error: {last.error or 'Unknown error'}"
        saw_auth_status = any(f.status in AUTH_STATUSES for f in failures)
        logger.error(
            f"All {len(failures)} authentication methods failed: "
            + "; ".join(f"{f.strategy.name}={f.status or f.kind}" for f in failures)
        )

        if last.kind == "timeout":
            return TrackerTimeoutError(message)
        if last.kind == "network":
            return NetworkError(message)
        if last.kind == "malformed":
            return MalformedResponseError(message, upstream_status=last.status)
        if saw_auth_status:
            return AuthExhaustedError(
                message, status_code=401, upstream_status=last.status
            )
        if last.status is not None:
            return TrackerHttpError(last.status, message)
        return AuthExhaustedError(message, status_code=500)
