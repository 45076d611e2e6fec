"""Module for Confluence page summary operations."""

import asyncio
import logging
import time
from collections.abc import Iterable
from typing import Any

from ..models.confluence import ConfluenceSummaryResult
from ..preprocessing import extract_summary
from .client import ConfluenceClient
from .utils import derive_base_url, extract_page_id, extract_space_key, extract_url

logger = logging.getLogger("jira-dashboard.confluence.summary")

BATCH_STAGGER_SECONDS = 0.1


class SummaryMixin(ConfluenceClient):
    """Mixin for fetching and summarising Confluence pages."""

    def get_summary(
        self, field_value: Any, token: str | None = None
    ) -> ConfluenceSummaryResult:
        """
        Fetch a Confluence page and extract its summary.

        Failures are reported in the result rather than raised.

        Args:
            field_value: A page URL, or a Jira field value holding one
            token: Optional caller token; the configured token is used otherwise

        Returns:
            ConfluenceSummaryResult describing the outcome
        """
        url = extract_url(field_value)
        if not url:
            return ConfluenceSummaryResult.failure("No valid Confluence URL provided")

        page_id = extract_page_id(url)
        if not page_id:
            return ConfluenceSummaryResult.failure(
                "Could not extract page ID from Confluence URL"
            )

        bearer = self.resolve_token(token)
        if not bearer:
            return ConfluenceSummaryResult.failure(
                "Confluence token not available. Please provide token."
            )

        base_url = self.config.base_url or derive_base_url(url)
        if not base_url:
            return ConfluenceSummaryResult.failure(
                f"Could not determine Confluence base URL from {url}"
            )

        started = time.monotonic()
        try:
            page = self._confluence_api(base_url, bearer).get_page_by_id(
                page_id, expand="body.storage,version"
            )
            if not isinstance(page, dict):
                raise ValueError(
                    f"Unexpected page payload type: {type(page).__name__}"
                )
            body = ((page.get("body") or {}).get("storage") or {}).get("value") or ""
            summary = extract_summary(body)
        except Exception as e:  # noqa: BLE001 - failures are returned, never raised
            logger.warning(
                f"Error fetching Confluence page {page_id} after "
                f"{time.monotonic() - started:.2f}s: {e}"
            )
            return ConfluenceSummaryResult.failure(str(e) or type(e).__name__)

        logger.debug(
            f"Summarised Confluence page {page_id} "
            f"(space: {extract_space_key(url) or 'unknown'}) "
            f"in {time.monotonic() - started:.2f}s"
        )
        return ConfluenceSummaryResult.from_api_response(page, summary=summary)

    async def _get_summary_staggered(
        self, index: int, field_value: Any, token: str | None
    ) -> ConfluenceSummaryResult:
        await asyncio.sleep(index * BATCH_STAGGER_SECONDS)
        return await asyncio.to_thread(self.get_summary, field_value, token)

    async def get_summaries(
        self, urls: Iterable[Any], token: str | None = None
    ) -> dict[str, ConfluenceSummaryResult]:
        """
        Summarise several pages concurrently.

        Each fetch starts 100ms after the previous one to spread the load on
        Confluence. One failing page never affects the others.

        Args:
            urls: Page URLs (or field values holding them)
            token: Optional caller token shared by every fetch

        Returns:
            Mapping from each URL's string form to its result
        """
        url_list = list(urls)
        logger.info(f"Fetching {len(url_list)} Confluence summaries")
        results = await asyncio.gather(
            *(
                self._get_summary_staggered(index, url, token)
                for index, url in enumerate(url_list)
            )
        )
        return {
            (url if isinstance(url, str) else str(url)): result
            for url, result in zip(url_list, results, strict=True)
        }
