"""Starlette application serving the dashboard's JSON API."""

import logging
import time
import traceback
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from functools import wraps
from typing import Any

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from jira_dashboard.exceptions import MissingTokenError, TrackerError

from .context import AppContext
from .dependencies import get_app_context, get_confluence_token, get_jira_token

logger = logging.getLogger("jira-dashboard.server.main")

MISSING_TOKEN_MESSAGE = (
    "No authentication token provided. Please configure your Jira token in settings."
)

Endpoint = Callable[[Request], Awaitable[JSONResponse]]


def error_status(error: Exception) -> int:
    """Map an exception onto the HTTP status the browser should see."""
    if isinstance(error, TrackerError | MissingTokenError):
        return error.status_code
    if isinstance(error, ValueError):
        return 400
    return 500


def error_response(
    request: Request,
    endpoint: str,
    error: Exception,
    started: float,
    prefix: str | None = None,
) -> JSONResponse:
    """Log a failed request and render the JSON error envelope.

    Args:
        request: The failed request
        endpoint: Endpoint name used in the log line
        error: The exception raised by the handler
        started: ``time.monotonic()`` at the start of the request
        prefix: Optional context placed before the error message

    Returns:
        ``{success: false, error, details?}`` with the mapped status code
    """
    status = error_status(error)
    upstream = getattr(error, "upstream_status", None)
    message = getattr(error, "message", None) or str(error) or type(error).__name__
    if prefix and not isinstance(error, MissingTokenError):
        message = f"{prefix}: {message}"

    log = logger.error if status >= 500 else logger.warning
    log(
        f"{endpoint} failed after {time.monotonic() - started:.2f}s "
        f"(status={status}, upstream status={upstream}): {message}",
        exc_info=status >= 500 and not isinstance(error, TrackerError),
    )

    body: dict[str, Any] = {"success": False, "error": message}
    if get_app_context(request).dev_mode:
        body["details"] = "".join(traceback.format_exception(error))
    return JSONResponse(body, status_code=status)


def json_endpoint(
    endpoint: str, error_prefix: str | None = None
) -> Callable[[Endpoint], Endpoint]:
    """
    Decorator wrapping a handler with timing logs and the error envelope.

    Args:
        endpoint: Name used in log lines
        error_prefix: Optional context placed before error messages

    Returns:
        The decorated handler
    """

    def decorator(handler: Endpoint) -> Endpoint:
        @wraps(handler)
        async def wrapper(request: Request) -> JSONResponse:
            started = time.monotonic()
            try:
                response = await handler(request)
            except Exception as e:  # noqa: BLE001 - rendered as the error envelope
                return error_response(request, endpoint, e, started, error_prefix)
            logger.info(
                f"{endpoint} completed in {time.monotonic() - started:.2f}s "
                f"(status={response.status_code})"
            )
            return response

        return wrapper

    return decorator


def _require_jira_token(request: Request) -> str:
    token = get_jira_token(request)
    if not token:
        raise MissingTokenError(MISSING_TOKEN_MESSAGE)
    return token


def _jql(request: Request, context: AppContext) -> str | None:
    return request.query_params.get("jql") or context.columns.schema.jql or None


async def _json_body(request: Request) -> dict[str, Any]:
    body = await request.json()
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


async def _search_rows(
    request: Request, token: str | None, fields: list[str]
) -> tuple[int, list[dict[str, Any]], list[dict[str, str]]]:
    context = get_app_context(request)
    result = await run_in_threadpool(
        context.jira.search, _jql(request, context), fields, token
    )
    rows = context.jira.format_issues(result.issues, context.columns.schema.default_columns)
    return result.total, result.issues, rows


@json_endpoint("fetch-all-data", error_prefix="Failed to fetch all Jira data")
async def fetch_all_data(request: Request) -> JSONResponse:
    token = _require_jira_token(request)
    fields = get_app_context(request).columns.schema.broadest_fields
    total, raw_issues, rows = await _search_rows(request, token, fields)
    return JSONResponse(
        {"success": True, "total": total, "issues": rows, "rawIssues": raw_issues}
    )


@json_endpoint("refresh-columns", error_prefix="Failed to refresh columns")
async def refresh_columns(request: Request) -> JSONResponse:
    token = _require_jira_token(request)
    fields = get_app_context(request).columns.schema.column_fields
    total, _, rows = await _search_rows(request, token, fields)
    return JSONResponse({"success": True, "total": total, "issues": rows})


@json_endpoint("issues")
async def list_issues(request: Request) -> JSONResponse:
    fields = get_app_context(request).columns.schema.column_fields
    total, _, rows = await _search_rows(request, get_jira_token(request), fields)
    return JSONResponse({"success": True, "total": total, "issues": rows})


@json_endpoint("issue")
async def get_issue(request: Request) -> JSONResponse:
    context = get_app_context(request)
    issue = await run_in_threadpool(
        context.jira.get_issue_details,
        request.path_params["key"],
        get_jira_token(request),
    )
    return JSONResponse({"success": True, "issue": issue})


@json_endpoint("table-config")
async def table_config(request: Request) -> JSONResponse:
    columns = get_app_context(request).columns
    config = await run_in_threadpool(columns.table_config)
    return JSONResponse({"success": True, "config": config})


@json_endpoint("backend-config")
async def backend_config(request: Request) -> JSONResponse:
    schema = get_app_context(request).columns.schema
    return JSONResponse({"success": True, "config": schema.to_backend_config()})


@json_endpoint("save-column-config")
async def save_column_config(request: Request) -> JSONResponse:
    body = await _json_body(request)
    user_columns = body.get("userColumns")
    await run_in_threadpool(
        get_app_context(request).columns.save_user_columns, user_columns
    )
    return JSONResponse(
        {"success": True, "message": "Column configuration saved successfully"}
    )


@json_endpoint("test-token")
async def validate_token(request: Request) -> JSONResponse:
    body = await _json_body(request)
    token = body.get("token")
    if not token or not isinstance(token, str):
        raise ValueError("Token is required")
    email = body.get("email") if isinstance(body.get("email"), str) else None
    result = await run_in_threadpool(
        get_app_context(request).jira.test_token, token, email
    )
    return JSONResponse({"success": True, **result})


@json_endpoint("confluence-summary")
async def confluence_summary(request: Request) -> JSONResponse:
    url = request.query_params.get("url")
    if not url:
        raise ValueError("Confluence URL is required")
    result = await run_in_threadpool(
        get_app_context(request).confluence.get_summary,
        url,
        get_confluence_token(request),
    )
    return JSONResponse(result.to_simplified_dict())


@json_endpoint("confluence-summaries")
async def confluence_summaries(request: Request) -> JSONResponse:
    body = await _json_body(request)
    urls = body.get("urls")
    if not isinstance(urls, list):
        raise ValueError("urls must be an array")
    summaries = await get_app_context(request).confluence.get_summaries(
        urls, get_confluence_token(request)
    )
    return JSONResponse(
        {
            "success": True,
            "summaries": {
                url: result.to_simplified_dict() for url, result in summaries.items()
            },
        }
    )


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse(
        {
            "success": True,
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


routes = [
    Route("/api/fetch-all-data", fetch_all_data, methods=["GET"]),
    Route("/api/refresh-columns", refresh_columns, methods=["GET"]),
    Route("/api/issues", list_issues, methods=["GET"]),
    Route("/api/issue/{key}", get_issue, methods=["GET"]),
    Route("/api/table-config", table_config, methods=["GET"]),
    Route("/api/backend-config", backend_config, methods=["GET"]),
    Route("/api/save-column-config", save_column_config, methods=["POST"]),
    Route("/api/test-token", validate_token, methods=["POST"]),
    Route("/api/confluence/summary", confluence_summary, methods=["GET"]),
    Route("/api/confluence/summaries", confluence_summaries, methods=["POST"]),
    Route("/api/health", health_check, methods=["GET"]),
]


def create_app(context: AppContext) -> Starlette:
    """
    Build the dashboard application around a startup context.

    Args:
        context: Configuration and fetchers shared by every request

    Returns:
        The Starlette application
    """
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    ]
    app = Starlette(routes=routes, middleware=middleware)
    app.state.context = context
    logger.info(
        f"Dashboard app created for {context.jira_config.base_url} "
        f"(development mode: {'ENABLED' if context.dev_mode else 'DISABLED'})"
    )
    return app
