import logging
import os
import sys

import click
from dotenv import load_dotenv

from jira_dashboard.utils.logging import setup_logging

__version__ = "0.3.0"

TRUTHY = ("true", "1", "yes")

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("DASHBOARD_VERBOSE", "").lower() in TRUTHY:
    logging_level = logging.DEBUG

# Set up logging using the utility function
logger = setup_logging(logging_level)


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=3000,
    help="Port to listen on (default: 3000)",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://jira.your-company.com)",
)
@click.option("--jira-token", help="Jira Personal Access Token")
@click.option(
    "--confluence-url",
    help="Confluence URL (e.g., https://your-company.atlassian.net/wiki)",
)
@click.option(
    "--column-config",
    type=click.Path(dir_okay=False),
    help="Path to the column schema JSON file (default: config.json)",
)
@click.option(
    "--dev",
    is_flag=True,
    help="Development mode: include tracebacks in error responses",
)
def main(
    verbose: int,
    env_file: str | None,
    host: str,
    port: int,
    jira_url: str | None,
    jira_token: str | None,
    confluence_url: str | None,
    column_config: str | None,
    dev: bool,
) -> None:
    """Jira Dashboard Server - Jira issues as JSON for a browser table

    Fetches issues with a JQL query, reshapes them into rows according to a
    column schema, and enriches them with Confluence page summaries.
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        if os.getenv("DASHBOARD_VERY_VERBOSE", "false").lower() in TRUTHY:
            current_logging_level = logging.DEBUG
        elif os.getenv("DASHBOARD_VERBOSE", "false").lower() in TRUTHY:
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return (
            ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT_MAP
            and ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Port precedence: option, then PORT, then default
    final_port = 3000
    port_env = os.getenv("PORT", "")
    if port_env.isdigit():
        final_port = int(port_env)
    if click_ctx and was_option_provided(click_ctx, "port"):
        final_port = port

    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if click_ctx and was_option_provided(click_ctx, "host"):
        final_host = host

    dev_mode = dev or os.getenv("DASHBOARD_DEV_MODE", "false").lower() in TRUTHY

    # Set env vars for downstream config
    if jira_url:
        os.environ["JIRA_URL"] = jira_url
    if jira_token:
        os.environ["JIRA_PERSONAL_TOKEN"] = jira_token
    if confluence_url:
        os.environ["CONFLUENCE_URL"] = confluence_url
    if column_config:
        os.environ["COLUMN_CONFIG_PATH"] = column_config

    import uvicorn

    from jira_dashboard.columns import ColumnConfigStore
    from jira_dashboard.confluence import ConfluenceConfig, ConfluenceFetcher
    from jira_dashboard.exceptions import ConfigurationError
    from jira_dashboard.jira import JiraConfig, JiraFetcher
    from jira_dashboard.servers import AppContext, create_app

    try:
        jira_config = JiraConfig.from_env()
    except ConfigurationError as e:
        logger.error(f"Failed to initialize Jira client: {e}")
        sys.exit(1)
    confluence_config = ConfluenceConfig.from_env()

    context = AppContext(
        jira_config=jira_config,
        confluence_config=confluence_config,
        columns=ColumnConfigStore.from_env(),
        jira=JiraFetcher(config=jira_config),
        confluence=ConfluenceFetcher(config=confluence_config),
        dev_mode=dev_mode,
    )
    app = create_app(context)

    logger.info(f"Starting Jira dashboard on http://{final_host}:{final_port}")
    uvicorn.run(
        app,
        host=final_host,
        port=final_port,
        log_level=logging.getLevelName(current_logging_level).lower(),
    )


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
