import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
from dotenv import load_dotenv
from requests.exceptions import RequestException

from .exceptions import JiraCloudError, JiraResponseError
from .jira import Jira, JiraConfig
from .models import VersionGetsOptions
from .utils.logging import setup_logging

__version__ = "0.1.0"

logger = logging.getLogger("jira-cloud.cli")


def _handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn client errors into click errors, echoing the body Jira sent back."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except JiraResponseError as e:
            click.echo(f"Response HTTP Response {e.response.text}", err=True)
            raise click.ClickException(str(e)) from e
        except (JiraCloudError, ValueError, RequestException) as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _get_jira(ctx: click.Context) -> Jira:
    if ctx.obj.get("jira") is None:
        ctx.obj["jira"] = Jira(config=JiraConfig.from_env())
    return ctx.obj["jira"]


def _echo_envelope(response: Any) -> None:
    click.echo(f"Response HTTP Code {response.status_code}")
    click.echo(f"HTTP Endpoint Used {response.endpoint}")


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.version_option(__version__, prog_name="jira-cloud")
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None) -> None:
    """Jira Cloud command line client.

    Reads JIRA_URL and either JIRA_USERNAME/JIRA_API_TOKEN or
    JIRA_PERSONAL_TOKEN from the environment or a .env file.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:
        current_logging_level = logging.DEBUG
    else:
        # Default to DEBUG if JIRA_CLOUD_VERBOSE is set, else WARNING
        if os.getenv("JIRA_CLOUD_VERBOSE", "false").lower() in ("true", "1", "yes"):
            current_logging_level = logging.DEBUG
        else:
            current_logging_level = logging.WARNING

    setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    ctx.ensure_object(dict)


@main.command()
@click.option("--start-at", default=0, show_default=True, help="Index of the first dashboard")
@click.option("--max-results", default=50, show_default=True, help="Page size")
@click.option(
    "--filter",
    "filter_type",
    type=click.Choice(["favourite", "my"]),
    help="Only favourite dashboards, or only the ones you own",
)
@click.pass_context
@_handle_errors
def dashboards(
    ctx: click.Context, start_at: int, max_results: int, filter_type: str | None
) -> None:
    """List the dashboards visible to you."""
    page, response = _get_jira(ctx).dashboard.gets(start_at, max_results, filter_type)
    _echo_envelope(response)
    if page is None:
        return
    for dashboard in page.dashboards:
        row = dashboard.to_simplified_dict()
        click.echo(f"{row['id']} {row['name']}")


@main.command()
@click.argument("project")
@click.option("--query", help="Only versions whose name or description match")
@click.option("--status", help="released, unreleased or archived (comma-separated)")
@click.option("--start-at", default=0, show_default=True, help="Index of the first version")
@click.option("--max-results", default=50, show_default=True, help="Page size")
@click.pass_context
@_handle_errors
def versions(
    ctx: click.Context,
    project: str,
    query: str | None,
    status: str | None,
    start_at: int,
    max_results: int,
) -> None:
    """List the versions of PROJECT."""
    options = VersionGetsOptions(query=query, status=status)
    page, response = _get_jira(ctx).project_version.search(
        project, options, start_at, max_results
    )
    _echo_envelope(response)
    if page is None:
        return
    for version in page.values:
        row = version.to_simplified_dict()
        state = "released" if row["released"] else "unreleased"
        click.echo(f"{row['id']} {row['name']} ({state})")


@main.command()
@click.argument("issue")
@click.pass_context
@_handle_errors
def watchers(ctx: click.Context, issue: str) -> None:
    """List the watchers of ISSUE."""
    result, response = _get_jira(ctx).issue_watcher.gets(issue)
    _echo_envelope(response)
    if result is None:
        return
    for watcher in result.watchers:
        row = watcher.to_simplified_dict()
        click.echo(f"{row['account_id']} {row['display_name']}")


@main.command("share-scope")
@click.option(
    "--set",
    "new_scope",
    type=click.Choice(["GLOBAL", "AUTHENTICATED", "PRIVATE"]),
    help="Change the default share scope instead of showing it",
)
@click.pass_context
@_handle_errors
def share_scope(ctx: click.Context, new_scope: str | None) -> None:
    """Show or change the default share scope of new filters and dashboards."""
    jira = _get_jira(ctx)
    if new_scope:
        response = jira.filter_share.set_scope(new_scope)
        _echo_envelope(response)
        return

    scope, response = jira.filter_share.scope()
    _echo_envelope(response)
    click.echo(scope.scope if scope is not None else "")


__all__ = ["main", "__version__", "Jira", "JiraConfig"]

if __name__ == "__main__":
    main()
