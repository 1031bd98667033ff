import sys
from typing import Optional

import click

from autocomment import __version__
from autocomment.config import (
    Settings,
    load_credentials,
    load_credentials_or_default,
    load_settings,
    save_credentials,
)
from autocomment.core.exceptions import AutocommentError, ConfigurationError
from autocomment.core.ports.logger import Logger
from autocomment.core.sync import sync_comments
from autocomment.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubPRSource,
    JiraClient,
    JiraIssueTracker,
    LogfireLogger,
    configure_logfire,
)


@click.group()
@click.version_option(__version__, prog_name='autocomment')
def cli():
    """Adds comments to Jira tickets based on GitHub pull requests."""
    pass


@cli.command('sync')
@click.option('--repo', '-r', required=True, help='Full name of the repository to scan, e.g. owner/repo')
@click.option(
    '--filter',
    '-f',
    'filter_expression',
    default='',
    help='Filters to pass to GitHub when listing pull requests. Try state=open',
)
@click.option('--verbose', '-v', is_flag=True, help='Log every step to stderr')
def sync(repo: str, filter_expression: str, verbose: bool):
    """Sync Jira comments with GitHub pull requests."""
    try:
        settings = load_settings()
        logger = _build_logger(settings, verbose)
        credentials = load_credentials(settings.config_file).require_complete()
        github_client = GitHubClient(
            credentials.github_pass,
            domain=credentials.github_domain,
            timeout=settings.http.timeout,
        )
        jira_client = JiraClient(
            credentials.jira_domain,
            credentials.jira_user,
            credentials.jira_pass,
            timeout=settings.http.timeout,
        )
        with github_client, jira_client:
            pr_source = GitHubPRSource(github_client, credentials.github_user, logger)
            issue_tracker = JiraIssueTracker(jira_client, logger)
            results = sync_comments(repo, filter_expression, pr_source, issue_tracker, logger)
    except AutocommentError as error:
        click.echo(f'Error: {error.message}', err=True)
        sys.exit(1)

    for line in results:
        click.echo(line)


@cli.command('credentials')
@click.option('--jira-user', default=None, help='Jira username')
@click.option('--jira-pass', default=None, help='Jira password or API token')
@click.option('--jira-domain', default=None, help='Jira domain, e.g. example.atlassian.net')
@click.option('--github-user', default=None, help='GitHub user whose pull requests are synced')
@click.option('--github-pass', default=None, help='GitHub token')
@click.option('--github-domain', default=None, help='GitHub API host, e.g. api.github.com')
def credentials(
    jira_user: Optional[str],
    jira_pass: Optional[str],
    jira_domain: Optional[str],
    github_user: Optional[str],
    github_pass: Optional[str],
    github_domain: Optional[str],
):
    """Update the stored GitHub or Jira credentials."""
    try:
        settings = load_settings()
        current = load_credentials_or_default(settings.config_file)
        updated = current.merged(
            jira_user=jira_user,
            jira_pass=jira_pass,
            jira_domain=jira_domain,
            github_user=github_user,
            github_pass=github_pass,
            github_domain=github_domain,
        )
        save_credentials(updated, settings.config_file)
    except (AutocommentError, OSError) as error:
        click.echo(f'Error: {error}', err=True)
        sys.exit(1)
    click.echo(f'Credentials saved to {settings.config_file}')


def _build_logger(settings: Settings, verbose: bool = False) -> Logger:
    level = 'DEBUG' if verbose else settings.logging.level
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but AUTOCOMMENT_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')


def main() -> None:
    cli()
