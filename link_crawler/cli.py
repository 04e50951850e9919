# === FILE: link_crawler/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for LinkCrawler.

Usage:
  link-crawler [OPTIONS] URL

Options:
  --config PATH          Path to a YAML/JSON config (default: configs/default.yaml if present)
  --debug                Enable fetch-timing and failure diagnostics on stderr
  --log-file PATH        Also write logs to this file
  --json PATH            Save a JSON report
  --html PATH            Save an HTML report
  --template DIR         Folder with the Jinja2 report template
  --join-timeout SEC     How long a page waits for each child branch
  --max-concurrency N    Maximum number of simultaneous fetches
  --version, -v          Show the LinkCrawler version

Example:
  link-crawler https://orf.at --json reports/orf.json
"""
import asyncio
import sys
import time
from pathlib import Path

import click

from link_crawler import __version__
from link_crawler.config import load_config
from link_crawler.logger import init_logging
from link_crawler.report import build_report, render_html, render_json
from link_crawler.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])
USAGE = "Usage: link-crawler [OPTIONS] URL"


def print_error(message: str, code: int = 1):
    click.secho(message, fg='red', err=True)
    sys.exit(code)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkCrawler, version %(version)s')
@click.argument('url', required=False)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option('--debug', is_flag=True, default=False, help='Enable diagnostic logging.')
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write logs to this file.'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file.'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file.'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Folder with the Jinja2 report template.'
)
@click.option('--join-timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Seconds a page waits for each child branch.')
@click.option('--max-concurrency', type=click.IntRange(min=1), default=None,
              help='Maximum number of simultaneous fetches.')
def cli(url, config_path, debug, log_file, json_output, html_output, template_dir,
        join_timeout, max_concurrency):
    """Collect every in-domain link reachable from URL."""
    if not url:
        click.echo(USAGE, err=True)
        sys.exit(1)

    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')

    overrides = {}
    if debug:
        overrides['debug'] = True
    if join_timeout is not None:
        overrides['join_timeout'] = join_timeout
    if max_concurrency is not None:
        overrides['max_concurrency'] = max_concurrency
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    init_logging(debug=cfg.debug, log_file=str(log_file) if log_file else None)

    click.echo(f'Collecting links for {url} ...')
    start = time.monotonic()
    try:
        links, stats = asyncio.run(start_scan(url, cfg))
    except ValueError as e:
        print_error(str(e))
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    for link in sorted(links):
        click.echo(link)
    click.echo(f'Crawling finished in {time.monotonic() - start:.3f} seconds')

    if json_output or html_output:
        report = build_report(url, links, stats)
        if json_output:
            try:
                saved_json = render_json(report, json_output)
                click.echo(f'JSON report: {saved_json}', err=True)
            except Exception as e:
                print_error(f'Failed to save JSON report: {e}')
        if html_output:
            try:
                saved_html = render_html(report, template_dir, html_output)
                click.echo(f'HTML report: {saved_html}', err=True)
            except Exception as e:
                print_error(f'Failed to save HTML report: {e}')


if __name__ == "__main__":
    cli()
