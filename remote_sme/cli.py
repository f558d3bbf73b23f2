# === FILE: remote_sme/cli.py ===
"""
Command-line entry point: fetch a remote JavaScript file and its source map,
and generate a source-map-explorer visualization.

Usage:
  remote-source-map-explorer [OPTIONS] URL

Options:
  --config PATH        YAML/JSON config file (built-in defaults if omitted)
  --timeout SEC        Timeout for each HTTP request (override timeout)
  --window-size N      Trailing bytes scanned for sourceMappingURL
  --no-open            Write the HTML file but do not launch a browser
  --log-level LEVEL    Logging level (DEBUG, INFO, ...)
  --log-file PATH      Also write logs to this file
  --version            Show the version and exit
  --help               Show this screen and exit

Example:
  remote-source-map-explorer https://example.com/static/js/main.js
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from remote_sme import __version__
from remote_sme.config import ExplorerConfig, load_config
from remote_sme.engine import Pipeline
from remote_sme.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)


def _load(config_path, overrides) -> ExplorerConfig:
    cfg = load_config(config_path)
    if not overrides:
        return cfg
    return ExplorerConfig.model_validate({**cfg.model_dump(), **overrides})


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(
    __version__, '--version', message='remote-source-map-explorer, version %(version)s'
)
@click.argument('url', metavar='URL')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Timeout for each HTTP request, in seconds.'
)
@click.option(
    '--window-size', 'window_size',
    type=int,
    default=None,
    help='Trailing bytes of the script scanned for sourceMappingURL.'
)
@click.option(
    '--no-open', 'no_open',
    is_flag=True,
    help='Write the visualization file without opening a browser.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stdout only if omitted)'
)
def cli(url, config_path, timeout, window_size, no_open, log_level, log_file):
    """Fetch URL and its source map, then visualize the bundle in a browser."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    overrides = {}
    if timeout is not None:
        overrides['timeout'] = timeout
    if window_size is not None:
        overrides['window_size'] = window_size
    if no_open:
        overrides['open_browser'] = False

    try:
        cfg = _load(config_path, overrides)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Failed to load configuration: {e}')
        sys.exit(1)

    pipeline = Pipeline(cfg, progress=click.echo, report_error=print_error)
    sys.exit(int(pipeline.run(url)))
