"""Command-line interface for JSON Power Tools."""

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import FormatterConfig, Indentation, get_config, load_settings
from .error_handler import ErrorHandler
from .json_formatter import JSONFormatter
from .types import FormatResult, IndentationKind, ProcessingError

logger = logging.getLogger(__name__)


def config_options(func):
    """Attach the options shared by every command."""
    options = [
        click.option('--settings', type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help='JSON settings file (maxDepth, ignoredFolders, indentation, ...)'),
        click.option('--max-depth', type=int, default=None,
                     help='Maximum directory depth to explore (default: 256)'),
        click.option('--ignore', 'ignored_folders', multiple=True,
                     help='Folder name to skip; repeat for several (default: node_modules, vendor, ...)'),
        click.option('--indent-type', type=click.Choice(['spaces', 'tabs']), default=None,
                     help='Indentation style (default: spaces)'),
        click.option('--indent-size', type=int, default=None,
                     help='Spaces per level, ignored for tabs (default: 2)'),
        click.option('--ext', 'allowed_extensions', multiple=True,
                     help='File extension to process, with the dot; repeat for several (default: .json)'),
        click.option('--max-unwrap-depth', type=int, default=None,
                     help='Stop expanding embedded JSON strings after this many levels'),
        click.option('--verbose', '-v', is_flag=True, help='Enable verbose output'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(settings: Optional[Path], max_depth: Optional[int],
                 ignored_folders: Tuple[str, ...], indent_type: Optional[str],
                 indent_size: Optional[int], allowed_extensions: Tuple[str, ...],
                 max_unwrap_depth: Optional[int]) -> FormatterConfig:
    """Combine a settings file (or the active config) with command-line overrides."""
    if settings is not None:
        try:
            config = load_settings(str(settings))
        except ProcessingError as e:
            raise click.ClickException(str(e))
    else:
        config = get_config()

    overrides = {}
    if max_depth is not None:
        overrides['max_depth'] = max_depth
    if ignored_folders:
        overrides['ignored_folders'] = ignored_folders
    if allowed_extensions:
        overrides['allowed_extensions'] = allowed_extensions
    if max_unwrap_depth is not None:
        overrides['max_unwrap_depth'] = max_unwrap_depth
    if indent_type is not None or indent_size is not None:
        overrides['indentation'] = Indentation(
            kind=(IndentationKind.from_value(indent_type) if indent_type is not None
                  else config.indentation.kind),
            size=indent_size if indent_size is not None else config.indentation.size
        )

    config = dataclasses.replace(config, **overrides)
    for warning in ErrorHandler(logger).validate_config(config).warnings:
        logger.warning(warning)
    return config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _report_failure(headline: str, result: FormatResult) -> None:
    click.echo(f"❌ {headline}", err=True)
    if result.error is not None:
        response = ErrorHandler(logger).handle_processing_error(result.error)
        click.echo(f"   • {result.error}", err=True)
        click.echo(f"   • {response.suggested_action}", err=True)


@click.group()
@click.version_option(version="1.0.0")
def main():
    """JSON Power Tools - Pretty-print JSON and expand embedded JSON strings."""
    pass


@main.command('format-text')
@click.argument('text', required=False)
@config_options
def format_text(text: Optional[str], verbose: bool, **options):
    """Format JSON TEXT (or standard input) and print the result."""
    _configure_logging(verbose)
    config = build_config(**options)

    if text is None or text == '-':
        text = click.get_text_stream('stdin').read()

    result = JSONFormatter(config).format_text_result(text)
    if not result.success:
        _report_failure("Invalid JSON content", result)
        sys.exit(1)

    click.echo(result.text)


@main.command('format-file')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@config_options
def format_file(path: Path, verbose: bool, **options):
    """Format a single JSON file in place."""
    _configure_logging(verbose)
    config = build_config(**options)

    result = JSONFormatter(config).format_file_result(str(path))
    if not result.success:
        _report_failure(f"Failed to format JSON file: {path.name}", result)
        sys.exit(1)

    click.echo(f"✅ JSON file formatted successfully: {path.name}")


@main.command('format-tree')
@click.argument('root', type=click.Path(file_okay=False, path_type=Path))
@click.option('--parallel', is_flag=True, help='Format files concurrently')
@click.option('--workers', type=int, default=None, help='Worker threads for --parallel')
@config_options
def format_tree(root: Path, parallel: bool, workers: Optional[int], verbose: bool, **options):
    """Format every matching file under ROOT in place."""
    _configure_logging(verbose)
    config = build_config(**options)

    formatter = JSONFormatter(config, enable_parallel_processing=parallel, max_workers=workers)
    stats = formatter.format_tree(str(root))

    if stats.error_count == 0:
        click.echo(f"✅ Formatting completed: {stats.success_count} files formatted "
                   f"in {stats.duration_label} - {root.name}")
        return

    click.echo(f"⚠️ Formatting completed with errors: {stats.success_count} successes, "
               f"{stats.error_count} errors in {stats.duration_label} - {root.name}")
    for failed in stats.failed_files:
        click.echo(f"   • {failed}")
    sys.exit(1)


@main.command('list-files')
@click.argument('root', type=click.Path(file_okay=False, path_type=Path))
@config_options
def list_files(root: Path, verbose: bool, **options):
    """List the files format-tree would process under ROOT."""
    _configure_logging(verbose)
    config = build_config(**options)

    for path in JSONFormatter(config).enumerate_files(str(root)):
        click.echo(path)


if __name__ == '__main__':
    main()
