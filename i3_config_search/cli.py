"""
Command Line Interface for the i3 config searcher
"""
import asyncio
import functools
import json
import sys
import click
from i3_config_search.core.config import Config, LoaderConfig
from i3_config_search.core.exceptions import I3ConfigSearchError
from i3_config_search.core.models import Entry, Modifiers
from i3_config_search.keys import KeyChord
from i3_config_search.loader.sources import load_metadata
from i3_config_search.search.highlight import render_spans
from i3_config_search.search.ranker import Ranker
from i3_config_search.utils.logger import setup_logging


def source_options(command):
    """Options that override where the config text is loaded from"""
    @click.option('--file', 'file_path', type=click.Path(dir_okay=False), help='Read the i3 config from a file')
    @click.option('--url', help='Fetch the i3 config from a URL')
    @click.option('--socket', 'socket_path', help='i3 IPC socket path (defaults to $I3SOCK)')
    @functools.wraps(command)
    def wrapper(*args, file_path=None, url=None, socket_path=None, **kwargs):
        return command(*args, source=(file_path, url, socket_path), **kwargs)
    return wrapper


def resolve_loader(config: Config, source) -> LoaderConfig:
    """Apply command line source overrides to the configured loader"""
    file_path, url, socket_path = source
    loader = config.loader.model_copy()
    if file_path:
        loader = loader.model_copy(update={'source': 'file', 'path': file_path})
    elif url:
        loader = loader.model_copy(update={'source': 'url', 'url': url})
    elif socket_path:
        loader = loader.model_copy(update={'source': 'ipc', 'socket_path': socket_path})
    return loader


def fail(error: Exception):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def highlight(text: str) -> str:
    return click.style(text, bold=True, underline=True)


def format_entry(entry: Entry) -> str:
    group = render_spans(entry.group_match_spans, highlight) if entry.group_match_spans is not None else entry.group
    description = (
        render_spans(entry.description_match_spans, highlight)
        if entry.description_match_spans is not None else entry.description
    )
    return f"[{group}] {description}  ({entry.keys})"


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """Search the annotated keybindings of an i3 config"""
    try:
        settings = Config.load_from_file(config) if config else Config.from_env()
        setup_logging(
            'DEBUG' if verbose else settings.logging.level,
            settings.logging.file,
            settings.logging.format,
        )
    except (OSError, ValueError) as e:
        fail(e)

    ctx.ensure_object(dict)
    ctx.obj['config'] = settings


@cli.command(name='list')
@source_options
@click.pass_context
def list_entries(ctx, source):
    """List every annotated keybinding in source order"""
    config = ctx.obj['config']
    try:
        metadata = asyncio.run(load_metadata(resolve_loader(config, source)))
    except I3ConfigSearchError as e:
        fail(e)

    if not len(metadata):
        click.echo("No annotated keybindings found.")
        return

    for entry in metadata:
        click.echo(format_entry(entry))


@cli.command()
@click.argument('query', default='')
@click.option('--shift', is_flag=True, help='Only bindings that use Shift')
@click.option('--control', '--ctrl', 'control', is_flag=True, help='Only bindings that use Control')
@click.option('--alt', is_flag=True, help='Only bindings that use Alt')
@click.option('--meta', '--super', 'meta', is_flag=True, help='Only bindings that use the Super/Meta key')
@click.option('--max-results', type=click.IntRange(min=1), help='Maximum number of results')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@source_options
@click.pass_context
def search(ctx, query, shift, control, alt, meta, max_results, as_json, source):
    """Fuzzy search the keybindings for QUERY"""
    config = ctx.obj['config']
    try:
        metadata = asyncio.run(load_metadata(resolve_loader(config, source)))
    except I3ConfigSearchError as e:
        fail(e)

    search_config = config.search
    if max_results:
        search_config = search_config.model_copy(update={'max_results': max_results})

    modifiers = Modifiers(shift=shift, control=control, alt=alt, meta=meta)
    results = Ranker(search_config).filter(metadata.entries, query, modifiers)

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in results], indent=2))
        return

    if not results:
        click.echo("No results found.")
        return

    for entry in results:
        click.echo(format_entry(entry))


@cli.command()
@click.argument('keys')
@click.pass_context
def chord(ctx, keys):
    """Show the modifiers and key sequence described by KEYS"""
    config = ctx.obj['config']
    try:
        key_chord = KeyChord.parse(keys, config.search.markers)
    except I3ConfigSearchError as e:
        fail(e)

    click.echo(f"Modifiers: {', '.join(key_chord.modifiers.active()) or 'none'}")
    click.echo(f"Sequence: {key_chord.sequence}")


@cli.command()
@click.option('--output', '-o', default='i3_config_search.json', help='Output configuration file')
@click.pass_context
def init_config(ctx, output):
    """Initialize a configuration file with default settings"""
    Config().save_to_file(output)
    click.echo(f"Configuration file created: {output}")
    click.echo("Edit the file to customize settings, then use:")
    click.echo(f"  i3-config-search --config {output} search QUERY")


def main():
    """Main entry point"""
    cli()


if __name__ == '__main__':
    main()
