"""Main CLI entry point for deskkit."""

import click
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from .. import __version__
from ..config import get_settings
from ..core.hotkeys import format_hotkey
from ..core.paths import shorten_path, split_path
from ..core.text import edit_width, repeat
from ..core.window import set_modified, toggle_modified
from ..io.file_operations import FileOperations


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(
        logging, get_settings().log_level.upper(), logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug-level logging')
@click.pass_context
def cli(ctx, verbose):
    """deskkit - helpers for desktop scripting"""
    ctx.ensure_object(dict)
    try:
        _configure_logging(verbose)
    except ValueError as e:
        click.echo(f"❌ Invalid settings: {e}", err=True)
        sys.exit(1)
    ctx.obj.setdefault('file_operations', None)


def _file_operations(ctx) -> FileOperations:
    """Built lazily so the text commands never touch tkinter."""
    if ctx.obj.get('file_operations') is None:
        ctx.obj['file_operations'] = FileOperations()
    return ctx.obj['file_operations']


@cli.command()
@click.argument('keys')
@click.option('--separator', default='+', show_default=True, help='Text between keys')
def hotkey(keys, separator):
    """Show a hotkey such as '^+s' as 'Ctrl+Shift+S'"""
    click.echo(format_hotkey(keys, separator=separator))


@cli.command('split-path')
@click.argument('path')
@click.option('--json', 'as_json', is_flag=True, help='Print the parts as JSON')
def split_path_cmd(path, as_json):
    """Show the file name, directory, extension and drive of PATH"""
    parts = split_path(path)
    if as_json:
        click.echo(json.dumps(asdict(parts), indent=2))
        return
    click.echo(f"File name:  {parts.file_name}")
    click.echo(f"Directory:  {parts.directory}")
    click.echo(f"Extension:  {parts.extension}")
    click.echo(f"Name:       {parts.name_no_ext}")
    click.echo(f"Drive:      {parts.drive}")


@cli.command()
@click.argument('path')
@click.option('--max-length', default=40, show_default=True, type=click.IntRange(min=1))
def shorten(path, max_length):
    """Shorten PATH for display"""
    click.echo(shorten_path(path, max_length=max_length))


@cli.command()
@click.argument('text')
@click.option('--modified', 'mode', flag_value='modified', help='Add the modified marker')
@click.option('--clean', 'mode', flag_value='clean', help='Remove the modified marker')
@click.option('--toggle', 'mode', flag_value='toggle', help='Flip the marker (default)')
@click.option('--marker', default='*', show_default=True)
def title(text, mode, marker):
    """Add, remove or toggle the modified marker on a window TEXT"""
    if mode == 'modified':
        click.echo(set_modified(text, True, marker))
    elif mode == 'clean':
        click.echo(set_modified(text, False, marker))
    else:
        click.echo(toggle_modified(text, marker))


@cli.command('edit-width')
@click.argument('columns', type=int)
@click.option('--char-width', type=int, required=True, help='Pixel width of one character')
@click.option('--padding', type=int, default=None, help='Border and margin pixels')
@click.option('--scrollbar', type=int, default=0, show_default=True, help='Scrollbar pixels')
def edit_width_cmd(columns, char_width, padding, scrollbar):
    """Pixel width of an edit control showing COLUMNS characters"""
    try:
        click.echo(edit_width(columns, char_width, padding=padding, scrollbar=scrollbar))
    except ValueError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)


@cli.command('repeat')
@click.argument('text')
@click.argument('count', type=int)
def repeat_cmd(text, count):
    """Print TEXT repeated COUNT times"""
    click.echo(repeat(text, count))


@cli.command()
@click.argument('path', required=False, default='')
@click.option('--input', 'input_file', type=click.File('rb'), default='-',
              help='Read contents from a file instead of stdin')
@click.option('--name', 'suggested_name', default='', help='File name suggested in the dialog')
@click.option('--title', 'dialog_title', default=None, help='Dialog title')
@click.option('--filter', 'file_filter', default=None, help="e.g. 'Text (*.txt; *.md)'")
@click.pass_context
def save(ctx, path, input_file, suggested_name, dialog_title, file_filter):
    """Save stdin (or --input) to PATH, asking for a path when none is given"""
    # bytes in, so CRLF line endings reach the file unchanged
    try:
        contents = input_file.read().decode('utf-8')
    except UnicodeDecodeError as e:
        click.echo(f"❌ Input is not UTF-8: {e}", err=True)
        sys.exit(1)
    result = _file_operations(ctx).save(
        contents,
        path=path,
        suggested_name=suggested_name,
        dialog_title=dialog_title,
        file_filter=file_filter,
    )
    if result.error:
        click.echo("❌ Nothing saved", err=True)
        sys.exit(1)
    click.echo(f"✅ Saved to {result.path}")


@cli.command()
@click.argument('path', required=False, default='')
@click.option('--title', 'dialog_title', default=None, help='Dialog title')
@click.option('--filter', 'file_filter', default=None, help="e.g. 'Text (*.txt; *.md)'")
@click.option('--json', 'as_json', is_flag=True, help='Print the whole result as JSON')
@click.pass_context
def load(ctx, path, dialog_title, file_filter, as_json):
    """Print the contents of PATH, asking for a file when none is given"""
    result = _file_operations(ctx).load(
        path=path,
        dialog_title=dialog_title,
        file_filter=file_filter,
    )
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif not result.error:
        click.echo(result.contents, nl=False)

    if result.error:
        if not as_json:
            click.echo("❌ Nothing loaded", err=True)
        sys.exit(1)


def main(argv: Optional[list] = None) -> None:
    cli(args=argv, obj={})


if __name__ == '__main__':
    main()
