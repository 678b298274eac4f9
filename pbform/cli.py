# -*- coding: utf-8 -*-
#
# This file is part of `pbform`, a library for PureBasic Form Designer files
#
# Copyright © 2026 by the pbform authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The ``pbform`` command.

Shows the document model or the issues of a Form Designer file, and changes
the geometry of gadgets and the window, and the identity of the window. The
patch commands print the new text, or write it back to the file with
``--in-place``.

"""

import json
import logging

import click

from . import model, parser
from .patch import apply
from .patch import fields, window
from .pkginfo import version_string


log = logging.getLogger(__name__)


class NoEditError(click.ClickException):
    """Raised when a patch can't find its target. Exits with code 1."""
    exit_code = 1


def read(filename, encoding):
    """Return the text of the file, keeping its line breaks."""
    with open(filename, encoding=encoding, newline='') as f:
        return f.read()


def write(filename, text, encoding):
    with open(filename, 'w', encoding=encoding, newline='') as f:
        f.write(text)


def safe_parse(text, expected_version=None):
    """Parse the text; an unexpected exception becomes an error issue.

    In that case the document has no entities, a scan range covering the
    whole text and one error issue with the exception message.

    """
    try:
        return parser.parse(text, expected_version)
    except Exception as e:
        log.exception("parsing failed")
        meta = model.FormMeta(None, model.ScanRange(0, len(text)),
            [model.Issue(model.ERROR, str(e) or type(e).__name__)],
            model.FormEnumerations([], []))
        return model.FormDocument(None, [], [], [], [], meta)


@click.group()
@click.version_option(version_string, prog_name="pbform")
@click.option('-v', '--verbose', is_flag=True, help='Log debug messages')
@click.option('--encoding', default='utf-8', show_default=True, help='Encoding of the files')
@click.pass_context
def cli(ctx, verbose, encoding):
    """Read and patch PureBasic Form Designer files."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj['encoding'] = encoding


@cli.command()
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.option('--expected-version', help='Warn if the header has another version')
@click.pass_context
def dump(ctx, filename, expected_version):
    """Print the document model of FILENAME as JSON."""
    doc = safe_parse(read(filename, ctx.obj['encoding']), expected_version)
    click.echo(json.dumps(model.to_dict(doc), indent=2))


@cli.command()
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.option('--expected-version', help='Warn if the header has another version')
@click.pass_context
def issues(ctx, filename, expected_version):
    """Print the issues found in FILENAME, one per line."""
    doc = safe_parse(read(filename, ctx.obj['encoding']), expected_version)
    for issue in doc.meta.issues:
        line = "" if issue.line is None else "{}:".format(issue.line + 1)
        click.echo("{}:{} {}: {}".format(filename, line, issue.severity, issue.message))


def _patch(ctx, filename, in_place, what, key, func, *args, **kwargs):
    """Run the patch function on the text of the file and output the result."""
    encoding = ctx.obj['encoding']
    text = read(filename, encoding)
    scan_range = safe_parse(text).meta.scan_range
    edits = func(text, key, *args, scan_range=scan_range, **kwargs)
    if edits is None:
        raise NoEditError("Could not patch {} '{}'. No matching call found "
            "(scanRange: {}-{}).".format(what, key, *scan_range))
    result = apply(text, edits)
    if in_place:
        write(filename, result, encoding)
        log.debug("%d edit(s) written to %s", len(edits), filename)
    else:
        click.echo(result, nl=False)


_in_place = click.option('-i', '--in-place', is_flag=True, help='Write the result back to the file')


@cli.command()
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.argument('x', type=float)
@click.argument('y', type=float)
@_in_place
@click.pass_context
def move(ctx, filename, key, x, y, in_place):
    """Move the gadget KEY to X, Y."""
    _patch(ctx, filename, in_place, "gadget", key, fields.move_gadget, x, y)


@cli.command()
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.argument('x', type=float)
@click.argument('y', type=float)
@click.argument('w', type=float)
@click.argument('h', type=float)
@_in_place
@click.pass_context
def resize(ctx, filename, key, x, y, w, h, in_place):
    """Set the geometry of the gadget KEY."""
    _patch(ctx, filename, in_place, "gadget", key, fields.resize_gadget, x, y, w, h)


@cli.command('window-rect')
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.argument('x', type=float)
@click.argument('y', type=float)
@click.argument('w', type=float)
@click.argument('h', type=float)
@_in_place
@click.pass_context
def window_rect(ctx, filename, key, x, y, w, h, in_place):
    """Set the geometry of the window KEY."""
    _patch(ctx, filename, in_place, "window", key, fields.move_window, x, y, w, h)


@cli.command('rename-window')
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.argument('name')
@click.option('--propagate-procedures', is_flag=True,
    help='Also rename the Open<Name> and <Name>_Events procedures')
@_in_place
@click.pass_context
def rename_window(ctx, filename, key, name, propagate_procedures, in_place):
    """Rename the window KEY to NAME."""
    _patch(ctx, filename, in_place, "window", key, window.rename_window, name,
        propagate_procedures=propagate_procedures)


@cli.command('toggle-window')
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.option('--pb-any/--constant', default=True, show_default=True,
    help='Create the window with #PB_Any or with a constant')
@click.option('--variable', help='The window variable [default: KEY without #]')
@click.option('--enum-symbol', help='The window constant [default: KEY with #]')
@click.option('--enum-value', help='Value for the constant in Enumeration FormWindow')
@_in_place
@click.pass_context
def toggle_window(ctx, filename, key, pb_any, variable, enum_symbol, enum_value, in_place):
    """Switch the window KEY between #PB_Any and a constant."""
    base = key.lstrip('#')
    variable = variable or base
    enum_symbol = enum_symbol or '#' + base
    _patch(ctx, filename, in_place, "window", key, window.toggle_window_pb_any,
        pb_any, variable, enum_symbol, enum_value)


@cli.command('enum-value')
@click.argument('filename', type=click.Path(exists=True, dir_okay=False))
@click.argument('symbol')
@click.argument('value', default='')
@_in_place
@click.pass_context
def enum_value(ctx, filename, symbol, value, in_place):
    """Set the VALUE of the window constant SYMBOL.

    The constant is added to Enumeration FormWindow if needed. Without VALUE
    the value is removed.

    """
    _patch(ctx, filename, in_place, "enumeration entry", symbol,
        window.set_window_enum_value, value)


def main():
    cli(obj={})
