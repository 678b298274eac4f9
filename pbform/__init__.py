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
The pbform module.

Reads PureBasic Form Designer files and computes minimal edits to change them.
The most important functions are :func:`parse` (in :mod:`pbform.parser`)
and the patch functions in :mod:`pbform.patch`.

"""

import os.path

from parce import Document

from .pkginfo import version, version_string
from .registry import find
from . import parser


__all__ = ('find', 'load', 'parse', 'version', 'version_string')


def load(filename, lexicon=True, encoding=None, errors=None, newline=None):
    """Convenience function to read text from ``filename`` and return a
    :class:`parce.Document`.

    If ``lexicon`` is True, the lexicon will be found in the pbform registry
    based on the filename, defaulting to PureBasic. If it is a string name,
    its name is looked up in the registry; otherwise the lexicon is used
    directly.

    The ``encoding``, if specified, is used to read the file; otherwise the
    encoding is autodetected. The ``errors`` and ``newline`` arguments will be
    passed to Python's :func:`open` function. Raises :class:`OSError` if the
    file can't be read.

    """
    if lexicon is True:
        lexicon = find(filename=filename) or find("PureBasic")
    elif isinstance(lexicon, str):
        lexicon = find(lexicon)
    return Document.load(os.path.abspath(filename), lexicon, encoding, errors, newline)


def parse(text, expected_version=None):
    """Parse the text and return a :class:`~pbform.model.FormDocument`.

    The text may also be a :class:`parce.Document`.

    """
    if isinstance(text, Document):
        text = text.text()
    return parser.parse(text, expected_version)
