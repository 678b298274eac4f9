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
Registry of the language definitions bundled with :mod:`pbform`.

When adding languages to :mod:`pbform.lang` please also add them to the
registry here.

"""

__all__ = ['find', 'registry']


import parce.registry


registry = parce.registry.Registry()


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    See for all the arguments :func:`parce.find`. If no root lexicon can be
    found in pbform's bundled languages, falls back to :mod:`parce`.

    """
    if name:
        lexicon = registry.find(name)
    else:
        for lexicon in registry.suggest(filename, mimetype, contents):
            break
        else:
            lexicon = None
    if lexicon:
        return lexicon
    return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)



## add bundled languages here
registry.add("pbform.lang.purebasic.PureBasic.root",
    name = "PureBasic",
    desc = "PureBasic source, as written by the Form Designer",
    aliases = ["pb", "pbf"],
    filenames = [("*.pbf", 1), ("*.pb", .8), ("*.pbi", .8)],
    mimetypes = [("text/x-purebasic", 1)],
    guesses = [(r'^;\s*Form\s+Designer\s+for\s+PureBasic', 1)],
)
