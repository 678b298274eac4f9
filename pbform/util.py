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
Some utility functions to navigate lines in a text.

Positions are string indices in the full text. Lines are counted from zero.

"""

import bisect
import re


_indent_re = re.compile(r'[ \t]*')


class LineIndex:
    r"""Maps positions in a text to line numbers and back.

    Example::

        >>> from pbform.util import LineIndex
        >>> idx = LineIndex("ab\ncd\n")
        >>> idx.line(4)
        1
        >>> idx.start(1)
        3

    """
    def __init__(self, text):
        self.text = text
        self._starts = [0]
        self._starts.extend(m.end() for m in re.finditer(r'\n', text))

    def __len__(self):
        """The number of lines."""
        return len(self._starts)

    def line(self, pos):
        """Return the line number the position is on."""
        return bisect.bisect_right(self._starts, pos) - 1

    def start(self, line):
        """Return the position of the first character of the line.

        Returns the length of the text if the line does not exist.

        """
        if line < 0:
            return 0
        try:
            return self._starts[line]
        except IndexError:
            return len(self.text)

    def end(self, line):
        """Return the position of the end of the line, before the line break."""
        end = self.start(line + 1) if line + 1 < len(self._starts) else len(self.text)
        text = self.text
        if end > 0 and text[end-1:end] == '\n':
            end -= 1
            if end > 0 and text[end-1:end] == '\r':
                end -= 1
        return max(end, self.start(line))

    def end_with_newline(self, line):
        """Return the position of the start of the next line.

        If the line is the last one, the length of the text is returned.

        """
        return self.start(line + 1) if line + 1 < len(self._starts) else len(self.text)

    def line_text(self, line):
        """Return the text of the line, without the line break."""
        return self.text[self.start(line):self.end(line)]

    def indent(self, line):
        """Return the leading whitespace of the line."""
        return indent_at(self.text, self.start(line))

    def newline(self, line):
        r"""Return the line break used by the line, ``'\r\n'`` or ``'\n'``.

        The last line, which has no line break, uses the line break of the
        line before it, if any.

        """
        if line + 1 >= len(self._starts) and line > 0:
            line -= 1
        return newline_at(self.text, self.end(line))


def indent_at(text, line_start):
    """Return the whitespace at the line start position."""
    return _indent_re.match(text, line_start).group()


def newline_at(text, pos):
    r"""Return ``'\r\n'`` if the text at pos starts with that, otherwise ``'\n'``."""
    return '\r\n' if text.startswith('\r\n', pos) else '\n'


def insert_line(index, line, text):
    """Return a (pos, end, text) triple inserting a new line of text after the line.

    The new line gets the same line break as the line it is inserted after.
    When the line is the last line and has no line break, one is added before
    the inserted text.

    """
    pos = index.end_with_newline(line)
    newline = index.newline(line)
    if pos == len(index.text) and index.end(line) == pos:
        return pos, pos, newline + text
    return pos, pos, text + newline


def delete_lines(index, first, last):
    """Return a (pos, end, text) triple removing the lines including the line break."""
    return index.start(first), index.end_with_newline(last), ''
