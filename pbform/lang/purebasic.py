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
PureBasic language and transformation definition.

The language definition only knows as much of PureBasic as is needed to find
the statements a Form Designer file is built of: names, calls with their
(possibly multi-line) argument lists, strings, comments and statement
separators. The :class:`PureBasicTransform` turns the tokens into a list of
:class:`Statement` tuples, one for every call that appears in statement
position, i.e. at the start of a line or after a ``:``, optionally preceded by
an assignment ``Var =``.

"""

import collections

from parce import Language, lexicon, default_action, skip
from parce.rule import bygroup
from parce.transform import Transform
import parce.action as a


#: A call in statement position, as found by :class:`PureBasicTransform`.
Statement = collections.namedtuple("Statement", "name var pos name_pos args_pos args_end end")
Statement.name.__doc__ = "The name of the called function."
Statement.var.__doc__ = "The name of the assigned variable, or None."
Statement.pos.__doc__ = "Position of the first token (the variable if assigned, else the name)."
Statement.name_pos.__doc__ = "Position of the function name."
Statement.args_pos.__doc__ = "Position just after the opening parenthesis."
Statement.args_end.__doc__ = "Position of the closing parenthesis."
Statement.end.__doc__ = "Position just after the closing parenthesis."


#: The actions of tokens that denote an identifier.
IDENTIFIER_ACTIONS = (a.Name, a.Name.Function, a.Name.Constant)

RE_NAME = r'[A-Za-z_]\w*\$?'


class PureBasic(Language):
    """PureBasic language definition, tailored to Form Designer sources."""
    @lexicon
    def root(cls):
        yield r'[ \t\r]+', skip
        yield r'\n|:(?!:)', a.Delimiter.Separator
        yield from cls.common()

    @lexicon
    def arguments(cls):
        """The argument list of a call, upto and including the closing parenthesis."""
        yield r'\)', a.Delimiter, -1
        yield r'\(', a.Delimiter, cls.arguments
        yield from cls.common()

    @classmethod
    def common(cls):
        yield r';[^\n]*', a.Comment
        yield r'~"', a.String, cls.escaped_string
        yield r'"', a.String, cls.string
        yield r"'[^'\n]*'", a.Character
        yield r'(' + RE_NAME + r')[ \t]*(\()', bygroup(a.Name.Function, a.Delimiter), cls.arguments
        yield r'#' + RE_NAME, a.Name.Constant
        yield RE_NAME, a.Name
        yield r'[<>]=|=[<>]|=', a.Operator
        yield default_action, a.Text

    @lexicon(consume=True)
    def string(cls):
        yield r'"', a.String, -1
        yield r'(?=\n)', skip, -1
        yield default_action, a.String

    @lexicon(consume=True)
    def escaped_string(cls):
        yield r'\\.', a.String.Escape
        yield r'"', a.String, -1
        yield r'(?=\n)', skip, -1
        yield default_action, a.String


class PureBasicTransform(Transform):
    """Transform PureBasic text to a list of :class:`Statement` tuples."""
    def root(self, items):
        """Return the list of calls in statement position."""
        result = []
        start = True    # at the start of a statement
        lhs = None      # name token that may become an assignment target
        var = None      # assignment target, after the ``=``
        name = None     # function name token of a call in statement position
        bracket = None  # the opening parenthesis of that call
        for i in items:
            if not i.is_token:
                if i.name == "arguments" and name and bracket and i.obj is not None:
                    result.append(Statement(
                        name.text,
                        var.text if var else None,
                        var.pos if var else name.pos,
                        name.pos,
                        bracket.end,
                        i.obj.pos,
                        i.obj.end))
                start = False
                lhs = var = name = bracket = None
            elif i.action is a.Delimiter.Separator:
                start = True
                lhs = var = name = bracket = None
            elif i.action is a.Comment:
                continue
            elif i.action is a.Name.Function:
                name = i if start or var else None
                start = False
                lhs = None
            elif i.action is a.Delimiter and i == '(':
                bracket = i if name else None
            elif i.action is a.Name:
                lhs = i if start else None
                start = False
                var = name = bracket = None
            elif i.action is a.Operator and i == '=' and lhs:
                var, lhs = lhs, None
            else:
                start = False
                lhs = var = name = bracket = None
        return result

    def arguments(self, items):
        """Return the closing parenthesis token, or None if it is missing."""
        if items and items[-1] == ')':
            return items[-1]

    def string(self, items):
        """Return the text of the string, without the quotes."""
        return ''.join(t.text for t in items[1:] if t != '"')

    def escaped_string(self, items):
        """Return the text of the escaped string, without the quotes."""
        return ''.join(t.text for t in items[1:] if t != '"')
