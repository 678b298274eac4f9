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
Find the Form Designer header and the region of the text that is scanned.

The PureBasic IDE starts a form file with a header comment like::

    ; Form Designer for PureBasic - 6.10
    ; Warning: this file uses a strict syntax, if you edit it, make sure to respect the Form Designer limitation or it won't be opened again.

and may end the file with a block of comments starting with ``; IDE
Options``. Only the text between those is scanned.

"""

import re

from .. import model
from ..util import LineIndex


_header_re = re.compile(
    r'^[ \t]*;[ \t]*Form[ \t]+Designer[ \t]+for[ \t]+PureBasic[ \t]*-[ \t]*'
    r'([0-9]+(?:\.[0-9]+)*)[ \t]*\r?$', re.IGNORECASE | re.MULTILINE)
_strict_syntax_re = re.compile(r'strict\s+syntax', re.IGNORECASE)
_form_designer_re = re.compile(r'Form\s+Designer', re.IGNORECASE)
_ide_options_re = re.compile(r'^[ \t]*;[ \t]*IDE[ \t]+Options\b', re.IGNORECASE | re.MULTILINE)


def parse_header(text):
    """Return a :class:`~pbform.model.FormHeader`, or None if there is no header."""
    m = _header_re.search(text)
    if not m:
        return None
    index = LineIndex(text)
    line = index.line(m.start())
    following = index.line_text(line + 1) if line + 1 < len(index) else ""
    strict = bool(_strict_syntax_re.search(following) and _form_designer_re.search(following))
    return model.FormHeader(m.group(1), line, strict)


def detect_scan_range(text, header=None):
    """Return the :class:`~pbform.model.ScanRange` of the text.

    It starts at the line of the ``header`` (if given) and ends at the ``;
    IDE Options`` comment, or at the end of the text.

    """
    start = LineIndex(text).start(header.line) if header else 0
    m = _ide_options_re.search(text, start)
    end = m.start() if m else len(text)
    return model.ScanRange(start, end)


def header_issues(header, expected_version=None):
    """Return a list of :class:`~pbform.model.Issue` tuples about the header."""
    issues = []
    if not header:
        issues.append(model.Issue(model.WARNING,
            "Missing Form Designer header ('; Form Designer for PureBasic - x.xx').", 0))
    elif not header.has_strict_syntax_warning:
        issues.append(model.Issue(model.INFO,
            "Strict syntax warning line not found. The PureBasic IDE usually "
            "writes it as the second header comment.", header.line))
    if expected_version:
        if not header or not header.version:
            issues.append(model.Issue(model.WARNING,
                "Expected PureBasic version '{}', but the Form Designer header "
                "has no version.".format(expected_version)))
        elif header.version != expected_version:
            issues.append(model.Issue(model.WARNING,
                "Form header version is '{}', but version '{}' is expected.".format(
                    header.version, expected_version), header.line))
    return issues
