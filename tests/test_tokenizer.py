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
Test pbform.parser.tokenizer
"""

### find pbform
import sys
sys.path.insert(0, '.')

from pbform.parser.tokenizer import (
    as_number, find_closing, param_spans, split_params, strip_param,
    unquote_string, value_span)



def check_split():
    assert split_params('#PB_Any, 10, "a, b", Str(x, 2)') == \
        ['#PB_Any', ' 10', ' "a, b"', ' Str(x, 2)']
    assert split_params('') == []
    assert split_params('  ') == []
    assert split_params('a,') == ['a', '']
    assert split_params('"a""b", 1') == ['"a""b"', ' 1']
    assert split_params('~"a\\"b", 2') == ['~"a\\"b"', ' 2']
    assert split_params("'(', 3") == ["'('", " 3"]
    assert split_params('1, 2 ; a, b\n, 3') == ['1', ' 2 ; a, b\n', ' 3']
    # unterminated string stops at the end of the line
    assert split_params('"abc\n, 4') == ['"abc\n', ' 4']
    assert param_spans(' x , y') == [(0, 3), (4, 6)]


def check_values():
    assert strip_param(' 10 ; comment') == '10'
    assert strip_param('  "a ; b"  ') == '"a ; b"'
    text = 'f( 1,  "x" )'
    assert value_span(text, 2, 4) == (3, 4)
    assert value_span(text, 5, 11) == (7, 10)
    assert find_closing('f(a, (b), ")") x', 2) == 13
    assert find_closing('f(a, (b)', 2) is None


def check_strings():
    assert unquote_string('"a""b"') == 'a"b'
    assert unquote_string(' "OK" ') == 'OK'
    assert unquote_string('~"a\\"b\\n"') == 'a"b\n'
    assert unquote_string('Str(1)') == 'Str(1)'
    assert unquote_string('"a" + "b"') == '"a" + "b"'


def check_numbers():
    assert as_number('10') == 10
    assert as_number(' -5 ') == -5
    assert as_number('1.5') == 1.5
    assert as_number('$FF') == 255
    assert as_number('%101') == 5
    assert as_number('x') is None
    assert as_number('') is None
    assert as_number('10 + 2') is None


def test_main():
    check_split()
    check_values()
    check_strings()
    check_numbers()



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
