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
Meta-information about the pbform package.

This information is used by the install script, and also for the
``pbform --version`` command line option.

"""

#: name of the package
name = "pbform"

#: the current version
version = (0, 4, 0)

#: the version as a string
version_string = "{}.{}.{}".format(*version)

#: short description
description = "Parse and minimally patch PureBasic Form Designer files"

#: long description
long_description = \
    "The pbform package reads PureBasic Form Designer (.pbf) sources into a " \
    "simple document model, and computes minimal text edits to change the " \
    "geometry, entries and identities of the form, leaving all other text " \
    "untouched."

#: license
license = "GPL v3"
