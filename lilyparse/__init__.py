# -*- coding: utf-8 -*-
#
# This file is part of `lilyparse`, a library for LilyPond-like music notation
#
# Copyright © 2019-2022 by Wilbert Berendsen <info@wilbertberendsen.nl>
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
The lilyparse module.

Reads a LilyPond-like notation of rests, notes, chords, beams and tuplets into
a validated tree of :class:`~.column.Column` objects, and writes such trees
as short diagnostic strings::

    >>> import lilyparse
    >>> col = lilyparse.parse("[c8 \\tuplet 3/2 { d16 e16 f16 }]")
    >>> lilyparse.render(col)
    '[c4:8 8:{d4:16 e4:16 f4:16}]'
    >>> col.duration
    Duration(1, 4)

"""

from .pkginfo import version, version_string
from .read import load, parse
from .registry import find
from .writer import render


__all__ = ('find', 'load', 'parse', 'render', 'version', 'version_string')
