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
Write notation objects as short diagnostic strings.

The output is deterministic and meant for debugging and testing; it is not
guaranteed to be readable by :func:`.read.parse`. For example::

    >>> from lilyparse import parse, render
    >>> render(parse("[c8 <e g>8.]"))
    '[c4:8 <e4 g4>:8.]'

"""

import fractions

from parce.util import Dispatcher

from .column import Beam, Chord, Note, Rest, Tuplet
from .duration import NoteValue
from .pitch import Pitch


class Writer:
    """Convert rationals, pitches, note values and columns to text.

    Call :meth:`write` with the object. Raises a :obj:`TypeError` for
    objects it does not know how to write.

    """
    _write = Dispatcher()

    def write(self, obj):
        """Return a string representing ``obj``."""
        for cls in type(obj).__mro__:
            meth = self._write.get(cls)
            if meth:
                return meth(obj)
        raise TypeError("can't write {}".format(repr(obj)))

    def join(self, objects):
        """Write the objects separated by a space."""
        return " ".join(map(self.write, objects))

    @_write(fractions.Fraction, int)
    def write_rational(self, value):
        """Write a Duration or other rational as ``n/d``."""
        return "{}/{}".format(value.numerator, value.denominator)

    @_write(Pitch)
    def write_pitch(self, pitch):
        """Write the pitch name and octave, e.g. ``cs7``."""
        return "{}{}".format(pitch.name, pitch.octave)

    @_write(NoteValue)
    def write_value(self, value):
        """Write the note value, e.g. ``4.``."""
        return "{}{}".format(value.denominator, "." * value.dots)

    @_write(Rest)
    def write_rest(self, rest):
        return "r:{}".format(self.write(rest.value))

    @_write(Note)
    def write_note(self, note):
        return "{}:{}".format(self.write(note.pitch), self.write(note.value))

    @_write(Chord)
    def write_chord(self, chord):
        return "<{}>:{}".format(self.join(chord.pitches), self.write(chord.value))

    @_write(Beam)
    def write_beam(self, beam):
        return "[{}]".format(self.join(beam))

    @_write(Tuplet)
    def write_tuplet(self, tuplet):
        return "{}:{{{}}}".format(self.write(tuplet.value), self.join(tuplet))


_writer = Writer()


def render(obj):
    """Return a string representing the column, pitch, value or rational.

    This is a shortcut for ``Writer().write(obj)``.

    """
    return _writer.write(obj)
