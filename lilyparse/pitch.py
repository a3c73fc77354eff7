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
Classes and functions to deal with pitches.

A pitch consists of a note (the index in the scale C D E F G A B, 0..6), an
alteration in whole tones and an octave. A sharp is represented by a +0.5
alteration value, and a flat by a -0.5 value; the double accidentals by +1
and -1.

Pitch names are written in the english style, a note letter followed by an
accidental: ``ff`` (double flat), ``f`` (flat), ``s`` (sharp) or ``ss``
(double sharp). This yields 35 pitch names, from ``aff`` to ``gss``.

The octave is an integer in the range 0..7, where 4 is the default octave.
When written, every ``'`` raises the octave by one and every ``,`` lowers it
by one.

"""

from .exceptions import InvalidValueError


#: The note letters, in the order of their note index.
NOTE_NAMES = "cdefgab"

#: Accidental suffixes with their alteration in whole tones.
ACCIDENTALS = {
    'ff': -1,
    'f': -0.5,
    '': 0,
    's': 0.5,
    'ss': 1,
}

#: The octave a pitch gets when no octave marks are given.
DEFAULT_OCTAVE = 4

#: The lowest octave.
MIN_OCTAVE = 0

#: The highest octave.
MAX_OCTAVE = 7


#: Mapping from pitch name to a (note, alter) tuple.
pitch_names = {letter + accidental: (NOTE_NAMES.index(letter), alter)
    for letter in sorted(NOTE_NAMES)
        for accidental, alter in ACCIDENTALS.items()}

#: Mapping from a (note, alter) tuple to the pitch name.
pitch_names_reversed = {note_alter: name for name, note_alter in pitch_names.items()}


class Pitch:
    """A pitch with ``note``, ``alter`` and ``octave`` attributes.

    The ``note`` is an integer in the 0..6 range, where 0 stands for C; the
    ``alter`` is one of the alterations in :data:`ACCIDENTALS`, and
    ``octave`` an integer in the range :data:`MIN_OCTAVE` ..
    :data:`MAX_OCTAVE`. Invalid values raise an
    :class:`~.exceptions.InvalidValueError`.

    Pitches are immutable. They compare equal when their attributes are the
    same, and also support the ``>``, ``<``, ``>=`` and ``<=`` operators.
    These operators compare on octave first, then note, then alter.

    ``format(pitch)`` returns the pitch name followed by the octave number::

        >>> from lilyparse.pitch import Pitch
        >>> p = Pitch.from_name('cs', 7)
        >>> p
        <Pitch note=0, alter=0.5, octave=7 (cs7)>
        >>> format(p)
        'cs7'

    """
    __slots__ = ('_note', '_alter', '_octave')

    def __init__(self, note, alter=0, octave=DEFAULT_OCTAVE):
        if (note, alter) not in pitch_names_reversed:
            raise InvalidValueError(
                "invalid pitch: note={}, alter={}".format(note, alter))
        if not isinstance(octave, int) or not MIN_OCTAVE <= octave <= MAX_OCTAVE:
            raise InvalidValueError("octave must be in the range {}..{}, got {}".format(
                MIN_OCTAVE, MAX_OCTAVE, octave))
        self._note = note
        self._alter = alter
        self._octave = octave

    @classmethod
    def from_name(cls, name, octave=DEFAULT_OCTAVE):
        """Return a Pitch for the pitch name, e.g. ``'bf'``.

        Raises a :obj:`KeyError` if the name is not a valid pitch name.

        """
        return cls(*pitch_names[name], octave)

    @property
    def note(self):
        """The note index, 0 (C) .. 6 (B)."""
        return self._note

    @property
    def alter(self):
        """The alteration in whole tones."""
        return self._alter

    @property
    def octave(self):
        """The octave, 0..7."""
        return self._octave

    @property
    def name(self):
        """The pitch name, e.g. ``'cs'``."""
        return pitch_names_reversed[self._note, self._alter]

    def __format__(self, format_spec):
        return format('{}{}'.format(self.name, self._octave), format_spec)

    def __str__(self):
        return format(self)

    def __repr__(self):
        return "<{} note={}, alter={}, octave={} ({})>".format(
            self.__class__.__name__, self._note, self._alter, self._octave, self)

    def _as_tuple(self):
        """Return our attributes as a sortable tuple."""
        return (self._octave, self._note, self._alter)

    def __hash__(self):
        return hash(self._as_tuple())

    def __eq__(self, other):
        return isinstance(other, Pitch) and self._as_tuple() == other._as_tuple()

    def __ne__(self, other):
        return not isinstance(other, Pitch) or self._as_tuple() != other._as_tuple()

    def __gt__(self, other):
        if isinstance(other, Pitch):
            return self._as_tuple() > other._as_tuple()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Pitch):
            return self._as_tuple() < other._as_tuple()
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Pitch):
            return self._as_tuple() >= other._as_tuple()
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Pitch):
            return self._as_tuple() <= other._as_tuple()
        return NotImplemented

    def copy(self):
        """Return a new Pitch with our attributes."""
        return type(self)(self._note, self._alter, self._octave)


def octave_to_string(octave):
    """Convert an octave number to an octave notation.

    The octave notation consists of zero or more ``'`` or ``,``. The default
    octave 4 returns the empty string.

    """
    n = octave - DEFAULT_OCTAVE
    return "," * -n if n < 0 else "'" * n


def octave_from_string(octave):
    """Convert an octave string to an octave number.

    ``''`` is converted to 6, ``,`` to 3. The empty string gives 4.

    Raises an :class:`~.exceptions.InvalidValueError` if the string mixes
    ``'`` and ``,``, contains other characters, or yields an octave outside
    :data:`MIN_OCTAVE` .. :data:`MAX_OCTAVE`.

    """
    raised, lowered = octave.count("'"), octave.count(",")
    if (raised and lowered) or raised + lowered != len(octave):
        raise InvalidValueError("invalid octave marks: {}".format(repr(octave)))
    n = DEFAULT_OCTAVE + raised - lowered
    if not MIN_OCTAVE <= n <= MAX_OCTAVE:
        raise InvalidValueError("too many octave marks: {}".format(repr(octave)))
    return n
