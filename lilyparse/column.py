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
The notation data model: rests, notes, chords, beams and tuplets.

Every element that occupies rhythmic time is a :class:`Column`. There are
five kinds of columns, distinguished by their ``kind`` attribute:

* :class:`Rest`: a rest with a note value
* :class:`Note`: a pitch with a note value
* :class:`Chord`: one or more pitches sharing a note value
* :class:`Beam`: a group of columns that are beamed together
* :class:`Tuplet`: a group of columns with a value derived from a ratio

A Beam and a Tuplet own a tuple of child columns, so columns form a tree.

All columns are immutable and are validated when they are created; it is not
possible to construct a column that violates its invariants. For example::

    >>> from lilyparse.column import Beam, Note, Rest
    >>> from lilyparse.duration import EIGHTH, QUARTER
    >>> from lilyparse.pitch import Pitch
    >>> Beam([Note(EIGHTH, Pitch(0)), Note(EIGHTH, Pitch(1))]).duration
    Duration(1, 4)
    >>> Beam([Rest(QUARTER)])
    Traceback (most recent call last):
     ...
    lilyparse.exceptions.InvalidBeamError: invalid beam: cannot contain rests

"""

import functools

from parce.util import Dispatcher

from .duration import QUARTER, Duration, NoteValue, add, scale
from .exceptions import InvalidBeamError, InvalidValueError
from .pitch import Pitch


def _check_value(value):
    """Raise InvalidValueError if value is not a NoteValue."""
    if not isinstance(value, NoteValue):
        raise InvalidValueError("not a NoteValue: {}".format(repr(value)))


def _check_pitch(pitch):
    """Raise InvalidValueError if pitch is not a Pitch."""
    if not isinstance(pitch, Pitch):
        raise InvalidValueError("not a Pitch: {}".format(repr(pitch)))


class Column:
    """Base class for everything that occupies rhythmic time.

    Columns compare equal when they are of the same kind and have equal
    contents; groups compare their elements in order.

    """
    __slots__ = ()

    #: The kind of column: ``"rest"``, ``"note"``, ``"chord"``, ``"beam"`` or
    #: ``"tuplet"``.
    kind = None

    @property
    def duration(self):
        """The :class:`~.duration.Duration` of this column."""
        raise NotImplementedError

    def copy(self):
        """Return a deep copy of this column."""
        raise NotImplementedError

    def _as_tuple(self):
        """Return our contents as a tuple, for comparison and hashing."""
        raise NotImplementedError

    def __eq__(self, other):
        if isinstance(other, Column):
            return type(self) is type(other) and self._as_tuple() == other._as_tuple()
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, Column):
            return type(self) is not type(other) or self._as_tuple() != other._as_tuple()
        return NotImplemented

    def __hash__(self):
        return hash((self.kind, self._as_tuple()))

    def __repr__(self):
        from .writer import render
        return "<{} {}>".format(self.__class__.__name__, render(self))


class Rest(Column):
    """A rest with a :class:`~.duration.NoteValue`.

    Raises an :class:`~.exceptions.InvalidValueError` if the value is not a
    NoteValue.

    """
    __slots__ = ('_value',)
    kind = "rest"

    def __init__(self, value):
        _check_value(value)
        self._value = value

    @property
    def value(self):
        """The note value."""
        return self._value

    @property
    def duration(self):
        """The duration of the note value."""
        return self._value.duration

    def copy(self):
        return type(self)(self._value)

    def _as_tuple(self):
        return (self._value,)


class Note(Column):
    """A :class:`~.pitch.Pitch` with a :class:`~.duration.NoteValue`."""
    __slots__ = ('_value', '_pitch')
    kind = "note"

    def __init__(self, value, pitch):
        _check_value(value)
        _check_pitch(pitch)
        self._value = value
        self._pitch = pitch

    @property
    def value(self):
        """The note value."""
        return self._value

    @property
    def pitch(self):
        """The pitch."""
        return self._pitch

    @property
    def duration(self):
        """The duration of the note value."""
        return self._value.duration

    def copy(self):
        return type(self)(self._value, self._pitch)

    def _as_tuple(self):
        return (self._value, self._pitch)


class Chord(Column):
    """One or more pitches sharing one :class:`~.duration.NoteValue`.

    The pitches keep the order in which they were given. Raises an
    :class:`~.exceptions.InvalidValueError` if there are no pitches, or if
    the value or a pitch has the wrong type.

    """
    __slots__ = ('_value', '_pitches')
    kind = "chord"

    def __init__(self, value, pitches):
        pitches = tuple(pitches)
        if not pitches:
            raise InvalidValueError("chord must contain at least one pitch")
        _check_value(value)
        for p in pitches:
            _check_pitch(p)
        self._value = value
        self._pitches = pitches

    @property
    def value(self):
        """The note value."""
        return self._value

    @property
    def pitches(self):
        """The tuple of pitches."""
        return self._pitches

    @property
    def duration(self):
        """The duration of the note value."""
        return self._value.duration

    def copy(self):
        return type(self)(self._value, self._pitches)

    def _as_tuple(self):
        return (self._value, self._pitches)


class Group(Column):
    """Base class for columns that contain other columns.

    The elements are accessible via the ``elements`` attribute, but also by
    iterating over the group or indexing it. Raises a :obj:`TypeError` if an
    element is not a :class:`Column`.

    """
    __slots__ = ('_elements',)

    def __init__(self, elements):
        elements = tuple(elements)
        for e in elements:
            if not isinstance(e, Column):
                raise TypeError("not a Column: {}".format(repr(e)))
        self._elements = elements

    @property
    def elements(self):
        """The tuple of child columns."""
        return self._elements

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def copied_elements(self):
        """Return a tuple with a deep copy of every child column."""
        return tuple(e.copy() for e in self._elements)


def total_duration(columns):
    """Return the sum of the durations of all columns, as a Duration."""
    return functools.reduce(add, (c.duration for c in columns), Duration.zero())


class Tuplet(Group):
    """A group of columns with a note value derived from a ratio.

    The ``value`` must be one of the undotted values in
    :attr:`NoteValue.all <.duration.NoteValue>`. A tuplet must contain at
    least two elements. Both violations raise an
    :class:`~.exceptions.InvalidValueError`.

    Use :meth:`from_ratio` to compute the value from a ratio like 3/2 (three
    notes in the time of two).

    """
    __slots__ = ('_value',)
    kind = "tuplet"

    def __init__(self, value, elements):
        super().__init__(elements)
        self._check_arity(self._elements)
        if value not in NoteValue.all:
            raise InvalidValueError(
                "tuplet value must be an undotted note value, got {}".format(value))
        self._value = value

    @staticmethod
    def _check_arity(elements):
        if len(elements) < 2:
            raise InvalidValueError("tuplet must contain at least two elements")

    @classmethod
    def from_ratio(cls, num, den, elements):
        """Return a Tuplet with ``num`` elements in the time of ``den``.

        The value is computed by :func:`~.duration.scale` from the total
        duration of the elements, and an
        :class:`~.exceptions.InvalidTupletError` is raised if that does not
        yield a valid note value. For example::

            >>> t = Tuplet.from_ratio(3, 2, [Note(EIGHTH, Pitch(n)) for n in range(3)])
            >>> t.value
            <NoteValue 4>

        """
        elements = tuple(elements)
        cls._check_arity(elements)
        return cls(scale(num, den, total_duration(elements)), elements)

    @property
    def value(self):
        """The note value."""
        return self._value

    @property
    def duration(self):
        """The duration of the note value (not of the contents)."""
        return self._value.duration

    def copy(self):
        return type(self)(self._value, self.copied_elements())

    def _as_tuple(self):
        return (self._value, self._elements)


class Beam(Group):
    """A group of columns that are beamed together.

    A beam has no note value of its own; its duration is the sum of the
    durations of its elements. The elements are checked on construction and
    an :class:`~.exceptions.InvalidBeamError` is raised when:

    * an element is a rest,
    * a note or chord is longer than a quarter note,
    * a tuplet has a value longer than a quarter note,
    * there are fewer than two elements.

    """
    __slots__ = ()
    kind = "beam"

    def __init__(self, elements):
        super().__init__(elements)
        count = len(self._elements)
        if not count:
            raise InvalidBeamError("must contain at least two values")
        for e in self._elements:
            reason = self._reason(e.kind, e, count)
            if reason:
                raise InvalidBeamError(reason)

    _reason = Dispatcher()

    @_reason("rest")
    def _rest_reason(self, rest, count):
        return "cannot contain rests"

    @_reason("note", "chord")
    def _note_reason(self, note, count):
        if note.value > QUARTER:
            return "cannot hold whole or half notes"
        if count < 2:
            return "must contain at least two values"

    @_reason("beam")
    def _beam_reason(self, beam, count):
        if count < 2:
            return "nested beams must contain at least two values"

    @_reason("tuplet")
    def _tuplet_reason(self, tuplet, count):
        if tuplet.value > QUARTER:
            return "cannot hold whole or half note tuplets"
        if count < 2:
            return "must contain at least two values"

    @property
    def duration(self):
        """The sum of the durations of the elements."""
        return total_duration(self._elements)

    def copy(self):
        return type(self)(self.copied_elements())

    def _as_tuple(self):
        return (self._elements,)


def duration_of(column):
    """Return the :class:`~.duration.Duration` of the column.

    Rests, notes, chords and tuplets return the duration of their value; a
    beam returns the sum of the durations of its elements.

    """
    return column.duration
