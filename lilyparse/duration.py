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
Functions and classes to deal with musical durations.

A duration is an exact rational number, where a whole note is 1. This module
uses Python's :class:`~fractions.Fraction` as the rational type, and defines
:class:`Duration`, a Fraction that can only be created with a positive
denominator and that stays a Duration when added to another duration.

A note value is one of the seven base lengths (whole note to 64th note) with
zero, one or two augmentation dots. A value can be split in two numbers, log
and dot-count, where the log is 0 for a whole note, 1 for a half note, 2 for
a crotchet, etc. This is the same way LilyPond handles durations.

"""

import fractions
import math

from .exceptions import DomainError, InvalidTupletError, InvalidValueError


#: The names of the base note values, indexed by their log.
BASE_NAMES = (
    'whole', 'half', 'quarter', 'eighth', 'sixteenth', 'thirtysecond', 'sixtyfourth',
)

#: The maximum number of augmentation dots a note value can have.
MAX_DOTS = 2


def reduce(numerator, denominator):
    """Return the two-tuple (numerator, denominator) in lowest terms.

    Raises :class:`~.exceptions.DomainError` if the denominator is zero or
    negative. For example::

        >>> reduce(2, 8)
        (1, 4)
        >>> reduce(0, 5)
        (0, 1)
        >>> reduce(-6, 4)
        (-3, 2)

    """
    if denominator <= 0:
        raise DomainError("denominator must be positive, got {}".format(denominator))
    gcd = math.gcd(abs(numerator), denominator)     # gcd(0, d) == d
    return numerator // gcd, denominator // gcd


def add(a, b):
    """Return the sum of the rationals ``a`` and ``b`` as a :class:`Duration`.

    The numerators are brought to the least common multiple of both
    denominators before they are added; the result is reduced again::

        >>> add(Duration(1, 4), Duration(1, 4))
        Duration(1, 2)
        >>> add(Duration(1, 4), Duration(1, 6))
        Duration(5, 12)

    """
    den = a.denominator * b.denominator // math.gcd(a.denominator, b.denominator)
    num = a.numerator * (den // a.denominator) + b.numerator * (den // b.denominator)
    return Duration(num, den)


class Duration(fractions.Fraction):
    """An exact duration, where a whole note is 1.

    A Duration can be created from a numerator and a positive denominator, or
    from any single value :class:`~fractions.Fraction` accepts::

        >>> Duration(2, 8)
        Duration(1, 4)
        >>> Duration('3/8')
        Duration(3, 8)
        >>> Duration(1, 0)
        Traceback (most recent call last):
         ...
        lilyparse.exceptions.DomainError: denominator must be positive, got 0

    """
    __slots__ = ()

    def __new__(cls, numerator=0, denominator=None):
        if denominator is None:
            value = fractions.Fraction(numerator)
            numerator, denominator = value.numerator, value.denominator
        numerator, denominator = reduce(numerator, denominator)
        return super().__new__(cls, numerator, denominator)

    @classmethod
    def zero(cls):
        """Return the empty duration, 0/1."""
        return cls(0, 1)

    def __add__(self, other):
        if isinstance(other, (int, fractions.Fraction)):
            return add(self, other)
        return NotImplemented

    __radd__ = __add__


def log_dotcount(value):
    r"""Return the integer two-tuple (log, dotcount) for the duration value.

    The ``value`` may be a Fraction, integer or floating point value.

    The returned log is 0 for a whole note, 1 for a half note, 2 for a
    crotchet, etc. For example::

        >>> log_dotcount(1)
        (0, 0)
        >>> log_dotcount(Fraction(1, 2))
        (1, 0)
        >>> log_dotcount(Fraction(3, 8))
        (2, 1)
        >>> log_dotcount(Fraction(7, 16))
        (2, 2)

    The value is truncated to a duration that can be expressed by a note length
    and a number of dots.

    """
    mantisse, exponent = math.frexp(value)
    dotcount = int(-1 - math.log2(1 - mantisse))
    log = 1 - exponent
    return log, dotcount


def duration(log, dotcount=0):
    r"""Return the duration as a :class:`Duration`.

    See for an explanation of the ``log`` and ``dotcount`` values
    :func:`log_dotcount`. Every dot adds half of the length the previous dot
    (or the base value) added, so the result equals
    ``base * (2 - 1/2**dotcount)``.

    """
    numer = ((2 << dotcount) - 1) << 3
    denom = 1 << (dotcount + log + 3)
    return Duration(numer, denom)


def to_string(value):
    r"""Convert the value (most times a Fraction) to a LilyPond string notation.

    For example::

        >>> to_string(Fraction(3, 8))
        '4.'
        >>> to_string(1)
        '1'

    Raises an :class:`~.exceptions.InvalidValueError` if the duration can't
    be written exactly as one of the base values with at most
    :data:`MAX_DOTS` dots; no rounding is done.

    """
    log, dotcount = log_dotcount(value) if value > 0 else (-1, 0)
    if (not 0 <= log < len(BASE_NAMES) or not 0 <= dotcount <= MAX_DOTS
            or duration(log, dotcount) != value):
        raise InvalidValueError("no note value for duration {}".format(value))
    return '{}{}'.format(1 << log, '.' * dotcount)


def from_string(text, dotcount=None):
    r"""Convert a LilyPond duration string (e.g. ``'4.'``) to a Duration.

    If ``dotcount`` is None, the dots are expected to be in the ``text``.

    For example::

        >>> from_string('8')
        Duration(1, 8)
        >>> from_string('8..')
        Duration(7, 32)
        >>> from_string('8', dotcount=2)
        Duration(7, 32)

    Raises an :class:`~.exceptions.InvalidValueError` if an invalid duration
    is specified.

    """
    log, dots = _log_dots_from_string(text, dotcount)
    return duration(log, dots)


def _log_dots_from_string(text, dotcount=None):
    """Return the (log, dotcount) tuple for a duration string."""
    if dotcount is None:
        dotcount = text.count('.')
    text = text.strip(' \t.')
    try:
        number = int(text)
    except ValueError:
        raise InvalidValueError("invalid duration: {}".format(repr(text))) from None
    log = number.bit_length() - 1
    if number <= 0 or 1 << log != number or log >= len(BASE_NAMES):
        raise InvalidValueError("invalid duration: {}".format(repr(text)))
    if not 0 <= dotcount <= MAX_DOTS:
        raise InvalidValueError(
            "a note value can have at most {} dots, got {}".format(MAX_DOTS, dotcount))
    return log, dotcount


class NoteValue:
    """A note value: a base length and zero, one or two augmentation dots.

    The ``log`` is 0 for a whole note up to 6 for a 64th note, ``dots`` is
    the number of dots. Invalid arguments raise an
    :class:`~.exceptions.InvalidValueError`.

    Note values are immutable and hashable. They compare equal when log and
    dots are the same, and are ordered by their duration::

        >>> NoteValue(2, 1)
        <NoteValue 4.>
        >>> NoteValue(2, 1).duration
        Duration(3, 8)
        >>> NoteValue(1) > NoteValue(2, 2)
        True

    """
    __slots__ = ('_log', '_dots')

    def __init__(self, log, dots=0):
        if not 0 <= log < len(BASE_NAMES):
            raise InvalidValueError("invalid note value log: {}".format(log))
        if not 0 <= dots <= MAX_DOTS:
            raise InvalidValueError(
                "a note value can have at most {} dots, got {}".format(MAX_DOTS, dots))
        self._log = log
        self._dots = dots

    @classmethod
    def from_string(cls, text):
        """Return a NoteValue from a LilyPond duration string like ``'8.'``."""
        return cls(*_log_dots_from_string(text))

    @property
    def log(self):
        """The base value: 0 for a whole note, 1 for a half note, etc."""
        return self._log

    @property
    def dots(self):
        """The number of augmentation dots (0, 1 or 2)."""
        return self._dots

    @property
    def name(self):
        """The name of the base value, e.g. ``'quarter'``."""
        return BASE_NAMES[self._log]

    @property
    def denominator(self):
        """The number written for the base value, e.g. 4 for a quarter note."""
        return 1 << self._log

    @property
    def duration(self):
        """The :class:`Duration` of this value, including the dots."""
        return duration(self._log, self._dots)

    def dot(self):
        """Return a new NoteValue with one more dot."""
        return type(self)(self._log, self._dots + 1)

    def __format__(self, format_spec):
        return format('{}{}'.format(self.denominator, '.' * self._dots), format_spec)

    def __str__(self):
        return format(self)

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__, self)

    def __hash__(self):
        return hash((self._log, self._dots))

    def __eq__(self, other):
        if isinstance(other, NoteValue):
            return (self._log, self._dots) == (other._log, other._dots)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, NoteValue):
            return (self._log, self._dots) != (other._log, other._dots)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, NoteValue):
            return self.duration > other.duration
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, NoteValue):
            return self.duration < other.duration
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, NoteValue):
            return self.duration >= other.duration
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, NoteValue):
            return self.duration <= other.duration
        return NotImplemented


#: All base note values, without dots, from whole to 64th note.
NoteValue.all = tuple(NoteValue(log) for log in range(len(BASE_NAMES)))

WHOLE, HALF, QUARTER, EIGHTH, SIXTEENTH, THIRTYSECOND, SIXTYFOURTH = NoteValue.all


def to_duration(value):
    """Return the :class:`Duration` of the :class:`NoteValue`."""
    return duration(value.log, value.dots)


def scale(num, den, inner):
    """Return the NoteValue a tuplet with ratio ``num``/``den`` gets.

    The ``inner`` duration is the total duration of the tuplet's contents (a
    :class:`~fractions.Fraction` or a :class:`NoteValue`). The outer duration
    is ``inner * den / num``, and must exactly equal one of the values in
    :attr:`NoteValue.all`; otherwise an
    :class:`~.exceptions.InvalidTupletError` is raised. A ratio with a zero
    or negative number raises it as well. For example, three eighth notes in
    the time of two::

        >>> scale(3, 2, Fraction(3, 8))
        <NoteValue 4>

    """
    if isinstance(inner, NoteValue):
        inner = inner.duration
    if num <= 0 or den <= 0:
        raise InvalidTupletError(num, den, inner)
    outer = Duration(inner.numerator * den, inner.denominator * num)
    for value in NoteValue.all:
        if value.duration == outer:
            return value
    raise InvalidTupletError(num, den, inner, outer)
