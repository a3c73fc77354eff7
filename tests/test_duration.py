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
Test lilyparse.duration.
"""

import itertools
from fractions import Fraction

import pytest

### find lilyparse
import sys
sys.path.insert(0, '.')


from lilyparse.duration import *
from lilyparse.exceptions import DomainError, InvalidTupletError, InvalidValueError


def test_reduce():
    assert reduce(2, 8) == (1, 4)
    assert reduce(0, 5) == (0, 1)
    assert reduce(-6, 4) == (-3, 2)
    assert reduce(7, 16) == (7, 16)

    for n, d in itertools.product(range(-12, 13), range(1, 13)):
        r = reduce(n, d)
        assert reduce(*r) == r
        assert Fraction(*r) == Fraction(n, d)
        assert r[1] > 0

    with pytest.raises(DomainError):
        reduce(1, 0)
    with pytest.raises(DomainError):
        reduce(1, -4)


def test_duration():
    d = Duration(2, 8)
    assert d == Fraction(1, 4)
    assert (d.numerator, d.denominator) == (1, 4)
    assert Duration('3/8') == Duration(3, 8)
    assert Duration.zero() == 0
    assert Duration.zero().denominator == 1

    with pytest.raises(DomainError):
        Duration(1, 0)
    with pytest.raises(DomainError):
        Duration(3, -8)


def test_add():
    q = Duration(1, 4)
    half = q + q
    assert isinstance(half, Duration)
    assert (half.numerator, half.denominator) == (1, 2)
    assert add(q, Duration(1, 6)) == Duration(5, 12)
    assert Duration(1, 4) + 1 == Duration(5, 4)
    assert 1 + Duration(1, 4) == Duration(5, 4)
    assert sum([Duration(1, 8)] * 3, Duration.zero()) == Duration(3, 8)

    values = [Duration(1, 3), Duration(3, 8), Duration(5, 16), Duration(0, 1)]
    for a, b, c in itertools.product(values, repeat=3):
        assert add(a, b) == add(b, a)
        assert add(add(a, b), c) == add(a, add(b, c))
        assert add(a, b) == Fraction(a) + Fraction(b)


def test_strings():
    assert log_dotcount(Fraction(7, 16)) == (2, 2)
    assert log_dotcount(Fraction(3, 4)) == (1, 1)

    assert to_string(1) == "1"
    assert to_string(Fraction(1, 2)) == "2"
    assert to_string(Fraction(3, 8)) == "4."
    assert to_string(Fraction(7, 16)) == "4.."
    assert to_string(Fraction(1, 64)) == "64"
    with pytest.raises(InvalidValueError):
        to_string(2)

    # only exact values with at most two dots
    for value in (Fraction(1, 3), Fraction(15, 32), Fraction(3, 128 * 4), 0, Fraction(-1, 4)):
        with pytest.raises(InvalidValueError):
            to_string(value)

    assert from_string("4") == Fraction(1, 4)
    assert from_string("16") == Fraction(1, 16)
    assert from_string("64.") == Fraction(3, 128)
    assert from_string("8..") == Fraction(7, 32)
    assert from_string("8", dotcount=2) == Fraction(7, 32)
    with pytest.raises(InvalidValueError):
        from_string("3")
    with pytest.raises(InvalidValueError):
        from_string("128")
    with pytest.raises(InvalidValueError):
        from_string("breve")
    with pytest.raises(InvalidValueError):
        from_string("4...")
    with pytest.raises(InvalidValueError):
        from_string("4", dotcount=3)


def test_note_value():
    assert NoteValue.all == (WHOLE, HALF, QUARTER, EIGHTH, SIXTEENTH, THIRTYSECOND, SIXTYFOURTH)
    assert [v.duration for v in NoteValue.all] == [Fraction(1, 2**k) for k in range(7)]
    assert all(v.dots == 0 for v in NoteValue.all)

    assert QUARTER.name == "quarter"
    assert QUARTER.denominator == 4
    assert QUARTER.dot().duration == Fraction(3, 8)
    assert QUARTER.dot().dot().duration == Fraction(7, 16)
    assert NoteValue(2, 2) == QUARTER.dot().dot()
    with pytest.raises(InvalidValueError):
        QUARTER.dot().dot().dot()

    # duration == base * (2 - 1/2**dots)
    for v in NoteValue.all:
        for dots in range(3):
            assert NoteValue(v.log, dots).duration == v.duration * (2 - Fraction(1, 2**dots))

    assert to_duration(QUARTER.dot()) == Duration(3, 8)
    assert isinstance(to_duration(WHOLE), Duration)
    assert NoteValue.from_string("8.") == NoteValue(3, 1)
    assert str(NoteValue(4, 2)) == "16.."
    assert repr(QUARTER) == "<NoteValue 4>"

    # ordered by duration
    assert HALF > QUARTER.dot().dot()
    assert QUARTER.dot() > QUARTER
    assert EIGHTH.dot() < QUARTER
    assert sorted([EIGHTH, WHOLE, QUARTER.dot()]) == [EIGHTH, QUARTER.dot(), WHOLE]
    assert len({QUARTER, NoteValue(2), NoteValue(2, 1)}) == 2

    with pytest.raises(InvalidValueError):
        NoteValue(7)
    with pytest.raises(InvalidValueError):
        NoteValue(-1)
    with pytest.raises(InvalidValueError):
        NoteValue(2, 3)


def test_scale():
    # three eighths in the time of two: a quarter
    assert scale(3, 2, Fraction(3, 8)) == QUARTER
    assert scale(3, 2, QUARTER.dot()) == QUARTER
    assert scale(5, 4, Fraction(5, 16)) == QUARTER

    # no rounding to the nearest value
    with pytest.raises(InvalidTupletError) as excinfo:
        scale(3, 2, Fraction(1, 4))
    e = excinfo.value
    assert (e.num, e.den) == (3, 2)
    assert e.inner == Fraction(1, 4)
    assert e.outer == Fraction(1, 6)
    assert "1/6" in str(e)

    # dotted results are no table entries
    with pytest.raises(InvalidTupletError):
        scale(2, 3, Fraction(1, 4))

    # the ratio must be positive
    for num, den in ((0, 2), (3, 0), (-3, 2)):
        with pytest.raises(InvalidTupletError) as excinfo:
            scale(num, den, Fraction(3, 8))
        assert excinfo.value.outer is None
        assert "must be positive" in str(excinfo.value)
