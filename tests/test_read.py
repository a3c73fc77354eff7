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
Test lilyparse.read.
"""

from fractions import Fraction

import pytest

### find lilyparse
import sys
sys.path.insert(0, '.')

import lilyparse
from lilyparse.column import Beam, Chord, Note, Rest, Tuplet
from lilyparse.duration import EIGHTH, HALF, QUARTER, SIXTEENTH, NoteValue
from lilyparse.exceptions import (
    GrammarMismatch, InvalidBeamError, InvalidTupletError, NotationError,
    ParseError, TrailingInput)
from lilyparse.pitch import Pitch
from lilyparse.read import load, parse


def check_error(text, exception, pos=None):
    """Parse text, check the exception type and position, and return it."""
    with pytest.raises(exception) as excinfo:
        parse(text)
    e = excinfo.value
    if pos is not None:
        assert e.pos == pos
    return e


def test_simple():
    assert parse("c4") == Note(QUARTER, Pitch(0))
    assert parse("r8") == Rest(EIGHTH)
    assert parse("cs''8") == Note(EIGHTH, Pitch.from_name('cs', 6))
    assert parse("bf,2") == Note(HALF, Pitch(6, -0.5, 3))
    assert parse("fff4").pitch == Pitch(3, -1)
    assert parse("es4").pitch == Pitch(2, 0.5)
    assert parse("gss1").pitch == Pitch(4, 1)
    assert parse("c,,,,4").pitch.octave == 0
    assert parse("c'''4").pitch.octave == 7
    assert parse("  d16.  ") == Note(NoteValue(4, 1), Pitch(1))
    assert parse("\n[c8 d8]\n") == Beam([Note(EIGHTH, Pitch(0)), Note(EIGHTH, Pitch(1))])

    n = parse("c4..")
    assert n.value == QUARTER.dot().dot()
    assert n.duration == Fraction(7, 16)


def test_chord():
    c = parse("<c e g>4")
    assert isinstance(c, Chord)
    assert c.pitches == (Pitch(0), Pitch(2), Pitch(4))
    assert c.value == QUARTER
    assert parse("<g' c''>2.") == Chord(HALF.dot(), [Pitch(4, 0, 5), Pitch(0, 0, 6)])
    assert parse("< c >8").pitches == (Pitch(0),)


def test_beam():
    b = parse("[c8 d8]")
    assert isinstance(b, Beam)
    assert len(b) == 2
    assert b.duration == Fraction(1, 4)

    b = parse("[[c16 d16] e8]")
    assert isinstance(b[0], Beam)
    assert b.duration == Fraction(1, 4)

    b = parse("[<c e>16 d16]")
    assert isinstance(b[0], Chord)


def test_tuplet():
    t = parse(r"\tuplet 3/2 { c8 d8 e8 }")
    assert isinstance(t, Tuplet)
    assert t.value == QUARTER
    assert t.duration == Fraction(1, 4)
    assert len(t) == 3

    t = parse(r"\tuplet 3/2 {r4 [c8 d8] e4}")
    assert t.value == HALF

    b = parse(r"[c8 \tuplet 3/2 { d16 e16 f16 }]")
    assert b[1].value == EIGHTH
    assert b.duration == Fraction(1, 4)

    e = check_error(r"\tuplet 3/2 { c8 d8 }", InvalidTupletError)
    assert e.outer == Fraction(1, 6)
    e = check_error(r"\tuplet 0/2 { c8 d8 e8 }", InvalidTupletError)
    assert e.outer is None


def test_grammar_mismatch():
    check_error("", GrammarMismatch, 0)
    check_error("   ", GrammarMismatch, 3)
    check_error("q4", GrammarMismatch, 0)
    check_error("c", GrammarMismatch, 1)
    check_error("c''''4", GrammarMismatch, 1)
    check_error("c,,,,,4", GrammarMismatch, 1)
    check_error("c',4", GrammarMismatch, 2)
    check_error("c3", GrammarMismatch)
    check_error("<c e", GrammarMismatch, 0)
    check_error("<>4", GrammarMismatch, 1)
    check_error("<c e>", GrammarMismatch, 5)
    check_error("[c8 d8", GrammarMismatch, 0)
    check_error("[]", GrammarMismatch, 1)
    check_error("r", GrammarMismatch)
    check_error(r"\tuplet { c8 d8 e8 }", GrammarMismatch)
    check_error(r"\tuplet 3/2 c8 d8 e8", GrammarMismatch)

    # running out of input inside a group points at the closing delimiter
    check_error("[c8 d]", GrammarMismatch, 5)
    check_error(r"\tuplet 3/2 {}", GrammarMismatch, 13)

    e = check_error("q4", GrammarMismatch)
    assert e.kind == "GrammarMismatch"
    assert e.text == "q4"
    assert str(e).endswith("(at position 0)")


def test_trailing_input():
    check_error("c4 x", TrailingInput, 3)
    check_error("c4...", TrailingInput, 4)
    check_error("c4 d4", TrailingInput, 3)
    check_error("[c8 d8]]", TrailingInput, 7)

    # input after a complete column is never read
    e = check_error("c4 [c8]", TrailingInput, 3)
    assert e.kind == "TrailingInput"


def test_validation():
    e = check_error("[c8]", InvalidBeamError)
    assert e.reason == "must contain at least two values"
    e = check_error("[r8 c8]", InvalidBeamError)
    assert e.reason == "cannot contain rests"
    e = check_error("[c2 d8]", InvalidBeamError)
    assert e.reason == "cannot hold whole or half notes"
    e = check_error("[[c16 d16]]", InvalidBeamError)
    assert e.reason == "nested beams must contain at least two values"

    # the innermost error is raised
    e = check_error("[c8 [d8] e8]", InvalidBeamError)
    assert e.reason == "must contain at least two values"


def test_errors():
    # all errors share a base class
    for text in ("", "c4 x", "[c8]", r"\tuplet 3/2 { c8 d8 }"):
        with pytest.raises(NotationError):
            parse(text)
    assert issubclass(GrammarMismatch, ParseError)
    assert issubclass(InvalidBeamError, ValueError)


def test_load(tmp_path):
    filename = tmp_path / "music.stan"
    filename.write_text("<c e g>4\n", encoding="utf-8")
    assert load(filename) == Chord(QUARTER, [Pitch(0), Pitch(2), Pitch(4)])
    assert lilyparse.load(filename) == lilyparse.parse("<c e g>4")

    with pytest.raises(OSError):
        load(tmp_path / "missing.stan")


def test_render():
    assert lilyparse.render(parse("[c8 <e g>8.]")) == "[c4:8 <e4 g4>:8.]"
    assert lilyparse.render(parse(r"[c8 \tuplet 3/2 { d16 e16 f16 }]")) \
        == "[c4:8 8:{d4:16 e4:16 f4:16}]"
