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


r"""
Notation language and transform definition.

The :class:`Notation` language recognizes a single column written in a
LilyPond-like syntax::

    column  :=  rest | note | chord | beam | tuplet
    rest    :=  'r' value
    note    :=  pitch value
    chord   :=  '<' pitch+ '>' value
    beam    :=  '[' column+ ']'
    tuplet  :=  '\tuplet' num '/' den '{' column+ '}'
    pitch   :=  ('a' .. 'g') ('ff' | 'f' | 's' | 'ss')? ("'"{1,3} | ","{1,4})?
    value   :=  ('1' | '2' | '4' | '8' | '16' | '32' | '64') '.'{0,2}

Whitespace between tokens is ignored. The lexicons only split the text into
tokens and nested chord, beam and tuplet contexts; the
:class:`NotationTransform` reads the columns from those, using a
:class:`MusicReader`.

A chord, beam or tuplet context is transformed into a :class:`Group` tuple,
holding either its contents or the error that occurred while reading them.
The error is only raised when the group is actually consumed as part of the
column, so the result of a parse is always the outcome of reading the text
from left to right: the first column that fails raises its error, and input
after a complete column raises :class:`~.exceptions.TrailingInput`, whatever
it contains.

"""

import collections

from parce import Language, default_action, lexicon, skip
from parce.transform import Transform
from parce.util import Dispatcher
import parce.action as a

from ..column import Beam, Chord, Note, Rest, Tuplet
from ..duration import MAX_DOTS, NoteValue
from ..exceptions import GrammarMismatch, InvalidValueError, NotationError, TrailingInput
from ..pitch import DEFAULT_OCTAVE, Pitch, octave_from_string


#: The result of a chord, beam or tuplet context: the position of the opening
#: delimiter and the contents, or the exception that prevented reading them.
Group = collections.namedtuple("Group", "pos result")
Group.pos.__doc__ = "The position of the opening delimiter."
Group.result.__doc__ = "The contents of the context or an exception."


class Notation(Language):
    """Notation language definition."""
    @lexicon
    def root(cls):
        yield from cls.music()

    @classmethod
    def music(cls):
        """Everything that can appear where a column is expected."""
        yield r'\s+', skip
        yield r'\\tuplet(?![A-Za-z])', a.Name.Builtin.Tuplet
        yield r'\d+\s*/\s*\d+', a.Number.Fraction
        yield r'64|32|16|8|4|2|1', a.Number.Duration
        yield r'\.', a.Number.Duration.Dot
        yield r'r', a.Text.Music.Rest
        yield from cls.pitch()
        yield r'<', a.Delimiter.Chord.Start, cls.chord
        yield r'\[', a.Delimiter.Beam.Start, cls.beam
        yield r'\{', a.Delimiter.Tuplet.Start, cls.tuplet
        yield default_action, a.Invalid

    @classmethod
    def pitch(cls):
        """A pitch name and the octave marks."""
        yield r'[a-g](?:ff?|ss?)?', a.Text.Music.Pitch
        yield r"'+|,+", a.Text.Music.Pitch.Octave

    @lexicon(consume=True)
    def chord(cls):
        """Pitches between ``<`` and ``>``."""
        yield r'>', a.Delimiter.Chord.End, -1
        yield r'\s+', skip
        yield from cls.pitch()
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def beam(cls):
        """Columns between ``[`` and ``]``."""
        yield r'\]', a.Delimiter.Beam.End, -1
        yield from cls.music()

    @lexicon(consume=True)
    def tuplet(cls):
        """Columns between ``{`` and ``}``."""
        yield r'\}', a.Delimiter.Tuplet.End, -1
        yield from cls.music()


class NotationTransform(Transform):
    """Transform Notation to a :class:`~.column.Column`.

    The ``root`` context yields a Column or, if the text could not be read,
    the exception that should be raised. The :func:`~.read.parse` function
    raises that exception.

    """
    def root(self, items):
        """Read exactly one column."""
        reader = MusicReader(items)
        try:
            column = reader.read_column()
            reader.check_end()
        except NotationError as e:
            return e
        return column

    def chord(self, items):
        """A Group with the list of pitches."""
        return self.group(items, '>', MusicReader.read_pitches)

    def beam(self, items):
        """A Group with the validated Beam."""
        return self.group(items, ']', lambda reader: Beam(reader.read_columns()))

    def tuplet(self, items):
        """A Group with the list of columns; the Tuplet needs the ratio."""
        return self.group(items, '}', MusicReader.read_columns)

    def group(self, items, end, read):
        """Return a Group, calling ``read`` with a MusicReader for the contents.

        The first item is the opening delimiter. If the context is not closed
        with the ``end`` token, the result is a GrammarMismatch.

        """
        pos = items[0].pos
        if items[-1] != end:
            return Group(pos, GrammarMismatch("missing {}".format(repr(end)), pos))
        try:
            result = read(MusicReader(items[1:-1], items[-1].pos))
        except NotationError as e:
            result = e
        return Group(pos, result)


class MusicReader:
    """Helper class that reads columns from the items of a context.

    Tokens are dispatched on their action and chord, beam or tuplet contexts
    on their name. When the items do not match the grammar, a
    :class:`~.exceptions.GrammarMismatch` is raised; validation errors of the
    created columns propagate unchanged.

    The ``end`` position is used for errors that occur when the items run
    out.

    """
    _token = Dispatcher()
    _context = Dispatcher()

    def __init__(self, items, end=None):
        self.items = list(items)
        self.index = 0
        self.end = end

    def peek(self):
        """Return the current item, or None at the end."""
        if self.index < len(self.items):
            return self.items[self.index]

    def at_end(self):
        """Return True if all items have been read."""
        return self.index >= len(self.items)

    def accept(self, action):
        """Return and consume the current item if it is a token with ``action``."""
        item = self.peek()
        if item is not None and item.is_token and item.action is action:
            self.index += 1
            return item

    def mismatch(self, message):
        """Return a GrammarMismatch at the current item.

        When all items have been read, the position is the end of the items,
        i.e. the closing delimiter of a context or None for the root.

        """
        item = self.peek()
        pos = self.end if item is None else self.position(item)
        return GrammarMismatch(message, pos)

    @staticmethod
    def position(item):
        """Return the text position of the item, None for no item."""
        if item is None:
            return None
        elif item.is_token:
            return item.pos
        elif isinstance(item.obj, Group):
            return item.obj.pos

    def check_end(self):
        """Raise TrailingInput if there are items left."""
        if not self.at_end():
            raise TrailingInput("unexpected input after column", self.position(self.peek()))

    def read_column(self):
        """Read and return one Column."""
        item = self.peek()
        if item is None:
            meth = None
        elif item.is_token:
            meth = self._token.get(item.action)
        else:
            meth = self._context.get(item.name)
        if not meth:
            raise self.mismatch("expected a rest, note, chord, beam or tuplet")
        self.index += 1
        return meth(item)

    def read_columns(self):
        """Read one or more columns, up to the end."""
        columns = [self.read_column()]
        while not self.at_end():
            columns.append(self.read_column())
        return columns

    def read_pitch(self, token=None):
        """Read a pitch name with its octave marks and return a Pitch.

        If the pitch name ``token`` is given, it has already been consumed.

        """
        if token is None:
            token = self.accept(a.Text.Music.Pitch)
            if not token:
                raise self.mismatch("expected a pitch")
        octave = DEFAULT_OCTAVE
        marks = self.peek()
        if self.accept(a.Text.Music.Pitch.Octave):
            try:
                octave = octave_from_string(marks.text)
            except InvalidValueError as e:
                raise GrammarMismatch(str(e), marks.pos) from None
        return Pitch.from_name(token.text, octave)

    def read_pitches(self):
        """Read one or more pitches, up to the end."""
        pitches = [self.read_pitch()]
        while not self.at_end():
            pitches.append(self.read_pitch())
        return pitches

    def read_value(self):
        """Read a duration with up to two dots and return a NoteValue."""
        token = self.accept(a.Number.Duration)
        if not token:
            raise self.mismatch("expected a duration")
        value = NoteValue.from_string(token.text)
        for i in range(MAX_DOTS):
            if not self.accept(a.Number.Duration.Dot):
                break
            value = value.dot()
        return value

    def read_group(self, item):
        """Return the contents of the Group in a context item.

        Raises the exception the group holds instead of contents.

        """
        result = item.obj.result
        if isinstance(result, Exception):
            raise result
        return result

    @_token(a.Text.Music.Rest)
    def rest(self, token):
        """A rest: ``r`` and a value."""
        return Rest(self.read_value())

    @_token(a.Text.Music.Pitch)
    def note(self, token):
        """A note: a pitch and a value."""
        pitch = self.read_pitch(token)
        return Note(self.read_value(), pitch)

    @_token(a.Name.Builtin.Tuplet)
    def tuplet(self, token):
        r"""A tuplet: ``\tuplet``, a fraction and the columns between braces."""
        fraction = self.accept(a.Number.Fraction)
        if not fraction:
            raise self.mismatch("expected a fraction")
        item = self.peek()
        if item is None or item.is_token or item.name != "tuplet":
            raise self.mismatch("expected '{'")
        self.index += 1
        columns = self.read_group(item)
        num, den = map(int, fraction.text.split('/'))
        return Tuplet.from_ratio(num, den, columns)

    @_context("chord")
    def chord(self, item):
        """A chord: the pitches and a value."""
        pitches = self.read_group(item)
        return Chord(self.read_value(), pitches)

    @_context("beam")
    def beam(self, item):
        """A beam: the Beam was already created by the transform."""
        return self.read_group(item)
