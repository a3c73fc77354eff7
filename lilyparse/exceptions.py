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
Exceptions raised by lilyparse.

All exceptions inherit from :class:`NotationError`. The validation errors also
inherit from :class:`ValueError`, because they are raised when a value is
constructed from invalid arguments.

"""


class NotationError(Exception):
    """Base class for all lilyparse errors."""


class DomainError(NotationError, ValueError):
    """Raised when a rational number would get a zero or negative denominator."""


class InvalidValueError(NotationError, ValueError):
    """Raised when a value or group has invalid contents or arity."""


class InvalidBeamError(NotationError, ValueError):
    """Raised when a Beam would contain elements it can't hold.

    The ``reason`` attribute contains the human-readable rule that was
    violated, e.g. ``"cannot contain rests"``.

    """
    def __init__(self, reason):
        super().__init__("invalid beam: {}".format(reason))
        self.reason = reason


class InvalidTupletError(NotationError, ValueError):
    """Raised when a tuplet ratio does not yield a valid note value.

    The ``num`` and ``den`` attributes contain the ratio, ``inner`` the
    duration of the tuplet contents and ``outer`` the computed duration that
    did not match any note value. The ``outer`` is None when the ratio itself
    is invalid, i.e. not positive.

    """
    def __init__(self, num, den, inner, outer=None):
        if outer is None:
            message = "tuplet ratio {}/{} must be positive".format(num, den)
        else:
            message = "duration ({}/{}:{{{}/{}}} = {}/{}) must equal a valid value".format(
                num, den, inner.numerator, inner.denominator,
                outer.numerator, outer.denominator)
        super().__init__(message)
        self.num = num
        self.den = den
        self.inner = inner
        self.outer = outer


class ParseError(NotationError):
    """Base class for errors raised when reading text.

    The ``pos`` attribute is the position in the text where the error was
    detected, and ``text`` the text that was read (both may be None).

    """
    kind = None

    def __init__(self, message, pos=None, text=None):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.text = text

    def __str__(self):
        if self.pos is None:
            return self.message
        return "{} (at position {})".format(self.message, self.pos)


class GrammarMismatch(ParseError):
    """Raised when the text does not match the notation grammar."""
    kind = "GrammarMismatch"


class TrailingInput(ParseError):
    """Raised when text remains after a complete column was read."""
    kind = "TrailingInput"
