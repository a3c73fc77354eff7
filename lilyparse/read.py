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
Read notation from text.

The :func:`parse` function reads one column from the text and returns it,
fully validated. Example::

    >>> from lilyparse import read
    >>> read.parse("<c e g>4")
    <Chord <c4 e4 g4>:4>
    >>> read.parse("[c8 d8]").duration
    Duration(1, 4)

Reading is all or nothing: either a complete column is returned, or an
exception is raised and no partial result is available. The exceptions are:

:class:`~.exceptions.GrammarMismatch`
    when the text does not start with a valid column;

:class:`~.exceptions.TrailingInput`
    when there is text left after a valid column;

:class:`~.exceptions.InvalidBeamError`,
:class:`~.exceptions.InvalidTupletError`, ...
    when the column is well-formed but violates a constraint, like a beam
    with only one element.

"""

import logging

from parce.transform import Transformer

from .exceptions import GrammarMismatch, NotationError, ParseError
from .lang import notation


logger = logging.getLogger(__name__)

_transformer = Transformer()


def parse(text):
    """Return the :class:`~.column.Column` read from ``text``.

    Raises a :class:`~.exceptions.NotationError` subclass if the text is not
    exactly one valid column.

    """
    logger.debug("start parse: %r", text)
    result = _transformer.transform_text(notation.Notation.root, text)
    if result is None:
        result = GrammarMismatch("no input")
    if isinstance(result, NotationError):
        if isinstance(result, ParseError):
            result.text = text
            if result.pos is None:
                result.pos = len(text)
        logger.debug("parse failed: %s", result)
        raise result
    logger.debug("done parse: %r", result)
    return result


def load(filename, encoding=None, errors=None):
    """Read the file ``filename`` and return the column it contains.

    The ``encoding`` defaults to UTF-8; ``encoding`` and ``errors`` are passed
    to Python's :func:`open` function. Raises :class:`OSError` if the file
    can't be read.

    """
    with open(filename, encoding=encoding or "utf-8", errors=errors) as f:
        text = f.read()
    logger.debug("read %d characters from %s", len(text), filename)
    return parse(text)
