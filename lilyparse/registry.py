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
The registry of the notation language.

The :data:`registry` is a :class:`parce.registry.Registry` that knows the
:class:`~.lang.notation.Notation` language under the name ``"Notation"`` and
the aliases ``"lilyparse"`` and ``"stan"``, and files ending in ``.stan``::

    >>> from lilyparse.registry import find
    >>> find("stan")
    Notation.root
    >>> find(filename="song.stan")
    Notation.root

"""

import parce.registry


#: The lexicon name of the root lexicon of the notation language.
NOTATION = "lilyparse.lang.notation.Notation.root"

registry = parce.registry.Registry()

registry.register(NOTATION,
    name = "Notation",
    desc = "LilyPond-like notation of rests, notes, chords, beams and tuplets",
    aliases = ["lilyparse", "stan"],
    filenames = [("*.stan", 1)],
)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Return the root lexicon for the language ``name``, or guess it.

    Without a name, the lexicon is guessed from the ``filename``,
    ``mimetype`` and ``contents``. Our own registry is searched first, then
    the languages bundled with :mod:`parce` (see :func:`parce.find`). Returns
    None if nothing is found.

    """
    if name:
        lexicon_name = registry.find(name)
    else:
        lexicon_name = next(iter(registry.suggest(filename, mimetype, contents)), None)
    if lexicon_name:
        return parce.registry.root_lexicon(lexicon_name)
    return parce.find(name, filename=filename, mimetype=mimetype, contents=contents)
