# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Escaping of PO string literals

PO strings use C escape sequences. Decoding is lenient: unknown
sequences stay in the string as they are.
"""
from __future__ import annotations

import re

_unescapes = {
    "a": "\x07",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
}

# newline is not in here, serialized strings get split at newlines first
_escapes = {
    "\x07": r"\a",
    "\b": r"\b",
    "\t": r"\t",
    "\v": r"\v",
    "\f": r"\f",
    "\r": r"\r",
    '"': r"\"",
    "\\": r"\\",
}

_re_escape_sequence = re.compile(
    r"""\\(?:(?P<oct>[0-7]{3})|x(?P<hex>[0-9a-fA-F]{2})|(?P<char>[abtnvfr'"\\?]))"""
)
_re_special = re.compile("[\x07\b\t\v\f\r\"\\\\]")
# everything up to the opening quote, and the closing quote
_re_quotes = re.compile(r'^[^"]*"|"$')


def _unescape_match(m: re.Match[str]) -> str:
    if m.group("oct"):
        return chr(int(m.group("oct"), 8))
    if m.group("hex"):
        return chr(int(m.group("hex"), 16))
    char = m.group("char")
    return _unescapes.get(char, char)


def unescape(literal: str) -> str:
    return _re_escape_sequence.sub(_unescape_match, literal)


def escape(raw: str) -> str:
    return _re_special.sub(lambda m: _escapes[m.group(0)], raw)


def extract(line: str) -> str:
    """Get the decoded string content of a keyword or continuation line.

    `msgstr[1] "a\\tb"` gives `a<TAB>b`, as does `"a\\tb"`.
    """
    return unescape(_re_quotes.sub("", line.strip()))
