# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Gettext PO(T) parser

Parses gettext po and pot files into a Catalog.

The parser is line based. Each line gets classified by its prefix,
and an EntryAssembler collects the lines into entries. Comment lines
and the `msgid` and `msgctxt` keywords start a new entry, string
continuation lines extend the field opened last.

Content that doesn't make sense is ignored, parsing doesn't fail.
"""
from __future__ import annotations

import enum
import re
from typing import Dict, NamedTuple, Optional, Tuple

from .elements import Catalog, Entry
from .escape import extract
from .header import parse_header, split_header


class LineKind(enum.Enum):
    REFERENCE = "#:"
    FLAGS = "#,"
    COMMENT = "#"
    EXTRACTED_COMMENT = "#."
    MSGID_PLURAL = "msgid_plural"
    MSGID = "msgid"
    MSGSTR = "msgstr"
    MSGCTXT = "msgctxt"
    CONTINUATION = '"'
    BLANK = ""


class Field(enum.Enum):
    NONE = None
    MSGCTXT = "msgctxt"
    MSGID = "msgid"
    MSGID_PLURAL = "msgid_plural"
    MSGSTR = "msgstr"


class Line(NamedTuple):
    kind: LineKind
    text: str
    index: int = 0
    obsolete: bool = False


class Transition(NamedTuple):
    # finish the pending entry before handling the line
    finish: bool
    opens: Optional[Field]


TRANSITIONS: Dict[LineKind, Transition] = {
    LineKind.REFERENCE: Transition(True, None),
    LineKind.FLAGS: Transition(True, None),
    LineKind.COMMENT: Transition(True, None),
    LineKind.EXTRACTED_COMMENT: Transition(True, None),
    LineKind.MSGID_PLURAL: Transition(False, Field.MSGID_PLURAL),
    LineKind.MSGID: Transition(True, Field.MSGID),
    LineKind.MSGSTR: Transition(False, Field.MSGSTR),
    LineKind.MSGCTXT: Transition(True, Field.MSGCTXT),
    LineKind.CONTINUATION: Transition(False, None),
    LineKind.BLANK: Transition(False, None),
}

# Checked in order, `msgid_plural` before its prefix `msgid`.
# A translator comment is a `#` on its own or followed by white-space.
_prefixes: Tuple[Tuple[re.Pattern[str], LineKind], ...] = (
    (re.compile(r"^#:"), LineKind.REFERENCE),
    (re.compile(r"^#,"), LineKind.FLAGS),
    (re.compile(r"^#(?:$|\s+)"), LineKind.COMMENT),
    (re.compile(r"^#\."), LineKind.EXTRACTED_COMMENT),
    (re.compile(r"^msgid_plural"), LineKind.MSGID_PLURAL),
    (re.compile(r"^msgid"), LineKind.MSGID),
    (re.compile(r"^msgstr"), LineKind.MSGSTR),
    (re.compile(r"^msgctxt"), LineKind.MSGCTXT),
)
_re_plural_index = re.compile(r"^msgstr\[(\d+)\]")
# msgstr indices beyond this are junk, not plural forms
MAX_PLURAL_INDEX = 100
_keywords = frozenset(
    (LineKind.MSGID_PLURAL, LineKind.MSGID, LineKind.MSGSTR, LineKind.MSGCTXT)
)


def classify(raw: str) -> Line:
    """Classify a physical line.

    For comments, `text` is the comment without its marker. For keyword
    and continuation lines, it's the line itself, to be decoded with
    `escape.extract`.
    """
    line = raw.strip()
    obsolete = line.startswith("#~")
    if obsolete:
        line = line[2:].strip()
    for pattern, kind in _prefixes:
        m = pattern.match(line)
        if m is None:
            continue
        if kind is LineKind.MSGSTR:
            indexed = _re_plural_index.match(line)
            index = int(indexed.group(1)) if indexed else 0
            if index < MAX_PLURAL_INDEX:
                return Line(kind, line, index, obsolete)
            return Line(LineKind.BLANK, "", obsolete=obsolete)
        if kind in _keywords:
            return Line(kind, line, obsolete=obsolete)
        return Line(kind, line[m.end() :].strip(), obsolete=obsolete)
    if line and not line.startswith(("#", "|")):
        return Line(LineKind.CONTINUATION, line, obsolete=obsolete)
    # empty, or a comment type we don't know about, like `#|` and `#~|`
    return Line(LineKind.BLANK, "", obsolete=obsolete)


class EntryAssembler:
    """Collect classified lines into the entries of a catalog.

    An entry is only added to the catalog once it got a msgid. It's
    obsolete if at least as many of its lines had the `#~` marker as it
    had content lines, that is keyword and string continuation lines.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.nplurals = catalog.nplurals
        self.entry = Entry(nplurals=self.nplurals)
        self.field = Field.NONE
        self.plural_index = 0
        self.obsolete_lines = 0
        self.content_lines = 0

    def feed(self, raw: str) -> None:
        line = classify(raw)
        transition = TRANSITIONS[line.kind]
        if transition.finish:
            self.finish()
        entry = self.entry
        if line.kind is LineKind.REFERENCE:
            entry.references.append(line.text)
        elif line.kind is LineKind.FLAGS:
            for flag in line.text.split(","):
                entry.flags[flag] = True
        elif line.kind is LineKind.COMMENT:
            entry.comments.append(line.text)
        elif line.kind is LineKind.EXTRACTED_COMMENT:
            entry.extracted_comments.append(line.text)
        elif transition.opens is not None:
            self.content_lines += 1
            self.field = transition.opens
            if line.kind is LineKind.MSGSTR:
                self.plural_index = line.index
            self.store(extract(line.text))
        elif line.kind is LineKind.CONTINUATION:
            self.content_lines += 1
            self.store(extract(line.text), append=True)
        if line.obsolete:
            self.obsolete_lines += 1

    def store(self, value: str, append: bool = False) -> None:
        entry = self.entry
        if self.field is Field.MSGSTR:
            index = self.plural_index
            if append and index < len(entry.msgstr):
                value = entry.msgstr[index] + value
            entry.set_msgstr(index, value)
        elif self.field is Field.MSGID:
            entry.msgid = entry.msgid + value if append else value
        elif self.field is Field.MSGID_PLURAL:
            entry.msgid_plural = (entry.msgid_plural or "") + value if append else value
        elif self.field is Field.MSGCTXT:
            entry.msgctxt = (entry.msgctxt or "") + value if append else value

    def finish(self) -> None:
        if not self.entry.msgid:
            # nothing to add yet, keep collecting comments for this entry
            return
        if self.obsolete_lines >= self.content_lines:
            self.entry.obsolete = True
        self.catalog.entries.append(self.entry)
        self.entry = Entry(nplurals=self.nplurals)
        self.field = Field.NONE
        self.plural_index = 0
        self.obsolete_lines = 0
        self.content_lines = 0


def parse(text: str) -> Catalog:
    """Parse the contents of a PO file.

    Both unix and windows line endings are accepted.
    """
    text = text.replace("\r\n", "\n")
    catalog = Catalog()
    header, body = split_header(text)
    parse_header(header, catalog)
    assembler = EntryAssembler(catalog)
    for line in body.split("\n"):
        assembler.feed(line)
    assembler.finish()
    return catalog