# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Header block of PO files

The header is the entry with an empty msgid. Everything before it,
like copyright comments, belongs to the catalog, too.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .elements import Catalog

HEADER_MSGID = 'msgid ""'

_re_entry_msgid = re.compile(r'msgid "[^"]')
_re_quoted = re.compile(r'^".*"$')
_re_newline_terminated = re.compile(r'^".*\\n"$')
_re_extracted_comment = re.compile(r"^#\.\s*")
_re_comment = re.compile(r"^#\s*")


def split_header(text: str) -> Tuple[str, str]:
    """Split normalized PO text into the header block and the entries.

    Paragraphs go into the header until one containing `msgid ""` got
    added. If an actual entry shows up first, there is no header, and
    an empty one is put in its place.
    """
    sections = text.split("\n\n")
    header: List[str] = []
    while sections and sections[0]:
        if header and HEADER_MSGID in header[-1]:
            break
        if _re_entry_msgid.search(sections[0]):
            header.append(HEADER_MSGID)
        else:
            header.append(sections.pop(0))
    return "\n".join(header), "\n".join(sections)


def merge_continuations(lines: List[str]) -> List[str]:
    """Join header values which got wrapped over several quoted lines."""
    merged: List[str] = []
    merge = False
    for line in lines:
        if merge:
            line = merged.pop()[:-1] + line[1:]
            merge = False
        if _re_quoted.match(line) and not _re_newline_terminated.match(line):
            merge = True
        merged.append(line)
    return merged


def parse_header(header: str, catalog: Catalog) -> None:
    for line in merge_continuations(header.split("\n")):
        if line.startswith("#."):
            catalog.extracted_comments.append(_re_extracted_comment.sub("", line))
        elif line.startswith("#"):
            catalog.comments.append(_re_comment.sub("", line))
        elif line.startswith('"'):
            value = line.strip()[1:]
            if value.endswith('\\n"'):
                value = value[:-3]
            elif value.endswith('"'):
                value = value[:-1]
            name, _, value = value.partition(":")
            catalog.set_header(name.strip(), value.strip())
