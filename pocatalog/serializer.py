# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Serialize catalogs to PO text

The output follows GNU gettext conventions. Comments come in the order
translator comments, extracted comments, references, flags. Strings
with newlines are written as multiple quoted lines, obsolete entries get
`#~ ` in front of each of their field lines.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Tuple, Union

from .escape import escape

if TYPE_CHECKING:
    from .elements import Catalog, Entry

OBSOLETE = "#~ "

FieldValue = Union[str, List[str], None]

_fields: Tuple[Tuple[str, Callable[[Entry], FieldValue]], ...] = (
    ("msgctxt", lambda entry: entry.msgctxt),
    ("msgid", lambda entry: entry.msgid),
    ("msgid_plural", lambda entry: entry.msgid_plural),
    ("msgstr", lambda entry: entry.msgstr),
)


def render(catalog: Catalog) -> str:
    return "\n".join(iter_lines(catalog))


def render_entry(entry: Entry) -> str:
    return "\n".join(iter_entry_lines(entry))


def iter_lines(catalog: Catalog) -> Iterator[str]:
    """Generate the lines of the PO file, without line endings.

    Each call starts from scratch, so this can be used to stream a
    catalog to a file.
    """
    for comment in catalog.comments:
        yield "# " + comment.strip()
    for comment in catalog.extracted_comments:
        yield "#. " + comment.strip()
    yield 'msgid ""'
    yield 'msgstr ""'
    for name in catalog.iter_header_names():
        yield f'"{name}: {catalog.headers[name]}\\n"'
    yield ""
    for entry in catalog.entries:
        yield from iter_entry_lines(entry)
        yield ""


def iter_entry_lines(entry: Entry) -> Iterator[str]:
    for comment in entry.comments:
        yield "# " + comment
    for comment in entry.extracted_comments:
        yield "#. " + comment
    for reference in entry.references:
        yield "#: " + reference
    flags = entry.flag_names
    if flags:
        yield "#, " + ",".join(flags)
    prefix = OBSOLETE if entry.obsolete else ""
    for keyword, getter in _fields:
        for line in field_lines(entry, keyword, getter(entry)):
            yield prefix + line


def field_lines(entry: Entry, keyword: str, value: FieldValue) -> Iterator[str]:
    if value is None:
        return
    if isinstance(value, list):
        if len(value) > 1:
            for index, text in enumerate(value):
                yield from literal_lines(keyword, text, index)
        elif entry.msgid_plural is not None and not any(value):
            for index in range(entry.nplurals):
                yield from literal_lines(keyword, "", index)
        else:
            index = 0 if entry.msgid_plural is not None else None
            yield from literal_lines(keyword, value[0] if value else "", index)
    else:
        yield from literal_lines(keyword, value)


def literal_lines(keyword: str, text: str, index: Optional[int] = None) -> Iterator[str]:
    """Write a keyword and its string.

    Multi-line strings start with an empty string on the keyword line,
    followed by one line per line of text, the newline kept as `\\n`.
    """
    if index is not None:
        keyword = f"{keyword}[{index}]"
    parts = text.split("\n")
    terminated = text.endswith("\n")
    if terminated:
        parts.pop()
    if len(parts) <= 1:
        value = escape(parts[0] if parts else "")
        yield f'{keyword} "{value}\\n"' if terminated else f'{keyword} "{value}"'
        return
    yield f'{keyword} ""'
    last = len(parts) - 1
    for i, part in enumerate(parts):
        if i < last or terminated:
            yield f'"{escape(part)}\\n"'
        else:
            yield f'"{escape(part)}"'
