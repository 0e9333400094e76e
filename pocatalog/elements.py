# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .plurals import parse_plural_forms, resolve_nplurals
from .serializer import render, render_entry

DEFAULT_HEADERS = (
    "Project-Id-Version",
    "Report-Msgid-Bugs-To",
    "POT-Creation-Date",
    "PO-Revision-Date",
    "Last-Translator",
    "Language",
    "Language-Team",
    "Content-Type",
    "Content-Transfer-Encoding",
    "Plural-Forms",
)


def default_headers() -> Dict[str, str]:
    return {name: "" for name in DEFAULT_HEADERS}


# ENTRY


@dataclass
class Entry:
    """
    A single translatable unit of a catalog.

    `msgstr` is indexed by plural form; index 0 holds the translation of
    entries without `msgid_plural`.
    `flags` maps flag names to a boolean, a falsy value hides the flag
    when serializing.
    `nplurals` is the plural form count of the owning catalog, used to
    expand an untranslated plural entry.
    """

    msgid: str = ""
    msgctxt: Optional[str] = None
    msgid_plural: Optional[str] = None
    msgstr: List[str] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    flags: Dict[str, bool] = field(default_factory=dict)
    obsolete: bool = False
    nplurals: int = field(compare=False, default=2)

    @property
    def key(self) -> Tuple[str, Optional[str]]:
        return (self.msgid, self.msgctxt)

    @property
    def flag_names(self) -> List[str]:
        return [name for name, value in self.flags.items() if value]

    @property
    def fuzzy(self) -> bool:
        # flags keep the white-space after the comma, `#, c-format, fuzzy`
        return any(name.strip() == "fuzzy" for name in self.flag_names)

    @property
    def translated(self) -> bool:
        return any(self.msgstr)

    def set_msgstr(self, index: int, value: str) -> None:
        if index >= len(self.msgstr):
            self.msgstr.extend([""] * (index + 1 - len(self.msgstr)))
        self.msgstr[index] = value

    def __str__(self) -> str:
        return render_entry(self)


# CATALOG


@dataclass
class Catalog:
    """
    The result of parsing a PO file.

    `headers` always contains the default gettext headers,
    `header_order` lists the header names in the order they were found.
    """

    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=default_headers)
    header_order: List[str] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)

    @property
    def nplurals(self) -> int:
        forms = parse_plural_forms(self.headers.get("Plural-Forms"))
        return resolve_nplurals(forms["nplurals"])

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value
        if name not in self.header_order:
            self.header_order.append(name)

    def iter_header_names(self) -> Iterator[str]:
        seen = set()
        for name in self.header_order:
            if name in self.headers and name not in seen:
                seen.add(name)
                yield name
        for name in self.headers:
            if name not in seen:
                seen.add(name)
                yield name

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return render(self)
