# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Plural-Forms header handling

The plural expression is kept as text. Picking a plural form at runtime
is up to the gettext implementation consuming the catalog.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from typing_extensions import TypedDict

DEFAULT_NPLURALS = 2


class PluralForms(TypedDict):
    nplurals: Optional[str]
    plural: Optional[str]


def parse_plural_forms(value: Optional[str]) -> PluralForms:
    """Split `nplurals=3; plural=(n==1 ? 0 : n==2 ? 1 : 2);` into its clauses.

    Values are returned as strings, see `resolve_nplurals`.
    """
    clauses: Dict[str, str] = {}
    for clause in (value or "").split(";"):
        name, sep, rest = clause.strip().partition("=")
        if not sep:
            # no `=`, keep the clause text under an empty name
            name, rest = "", name
        clauses[name.strip()] = rest.strip()
    return PluralForms(nplurals=clauses.get("nplurals"), plural=clauses.get("plural"))


def resolve_nplurals(raw: Union[str, int, None]) -> int:
    if raw is None:
        return DEFAULT_NPLURALS
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_NPLURALS
