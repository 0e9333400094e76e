# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"Reading and writing gettext PO catalogs"

version = "1.0.0"

from .elements import DEFAULT_HEADERS, Catalog, Entry  # noqa: E402
from .errors import UnreadableCatalog, UnwritableCatalog  # noqa: E402
from .escape import escape, unescape  # noqa: E402
from .io import load, loads, save  # noqa: E402
from .parser import parse  # noqa: E402
from .plurals import parse_plural_forms, resolve_nplurals  # noqa: E402
from .serializer import iter_lines, render  # noqa: E402

__all__ = [
    "DEFAULT_HEADERS",
    "Catalog",
    "Entry",
    "UnreadableCatalog",
    "UnwritableCatalog",
    "escape",
    "unescape",
    "iter_lines",
    "load",
    "loads",
    "parse",
    "parse_plural_forms",
    "render",
    "resolve_nplurals",
    "save",
]
