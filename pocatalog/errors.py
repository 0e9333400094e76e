# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

from __future__ import annotations

import errno
from typing import Optional


def _errno(reason: Exception) -> int:
    if isinstance(reason, OSError) and reason.errno is not None:
        return reason.errno
    return errno.EILSEQ


class UnreadableCatalog(OSError):
    """Reading or decoding a PO file failed.

    The parser itself never fails, this only wraps the I/O around it.
    """

    def __init__(self, filename: Optional[str], reason: Exception) -> None:
        super().__init__(_errno(reason), f"Cannot read catalog: {reason}", filename)
        self.reason = reason


class UnwritableCatalog(OSError):
    """Encoding or writing a PO file failed."""

    def __init__(self, filename: Optional[str], reason: Exception) -> None:
        super().__init__(_errno(reason), f"Cannot write catalog: {reason}", filename)
        self.reason = reason
