# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Reading and writing PO files

Thin wrappers around `parse` and `iter_lines`, all failures are raised
as UnreadableCatalog or UnwritableCatalog.
"""
from __future__ import annotations

import codecs
import logging
import os
import shutil
import tempfile
from typing import Optional, Union

from .elements import Catalog
from .errors import UnreadableCatalog, UnwritableCatalog
from .parser import parse
from .serializer import iter_lines

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger("pocatalog.io")


def read_text(
    path: PathLike, encoding: str = "utf-8", newline: Optional[str] = None
) -> str:
    """Read a PO file as text, by default with universal newlines."""
    filename = os.fspath(path)
    try:
        with open(filename, encoding=encoding, newline=newline) as f:
            return f.read()
    except (OSError, LookupError, UnicodeDecodeError) as e:
        logger.error("%s: %s", filename, e)
        raise UnreadableCatalog(filename, e) from e


def load(path: PathLike, encoding: str = "utf-8") -> Catalog:
    """Read and parse a PO file, with universal newlines."""
    return parse(read_text(path, encoding))


def loads(contents: bytes, encoding: str = "utf-8") -> Catalog:
    """Parse PO file contents in the given encoding."""
    try:
        (text, _) = codecs.getdecoder(encoding)(contents)
    except (LookupError, UnicodeDecodeError) as e:
        raise UnreadableCatalog(None, e) from e
    return parse(text)


def save(catalog: Catalog, path: PathLike, encoding: str = "utf-8") -> None:
    """Write the catalog to disk, line by line.

    The lines go to a temporary file next to `path`, which replaces
    `path` once everything got written. If writing fails, an existing
    file stays as it was.
    The file ends up with the same contents as `render(catalog)`.
    """
    filename = os.fspath(path)
    tmp = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            newline="\n",
            dir=os.path.dirname(os.path.abspath(filename)),
            prefix=".pocatalog-",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp = f.name
            separator = ""
            for line in iter_lines(catalog):
                f.write(separator + line)
                separator = "\n"
        if os.path.exists(filename):
            shutil.copymode(filename, tmp)
        else:
            # temporary files are private, new catalogs follow the umask
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp, 0o666 & ~umask)
        os.replace(tmp, filename)
    except (OSError, LookupError, UnicodeEncodeError) as e:
        if tmp is not None and os.path.exists(tmp):
            os.remove(tmp)
        logger.error("%s: %s", filename, e)
        raise UnwritableCatalog(filename, e) from e
    logger.debug("wrote %d entries to %s", len(catalog), filename)
