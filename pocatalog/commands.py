# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"Commands exposed to commandlines"

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from . import version
from .config import Config, ConfigNotFound, TOMLConfigParser
from .errors import UnreadableCatalog, UnwritableCatalog
from .io import load, read_text, save
from .serializer import render

logger = logging.getLogger("pocatalog.commands")


class Normalize:
    """Rewrite gettext PO files in normalized form.

    Files are parsed and serialized again, which fixes the order of
    comments, wrapping of multi-line strings and header layout.
    """

    def __init__(self) -> None:
        self.parser = self.get_parser()

    def get_parser(self) -> ArgumentParser:
        parser = ArgumentParser(description=self.__doc__)
        parser.add_argument(
            "--version", action="version", version="%(prog)s " + version
        )
        parser.add_argument(
            "-v", "--verbose", action="count", default=0, help="Make more noise"
        )
        parser.add_argument(
            "--config",
            metavar="pocatalog.toml",
            help="TOML file with header values to set",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Don't write files, exit with 1 if any file would change",
        )
        parser.add_argument("files", nargs="+", metavar="FILE", help="PO files")
        return parser

    @classmethod
    def call(cls, argv: Optional[List[str]] = None) -> int:
        """Entry point for setuptools."""
        cmd = cls()
        args = cmd.parser.parse_args(argv)
        return cmd.handle(**vars(args))

    def handle(
        self,
        files: List[str],
        config: Optional[str] = None,
        check: bool = False,
        verbose: int = 0,
    ) -> int:
        logging.basicConfig(
            level=logging.WARNING - 10 * min(verbose, 2),
            format="%(levelname)s: %(message)s",
        )
        if config is None:
            settings = Config()
        else:
            try:
                settings = TOMLConfigParser().parse(config)
            except ConfigNotFound as e:
                logger.error("%s: %s", e.strerror, e.filename)
                return 2
        rv = 0
        for path in files:
            try:
                rv = max(rv, self.normalize(path, settings, check))
            except (UnreadableCatalog, UnwritableCatalog):
                rv = 2
        return rv

    def normalize(self, path: str, settings: Config, check: bool) -> int:
        catalog = load(path, encoding=settings.encoding)
        settings.apply(catalog)
        if check:
            # compare raw contents, line endings get normalized, too
            if read_text(path, settings.encoding, newline="") == render(catalog):
                return 0
            logger.warning("%s would be reformatted", path)
            return 1
        save(catalog, path, encoding=settings.encoding)
        logger.info("%s: %d entries", path, len(catalog))
        return 0


def main() -> None:
    sys.exit(Normalize.call())
