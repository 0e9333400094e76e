# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

import unittest

from pocatalog.config import Config, ConfigNotFound
from pocatalog.parser import parse

from . import MockTOMLConfigParser


class TestConfigParser(unittest.TestCase):
    def test_headers(self):
        parser = MockTOMLConfigParser(
            {
                "pocatalog.toml": """
encoding = "latin-1"
[headers]
  "Language-Team" = "French <fr@example.com>"
  "X-Source-Language" = "en"
""",
            }
        )
        config = parser.parse("pocatalog.toml")
        self.assertIsInstance(config, Config)
        self.assertEqual(config.path, "pocatalog.toml")
        self.assertEqual(config.encoding, "latin-1")
        self.assertEqual(
            config.headers,
            {"Language-Team": "French <fr@example.com>", "X-Source-Language": "en"},
        )

    def test_defaults(self):
        config = MockTOMLConfigParser({"empty.toml": ""}).parse("empty.toml")
        self.assertEqual(config.encoding, "utf-8")
        self.assertEqual(config.headers, {})

    def test_missing(self):
        with self.assertRaises(ConfigNotFound) as cm:
            MockTOMLConfigParser({}).parse("missing.toml")
        self.assertEqual(cm.exception.filename, "missing.toml")

    def test_broken(self):
        with self.assertRaises(ConfigNotFound):
            MockTOMLConfigParser({"bad.toml": "[headers"}).parse("bad.toml")


class TestApply(unittest.TestCase):
    def test_apply(self):
        catalog = parse('msgid ""\nmsgstr ""\n"Language: fr\\n"\n')
        config = Config()
        config.headers = {"Language-Team": "French", "X-Extra": "1"}
        config.apply(catalog)
        self.assertEqual(catalog.headers["Language-Team"], "French")
        self.assertEqual(catalog.headers["X-Extra"], "1")
        self.assertEqual(catalog.header_order, ["Language", "Language-Team", "X-Extra"])
