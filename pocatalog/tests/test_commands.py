# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

import shutil
import tempfile
import unittest
from os.path import join

from pocatalog.commands import Normalize
from pocatalog.io import load

MESSY = """\
msgid ""
msgstr ""
"Language: fr\\n"

#, fuzzy
#: a.py:1
msgid "one"
msgstr "un"
"""


class TestNormalize(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.po = join(self.dir, "fr.po")
        with open(self.po, "w", encoding="utf-8") as fh:
            fh.write(MESSY)

    def tearDown(self):
        shutil.rmtree(self.dir)

    def read(self):
        with open(self.po, encoding="utf-8") as fh:
            return fh.read()

    def test_rewrite(self):
        self.assertEqual(Normalize.call([self.po]), 0)
        contents = self.read()
        self.assertIn('#: a.py:1\n#, fuzzy\nmsgid "one"', contents)
        # normalized files stay as they are
        self.assertEqual(Normalize.call(["--check", self.po]), 0)

    def test_check(self):
        with self.assertLogs("pocatalog.commands", level="WARNING"):
            self.assertEqual(Normalize.call(["--check", self.po]), 1)
        self.assertEqual(self.read(), MESSY)

    def test_config(self):
        config = join(self.dir, "pocatalog.toml")
        with open(config, "w") as fh:
            fh.write('[headers]\n"Language-Team" = "French"\n')
        self.assertEqual(Normalize.call(["--config", config, self.po]), 0)
        catalog = load(self.po)
        self.assertEqual(catalog.headers["Language-Team"], "French")
        self.assertEqual(catalog.header_order[:2], ["Language", "Language-Team"])

    def test_missing_config(self):
        with self.assertLogs("pocatalog.commands", level="ERROR"):
            rv = Normalize.call(["--config", join(self.dir, "nope.toml"), self.po])
        self.assertEqual(rv, 2)

    def test_check_crlf(self):
        self.assertEqual(Normalize.call([self.po]), 0)
        with open(self.po, encoding="utf-8", newline="") as fh:
            normalized = fh.read()
        with open(self.po, "w", encoding="utf-8", newline="\r\n") as fh:
            fh.write(normalized)
        with self.assertLogs("pocatalog.commands", level="WARNING"):
            self.assertEqual(Normalize.call(["--check", self.po]), 1)
        self.assertEqual(Normalize.call([self.po]), 0)
        with open(self.po, encoding="utf-8", newline="") as fh:
            self.assertEqual(fh.read(), normalized)

    def test_unencodable_header_keeps_file(self):
        config = join(self.dir, "pocatalog.toml")
        with open(config, "w", encoding="utf-8") as fh:
            fh.write('encoding = "latin-1"\n[headers]\n"Last-Translator" = "Łukasz"\n')
        with self.assertLogs("pocatalog.io", level="ERROR"):
            rv = Normalize.call(["--config", config, self.po])
        self.assertEqual(rv, 2)
        self.assertEqual(self.read(), MESSY)

    def test_missing_file(self):
        with self.assertLogs("pocatalog.io", level="ERROR"):
            rv = Normalize.call([self.po, join(self.dir, "missing.po")])
        self.assertEqual(rv, 2)
        self.assertIn("Language-Team", self.read())
