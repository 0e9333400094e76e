# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

import toml

from pocatalog.config import ConfigData, ConfigNotFound, TOMLConfigParser


class MockTOMLConfigParser(TOMLConfigParser):
    def __init__(self, mock_files):
        self.mock_files = mock_files

    def load(self, path: str) -> ConfigData:
        try:
            return toml.loads(self.mock_files[path])
        except (KeyError, toml.TomlDecodeError):
            raise ConfigNotFound(path)
