# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Configuration for the pocatalog command

```toml
encoding = "utf-8"
[headers]
  "Language-Team" = "French <fr@example.com>"
```
"""
from __future__ import annotations

import errno
from typing import TYPE_CHECKING, Dict, Optional

import toml
from typing_extensions import NotRequired, TypedDict

if TYPE_CHECKING:
    from .elements import Catalog


class ConfigNotFound(EnvironmentError):
    def __init__(self, path):
        super().__init__(errno.ENOENT, "Configuration file not found", path)


class ConfigData(TypedDict):
    encoding: NotRequired[str]
    headers: NotRequired[Dict[str, str]]


class Config:
    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self.encoding = "utf-8"
        self.headers: Dict[str, str] = {}

    def apply(self, catalog: Catalog) -> None:
        """Overwrite the configured headers in `catalog`."""
        for name, value in self.headers.items():
            catalog.set_header(name, value)


class TOMLConfigParser:
    def parse(self, path: str) -> Config:
        data = self.load(path)
        config = Config(path)
        self.processEncoding(config, data)
        self.processHeaders(config, data)
        return config

    def load(self, path: str) -> ConfigData:
        try:
            with open(path) as fin:
                return toml.load(fin)
        except (toml.TomlDecodeError, OSError):
            raise ConfigNotFound(path)

    def processEncoding(self, config: Config, data: ConfigData) -> None:
        if "encoding" in data:
            config.encoding = str(data["encoding"])

    def processHeaders(self, config: Config, data: ConfigData) -> None:
        for name, value in data.get("headers", {}).items():
            config.headers[name] = str(value)
