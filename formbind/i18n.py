# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

from __future__ import annotations

import copy
import json
from typing import TYPE_CHECKING, Any, Protocol

import formbind.log as log

if TYPE_CHECKING:
    import pathlib
    from collections.abc import Mapping, Sequence


class Key(str):
    """A translation key, as opposed to a literal fallback string."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Key({str.__repr__(self)})"


class Translator(Protocol):
    def __call__(self, key: Key, *, scope: str, default: Sequence[Key | str]) -> str | None: ...


class Catalog:
    def __init__(self, translations: Mapping[str, Any] | None = None):
        self.translations: dict[str, Any] = copy.deepcopy(dict(translations or {}))

    def __call__(self, key: Key, *, scope: str, default: Sequence[Key | str] = ()) -> str | None:
        for candidate in (key, *default):
            if not isinstance(candidate, Key):
                return candidate
            found = self.lookup(f"{scope}.{candidate}" if scope else candidate)
            # Blank entries fall through to the next candidate
            if (found is not None) and found.strip():
                return found
        log.debug(f"No translation for {key!r} in scope {scope!r}")
        return None

    @classmethod
    def from_file(cls, path: pathlib.Path | str) -> Catalog:
        with open(path, encoding="utf-8") as f:
            return cls(json.load(f))

    def lookup(self, dotted: str) -> str | None:
        node: Any = self.translations
        for part in dotted.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
            if node is None:
                return None
        if isinstance(node, str):
            return node
        return None

    def update(self, translations: Mapping[str, Any]) -> None:
        _deep_merge(self.translations, translations)


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _deep_merge(existing, value)
        else:
            target[key] = value
