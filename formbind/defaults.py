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

import types
from collections.abc import Iterator, Mapping
from typing import Any


class Defaults(Mapping[str, Any]):
    """Immutable option defaults owned by one input type.

    Every change returns a new record, so a type that reassigns its own
    defaults never alters those of its parent or its siblings.
    """

    __slots__ = ("__options",)

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.__options = types.MappingProxyType(dict(options or {}))

    def __getitem__(self, key: str) -> Any:
        return self.__options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__options)

    def __len__(self) -> int:
        return len(self.__options)

    def __repr__(self) -> str:
        return f"Defaults({dict(self.__options)!r})"

    def disable(self, *keys: str) -> Defaults:
        options = dict(self.__options)
        for key in keys:
            options[key] = False
        return Defaults(options)

    def enable(self, *keys: str) -> Defaults:
        options = dict(self.__options)
        for key in keys:
            options.pop(key, None)
        return Defaults(options)

    def merge(self, options: Mapping[str, Any]) -> dict[str, Any]:
        # Options given at the call site win over the defaults
        return {**self.__options, **options}
