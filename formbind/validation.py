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

from typing import TYPE_CHECKING, Any

import formbind.models.metadata as metadata

if TYPE_CHECKING:
    from collections.abc import Iterator

    import pydantic

BASE: str = "base"


class Errors:
    """Validation messages of one bound object, keyed by attribute name.

    Messages are kept in insertion order. Looking up a key without messages
    gives an empty list, so callers can always concatenate the results.
    """

    def __init__(self, model: Any = None):
        self.model = model
        self.__messages: dict[str, list[str]] = {}

    def __bool__(self) -> bool:
        return any(self.__messages.values())

    def __contains__(self, key: object) -> bool:
        return bool(self.__messages.get(str(key)))

    def __getitem__(self, key: str) -> list[str]:
        return list(self.__messages.get(str(key), []))

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        for key, messages in self.__messages.items():
            if messages:
                yield key, list(messages)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self.__messages.values())

    def __repr__(self) -> str:
        return f"Errors({self.__messages!r})"

    def add(self, key: str, message: str) -> None:
        self.__messages.setdefault(str(key), []).append(message)

    def clear(self) -> None:
        self.__messages.clear()

    def full_message(self, key: str, message: str) -> str:
        if key == BASE:
            return message
        return f"{metadata.label_for(self.model, key)} {message}"

    def full_messages(self) -> list[str]:
        return [self.full_message(key, message) for key, messages in self for message in messages]

    def full_messages_for(self, key: str) -> list[str]:
        return [self.full_message(str(key), message) for message in self[key]]

    @classmethod
    def from_validation_error(cls, error: pydantic.ValidationError, model: Any = None) -> Errors:
        errors = cls(model)
        for detail in error.errors():
            loc = detail["loc"]
            key = loc[0] if (loc and isinstance(loc[0], str)) else BASE
            msg = detail["msg"].replace("Value error, ", "")
            errors.add(key, msg)
        return errors
