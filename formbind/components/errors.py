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

import functools
from typing import TYPE_CHECKING, Any, Final, TypeAlias

import markupsafe

import formbind.config as config
import formbind.log as log

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    import formbind.inputs.base as base

ErrorMethod: TypeAlias = "Callable[[Sequence[str]], str | None]"


def first(messages: Sequence[str]) -> str | None:
    return messages[0] if messages else None


def join(messages: Sequence[str]) -> str:
    return " ".join(messages)


def last(messages: Sequence[str]) -> str | None:
    return messages[-1] if messages else None


def to_sentence(messages: Sequence[str]) -> str:
    match len(messages):
        case 0:
            return ""
        case 1:
            return messages[0]
        case 2:
            return f"{messages[0]} and {messages[1]}"
        case _:
            return f"{', '.join(messages[:-1])}, and {messages[-1]}"


ERROR_METHODS: Final[dict[str, ErrorMethod]] = {
    "first": first,
    "join": join,
    "last": last,
    "to_sentence": to_sentence,
}


def error_method(name: str) -> ErrorMethod:
    try:
        return ERROR_METHODS[name]
    except KeyError:
        log.warning(f"Unknown error method {name!r}, known methods are {', '.join(sorted(ERROR_METHODS))}")
        raise ValueError(f"Unknown error method: {name!r}") from None


def register_error_method(name: str, method: ErrorMethod) -> None:
    ERROR_METHODS[name] = method


class ErrorText:
    """Error messages of one bound attribute, and of its association if any.

    The collected messages are computed on first use and kept for the
    lifetime of the binding.
    """

    def __init__(self, binding: base.Base):
        self.binding = binding

    def error(self) -> markupsafe.Markup | None:
        if self.has_errors():
            return self.error_text()
        return None

    def full_error(self) -> markupsafe.Markup | None:
        # Only an explicit False suppresses the full error
        if (self.binding.options.get("error") is not False) and self.has_errors():
            return self.full_error_text()
        return None

    def has_errors(self) -> bool:
        obj = self.binding.object
        return (obj is not None) and hasattr(obj, "errors") and bool(self.errors)

    def error_text(self) -> markupsafe.Markup:
        text = self.binding.options["error"] if self.has_error_in_options() else self.extract(self.errors)
        prefix = self.binding.options.get("error_prefix")
        escaped = markupsafe.escape(prefix) if (prefix is not None) else ""
        return markupsafe.Markup(f"{escaped} {_text(text)}".lstrip())

    def full_error_text(self) -> markupsafe.Markup:
        text = self.binding.options["error"] if self.has_error_in_options() else self.extract(self.full_errors)
        return markupsafe.Markup(_text(text))

    def error_method(self) -> str:
        return self.binding.options.get("error_method") or config.get().ERROR_METHOD

    @functools.cached_property
    def errors(self) -> list[str]:
        return _compact(self.errors_on_attribute() + self.errors_on_association())

    def errors_on_association(self) -> list[str]:
        reflection = self.binding.reflection
        if reflection is None:
            return []
        return list(self._collection()[reflection.name])

    def errors_on_attribute(self) -> list[str]:
        return list(self._collection()[self.binding.attribute_name])

    def extract(self, messages: Sequence[str]) -> str | None:
        return error_method(self.error_method())(messages)

    @functools.cached_property
    def full_errors(self) -> list[str]:
        return _compact(self.full_errors_on_attribute() + self.full_errors_on_association())

    def full_errors_on_association(self) -> list[str]:
        reflection = self.binding.reflection
        if reflection is None:
            return []
        return list(self._collection().full_messages_for(reflection.name))

    def full_errors_on_attribute(self) -> list[str]:
        return list(self._collection().full_messages_for(self.binding.attribute_name))

    def has_error_in_options(self) -> bool:
        error = self.binding.options.get("error")
        return (error is not None) and (error is not False)

    def _collection(self) -> Any:
        return self.binding.object.errors


def _compact(messages: list[str | None]) -> list[str]:
    return [message for message in messages if message is not None]


def _text(text: Any) -> str:
    return "" if (text is None) else str(text)
