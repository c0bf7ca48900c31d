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
import re
from typing import TYPE_CHECKING, Any, Final

import formbind.i18n as i18n
import formbind.inputs as inputs
import formbind.log as log
import formbind.models.metadata as metadata

if TYPE_CHECKING:
    import formbind.inputs.base as base

# Actions which re-render the form of another action
ACTIONS: Final[dict[str, str]] = {
    "create": "new",
    "update": "edit",
}

_MODEL_NAME: Final = re.compile(r"(?!\d)\w+")
_UNSAFE_ID: Final = re.compile(r"\]\[|[^-a-zA-Z0-9:.]")


class Builder:
    """Form builder bound to one object, creating inputs for its attributes."""

    def __init__(
        self,
        object_name: str,
        obj: Any = None,
        *,
        action: str | None = None,
        child_index: str | None = None,
        translator: i18n.Translator | None = None,
    ):
        self.object_name = object_name
        self.object = obj
        self.action = action
        self.child_index = child_index
        self.translator: i18n.Translator = translator if (translator is not None) else i18n.Catalog()

    @functools.cached_property
    def lookup_model_names(self) -> list[str]:
        names = _MODEL_NAME.findall(self.object_name)
        if self.child_index is not None:
            names = [name for name in names if name != self.child_index]
        return [name.replace("_attributes", "") for name in names]

    @property
    def lookup_action(self) -> str | None:
        if not self.action:
            return None
        return ACTIONS.get(self.action, self.action)

    def association(self, name: str, *, as_: str | None = None, **options: Any) -> base.Base:
        options["reflection"] = metadata.Reflection(name=name)
        return self.input(f"{name}_id", as_=as_, **options)

    def field_id(self, attribute_name: str) -> str:
        sanitized = _UNSAFE_ID.sub("_", self.object_name).removesuffix("_")
        return f"{sanitized}_{attribute_name}"

    def field_name(self, attribute_name: str) -> str:
        return f"{self.object_name}[{attribute_name}]"

    def input(self, attribute_name: str, *, as_: str | None = None, **options: Any) -> base.Base:
        input_type = as_ or metadata.default_input_type(self.object, attribute_name)
        input_cls = inputs.lookup(input_type)
        column = metadata.column_for(self.object, attribute_name)
        log.debug(f"Creating {input_cls.__name__} for {self.object_name}.{attribute_name}")
        return input_cls(self, attribute_name, column, input_type, options)

    def value(self, attribute_name: str) -> Any:
        return getattr(self.object, attribute_name, None)
