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

from typing import Final

import formbind.inputs.base as base
import formbind.inputs.boolean as boolean
import formbind.inputs.numeric as numeric
import formbind.inputs.string as string
import formbind.inputs.text as text
import formbind.log as log

MAPPINGS: Final[dict[str, type[base.Base]]] = {
    "boolean": boolean.BooleanInput,
    "email": string.StringInput,
    "numeric": numeric.NumericInput,
    "password": string.StringInput,
    "search": string.StringInput,
    "string": string.StringInput,
    "tel": string.StringInput,
    "text": text.TextInput,
    "url": string.StringInput,
}


def lookup(input_type: str) -> type[base.Base]:
    try:
        return MAPPINGS[input_type]
    except KeyError:
        log.warning(f"No input registered for type {input_type!r}")
        raise ValueError(f"No input found for type {input_type!r}") from None


def register(input_type: str, input_cls: type[base.Base]) -> None:
    MAPPINGS[input_type] = input_cls
