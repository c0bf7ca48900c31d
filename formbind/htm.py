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

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

import htpy

Element: TypeAlias = htpy.Element
VoidElement: TypeAlias = htpy.VoidElement

abbr = htpy.abbr
input_ = htpy.input
label = htpy.label
textarea = htpy.textarea


def attributes(html_options: Mapping[str, Any]) -> dict[str, str | bool]:
    """Flatten HTML options into attributes that htpy can render."""
    result: dict[str, str | bool] = {}
    for key, value in html_options.items():
        if key == "class":
            names = class_names(value)
            if names:
                result[key] = names
        elif (value is None) or (value is False):
            continue
        elif value is True:
            result[key] = True
        else:
            result[key] = str(value)
    return result


def class_names(value: Any) -> str:
    match value:
        case None | False:
            return ""
        case str():
            return value.strip()
        case Iterable():
            names = (class_names(item) for item in value)
            return " ".join(name for name in names if name)
        case _:
            return str(value)
