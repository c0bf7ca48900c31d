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

from typing import TYPE_CHECKING

import formbind.config as config
import formbind.models.metadata as metadata

if TYPE_CHECKING:
    import formbind.inputs.base as base


def calculate(explicit: bool | None, by_validators: bool | None, by_default: bool) -> bool:
    """Fuse the three sources of required-ness, most specific first."""
    if explicit is not None:
        return bool(explicit)
    if by_validators is not None:
        return by_validators
    return by_default


class Required:
    def __init__(self, binding: base.Base):
        self.binding = binding

    def apply(self, required: bool) -> None:
        if required and config.get().BROWSER_VALIDATIONS:
            self.binding.input_html_options["required"] = True

    def calculate(self) -> bool:
        by_validators = self.required_by_validators() if self.has_validators() else None
        return calculate(self.binding.options.get("required"), by_validators, config.get().REQUIRED_BY_DEFAULT)

    def css_class(self, required: bool) -> str:
        return "required" if required else "optional"

    def has_validators(self) -> bool:
        return metadata.model_class(self.binding.object) is not None

    def required_by_validators(self) -> bool:
        names = [self.binding.attribute_name]
        if self.binding.reflection is not None:
            names.append(self.binding.reflection.name)
        return any(metadata.is_required(self.binding.object, name) for name in names)
