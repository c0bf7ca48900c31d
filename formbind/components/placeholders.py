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

if TYPE_CHECKING:
    import formbind.inputs.base as base


class Placeholder:
    def __init__(self, binding: base.Base):
        self.binding = binding

    def apply(self) -> None:
        if not self.binding.has_feature("placeholder"):
            return
        text = self.text()
        if text is not None:
            self.binding.input_html_options.setdefault("placeholder", text)

    def text(self) -> str | None:
        placeholder = self.binding.options.get("placeholder")
        if isinstance(placeholder, str):
            return placeholder
        return self.binding.translate("placeholders")
