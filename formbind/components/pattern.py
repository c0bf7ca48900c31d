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

import formbind.models.metadata as metadata

if TYPE_CHECKING:
    import formbind.inputs.base as base


class Pattern:
    def __init__(self, binding: base.Base):
        self.binding = binding

    def apply(self) -> None:
        if not self.binding.has_feature("pattern"):
            return
        pattern = self.pattern()
        if pattern is not None:
            self.binding.input_html_options.setdefault("pattern", pattern)

    def pattern(self) -> str | None:
        explicit = self.binding.options.get("pattern")
        if isinstance(explicit, str):
            return explicit
        field = metadata.field_info(self.binding.object, self.binding.attribute_name)
        if field is None:
            return None
        return metadata.pattern(field)
