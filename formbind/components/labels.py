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

import formbind.htm as htm
import formbind.models.metadata as metadata

if TYPE_CHECKING:
    import formbind.inputs.base as base


class Label:
    def __init__(self, binding: base.Base):
        self.binding = binding

    def element(self) -> htm.Element:
        classes = [self.binding.input_type, self.binding.required_class]
        html_options = self.binding.html_options_for("label", classes)
        html_options.setdefault("for", self.binding.input_id)
        text = self.text()
        if self.binding.required:
            return htm.label(htm.attributes(html_options))[htm.abbr(title="required")["*"], " ", text]
        return htm.label(htm.attributes(html_options))[text]

    def text(self) -> str:
        label = self.binding.options.get("label")
        if isinstance(label, str):
            return label
        translated = self.binding.translate("labels")
        if translated is not None:
            return translated
        return metadata.label_for(self.binding.object, self.binding.reflection_or_attribute_name)
