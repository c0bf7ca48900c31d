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

import formbind.htm as htm
import formbind.inputs.base as base


class BooleanInput(base.Base):
    def input(self) -> htm.VoidElement:
        self.apply_components()

        attrs = {
            "type": "checkbox",
            "name": self.builder.field_name(self.attribute_name),
            "id": self.input_id,
        }
        # Browsers submit "on" for a checked box without a value
        if self.builder.value(self.attribute_name):
            attrs["checked"] = True
        attrs.update(self.input_html_options)
        return htm.input_(htm.attributes(attrs))
