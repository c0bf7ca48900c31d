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


class Readonly:
    def __init__(self, binding: base.Base):
        self.binding = binding

    def css_class(self) -> str | None:
        return "readonly" if self.has_readonly() else None

    def has_readonly(self) -> bool:
        readonly = self.binding.options.get("readonly")
        if readonly is not None:
            return bool(readonly)
        # Fall back to the bound object, which may be read only as a whole
        flag = getattr(self.binding.object, "readonly", False)
        if callable(flag):
            flag = flag()
        return bool(flag)
