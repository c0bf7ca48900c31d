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

import decouple


def _optional_int(value: str | int | None) -> int | None:
    # An empty value switches the default off entirely
    if (value is None) or (value == ""):
        return None
    return int(value)


class AppConfig:
    # Name of the strategy used to turn a list of errors into text
    ERROR_METHOD: str = decouple.config("FORMBIND_ERROR_METHOD", default="first")
    TRANSLATE: bool = decouple.config("FORMBIND_TRANSLATE", default=True, cast=bool)
    DEFAULT_INPUT_SIZE: int | None = decouple.config("FORMBIND_DEFAULT_INPUT_SIZE", default=50, cast=_optional_int)
    REQUIRED_BY_DEFAULT: bool = decouple.config("FORMBIND_REQUIRED_BY_DEFAULT", default=True, cast=bool)
    BROWSER_VALIDATIONS: bool = decouple.config("FORMBIND_BROWSER_VALIDATIONS", default=True, cast=bool)
    I18N_SCOPE: str = decouple.config("FORMBIND_I18N_SCOPE", default="formbind")


def get() -> type[AppConfig]:
    return AppConfig
