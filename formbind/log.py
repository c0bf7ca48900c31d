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

import inspect
import logging
from typing import Any


def caller_name(depth: int = 1) -> str:
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back

    if frame is None:
        return __name__

    module = frame.f_globals.get("__name__", "<unknown>")
    func = frame.f_code.co_name

    if func == "<module>":
        return module

    # Classmethods bind cls, instance methods bind self
    cls_name = None
    if "self" in frame.f_locals:
        cls_name = frame.f_locals["self"].__class__.__name__
    elif ("cls" in frame.f_locals) and isinstance(frame.f_locals["cls"], type):
        cls_name = frame.f_locals["cls"].__name__

    if cls_name:
        return f"{module}.{cls_name}.{func}"
    return f"{module}.{func}"


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.DEBUG, msg, *args, **kwargs)


def warning(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.WARNING, msg, *args, **kwargs)


def _caller_logger(depth: int = 1) -> logging.Logger:
    return logging.getLogger(caller_name(depth))


def _event(level: int, msg: str, *args: Any, stacklevel: int = 3, **kwargs: Any) -> None:
    logger = _caller_logger(depth=3)
    # Stack level 1 is _event, 2 is the log.* function, 3 is the actual caller
    logger.log(level, msg, *args, stacklevel=stacklevel, **kwargs)
