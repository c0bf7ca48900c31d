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

import types
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin

import pydantic

import formbind.models.schema as schema

if TYPE_CHECKING:
    import pydantic.fields


class Column(schema.Frozen):
    name: str
    limit: int | None = None


class Reflection(schema.Frozen):
    name: str


def column_for(obj: Any, attribute_name: str) -> Column | None:
    field = field_info(obj, attribute_name)
    if field is None:
        return None
    return Column(name=attribute_name, limit=max_length(field))


def default_input_type(obj: Any, attribute_name: str) -> str:  # noqa: C901
    if "password" in attribute_name:
        return "password"

    field = field_info(obj, attribute_name)
    if (field is None) or (field.annotation is None):
        return "string"

    annotation = field.annotation
    origin = get_origin(annotation)

    if isinstance(annotation, types.UnionType) or (origin is type(None)):
        non_none_types = [arg for arg in get_args(annotation) if (arg is not type(None))]
        if non_none_types:
            annotation = non_none_types[0]
            origin = get_origin(annotation)

    if origin is Annotated:
        annotation = get_args(annotation)[0]

    if annotation is bool:
        return "boolean"

    if annotation in (int, float):
        return "numeric"

    if annotation is pydantic.EmailStr:
        return "email"

    if annotation is pydantic.HttpUrl:
        return "url"

    return "string"


def field_info(obj: Any, attribute_name: str) -> pydantic.fields.FieldInfo | None:
    model_cls = model_class(obj)
    if model_cls is None:
        return None
    return model_cls.model_fields.get(attribute_name)


def humanize(attribute_name: str) -> str:
    name = attribute_name.removesuffix("_id")
    return name.replace("_", " ").strip().capitalize()


def is_required(obj: Any, attribute_name: str) -> bool:
    field = field_info(obj, attribute_name)
    return (field is not None) and field.is_required()


def label_for(obj: Any, attribute_name: str) -> str:
    field = field_info(obj, attribute_name)
    if field and field.description:
        return field.description
    return humanize(attribute_name)


def max_length(field: pydantic.fields.FieldInfo) -> int | None:
    return _constraint(field, "max_length")


def model_class(obj: Any) -> type[pydantic.BaseModel] | None:
    if isinstance(obj, pydantic.BaseModel):
        return type(obj)
    if isinstance(obj, type) and issubclass(obj, pydantic.BaseModel):
        return obj
    return None


def pattern(field: pydantic.fields.FieldInfo) -> str | None:
    found = _constraint(field, "pattern")
    if found is None:
        return None
    # Compiled patterns are accepted by pydantic as well as strings
    return getattr(found, "pattern", found)


def _constraint(field: pydantic.fields.FieldInfo, name: str) -> Any:
    for item in field.metadata:
        found = getattr(item, name, None)
        if found is not None:
            return found
    return None
