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

from typing import TYPE_CHECKING, Any, ClassVar

import formbind.components.errors as errors
import formbind.components.hints as hints
import formbind.components.labels as labels
import formbind.components.maxlength as maxlength
import formbind.components.pattern as pattern
import formbind.components.placeholders as placeholders
import formbind.components.readonly as readonly
import formbind.components.required as required
import formbind.config as config
import formbind.defaults as defaults
import formbind.i18n as i18n
import formbind.log as log

if TYPE_CHECKING:
    from collections.abc import Mapping

    import markupsafe

    import formbind.builder as builder
    import formbind.htm as htm
    import formbind.models.metadata as metadata


class Base:
    default_options: ClassVar[defaults.Defaults] = defaults.Defaults().disable("maxlength", "placeholder", "pattern")

    @classmethod
    def disable(cls, *keys: str) -> None:
        cls.default_options = cls.default_options.disable(*keys)
        log.debug(f"Disabled {', '.join(keys)} for {cls.__name__}")

    @classmethod
    def enable(cls, *keys: str) -> None:
        cls.default_options = cls.default_options.enable(*keys)
        log.debug(f"Enabled {', '.join(keys)} for {cls.__name__}")

    def __init__(
        self,
        builder: builder.Builder,
        attribute_name: str,
        column: metadata.Column | None,
        input_type: str,
        options: Mapping[str, Any] | None = None,
    ):
        options = dict(options or {})
        self.builder = builder
        self.attribute_name = attribute_name
        self.column = column
        self.input_type = input_type
        self.reflection: metadata.Reflection | None = options.pop("reflection", None)
        self.options = self.default_options.merge(options)

        self.errors = errors.ErrorText(self)
        self.hints = hints.Hint(self)
        self.labels = labels.Label(self)
        self.maxlength = maxlength.Maxlength(self)
        self.pattern = pattern.Pattern(self)
        self.placeholders = placeholders.Placeholder(self)
        self.readonly = readonly.Readonly(self)
        self.required_calculator = required.Required(self)

        self.required = self.required_calculator.calculate()

        # html_options_for keeps a reference to input_html_classes
        # Classes appended to it before rendering still reach input_html_options
        self.input_html_classes: list[str] = [
            c for c in (input_type, self.required_class, self.readonly.css_class()) if c
        ]
        self.input_html_options = self.html_options_for("input", self.input_html_classes)
        if self.has_readonly():
            self.input_html_options["readonly"] = True
        if self.has_autofocus():
            self.input_html_options["autofocus"] = True

    def input(self) -> htm.Element | htm.VoidElement:
        raise NotImplementedError

    def input_options(self) -> dict[str, Any]:
        return self.options

    def has_autofocus(self) -> bool:
        return bool(self.options.get("autofocus"))

    def has_feature(self, name: str) -> bool:
        return self.options.get(name) is not False

    def has_readonly(self) -> bool:
        return self.readonly.has_readonly()

    @property
    def input_id(self) -> str:
        return self.builder.field_id(self.attribute_name)

    @property
    def limit(self) -> int | None:
        return self.column.limit if self.column else None

    @property
    def lookup_action(self) -> str | None:
        return self.builder.lookup_action

    @property
    def lookup_model_names(self) -> list[str]:
        return self.builder.lookup_model_names

    @property
    def object(self) -> Any:
        return self.builder.object

    @property
    def reflection_or_attribute_name(self) -> str:
        return self.reflection.name if self.reflection else self.attribute_name

    @property
    def required_class(self) -> str:
        return self.required_calculator.css_class(self.required)

    def error(self) -> markupsafe.Markup | None:
        return self.errors.error()

    def full_error(self) -> markupsafe.Markup | None:
        return self.errors.full_error()

    def has_errors(self) -> bool:
        return self.errors.has_errors()

    def hint(self) -> str | None:
        return self.hints.text()

    def label(self) -> htm.Element:
        return self.labels.element()

    def label_text(self) -> str:
        return self.labels.text()

    def html_options_for(self, namespace: str, extra: list[str]) -> dict[str, Any]:
        """Return the HTML options given for a namespace, with extra classes.

        The extra list itself becomes the class value, so the caller can
        keep adding classes to it until the element is rendered.
        """
        html_options = dict(self.options.get(f"{namespace}_html") or {})
        if extra:
            if html_options.get("class") is not None:
                extra.append(html_options["class"])
            html_options["class"] = extra
        return html_options

    def translate(self, namespace: str, default: str = "") -> str | None:
        """Look up text for this attribute in the translation catalog.

        Keys are tried from the most specific to the least specific, below
        the scope {scope}.{namespace}, where namespace is labels, hints or
        placeholders:

            {model}.{nested}.{action}.{attribute}
            {model}.{nested}.{attribute}
            {nested}.{action}.{attribute}
            {nested}.{attribute}
            {attribute}

        The bare attribute key is not used for associations. When no key
        matches, the default is used, and a blank result gives None. When
        translation is switched off, None is returned without any lookup.
        """
        conf = config.get()
        if not conf.TRANSLATE:
            return None

        name = self.reflection_or_attribute_name
        action = self.lookup_action
        model_names = list(self.lookup_model_names)
        lookups: list[i18n.Key | str] = []

        while model_names:
            joined_model_names = ".".join(model_names)
            model_names.pop(0)
            if action:
                lookups.append(i18n.Key(f"{joined_model_names}.{action}.{name}"))
            lookups.append(i18n.Key(f"{joined_model_names}.{name}"))
        if self.reflection is None:
            lookups.append(i18n.Key(self.attribute_name))
        lookups.append(default)

        text = self.builder.translator(lookups[0], scope=f"{conf.I18N_SCOPE}.{namespace}", default=lookups[1:])
        if (text is None) or (not text.strip()):
            return None
        return text

    def add_size(self) -> None:
        if self.input_html_options.get("size") is not None:
            return
        sizes = [size for size in (self.limit, config.get().DEFAULT_INPUT_SIZE) if size is not None]
        if sizes:
            self.input_html_options["size"] = min(sizes)

    def apply_components(self) -> None:
        self.required_calculator.apply(self.required)
        self.maxlength.apply()
        self.pattern.apply()
        self.placeholders.apply()
