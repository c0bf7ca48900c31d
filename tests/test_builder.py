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

import logging
import os

import pydantic
import pytest

import formbind.builder as builder
import formbind.config as config
import formbind.i18n as i18n
import formbind.inputs as inputs
import formbind.inputs.boolean as boolean
import formbind.inputs.numeric as numeric
import formbind.inputs.string as string
import formbind.inputs.text as text


class User(pydantic.BaseModel):
    name: str = pydantic.Field(max_length=10, description="Full name")
    nickname: str | None = None
    age: int = 0
    code: str = pydantic.Field(default="", pattern=r"^[A-Z]+$")
    bio: str = ""
    password: str = ""
    company_id: int | None = None
    active: bool = False


def _catalog() -> i18n.Catalog:
    return i18n.Catalog.from_file(os.path.join(os.path.dirname(__file__), "testdata", "translations.json"))


def _form(action: str | None = "new", **kwargs) -> builder.Builder:
    return builder.Builder("user", User(name="Ada"), action=action, translator=_catalog(), **kwargs)


def test_lookup_model_names():
    form = builder.Builder("user[profile_attributes][0][address]")
    assert form.lookup_model_names == ["user", "profile", "address"]


def test_lookup_model_names_without_child_index():
    form = builder.Builder("user[posts_attributes][new_post][comment]", child_index="new_post")
    assert form.lookup_model_names == ["user", "posts", "comment"]


@pytest.mark.parametrize(
    ("action", "expected"),
    [("create", "new"), ("update", "edit"), ("show", "show"), (None, None)],
)
def test_lookup_action(action: str | None, expected: str | None):
    assert builder.Builder("user", action=action).lookup_action == expected


def test_field_id_and_name():
    form = builder.Builder("user[profile]")
    assert form.field_id("email") == "user_profile_email"
    assert form.field_name("email") == "user[profile][email]"


def test_default_input_types():
    form = _form()
    assert isinstance(form.input("name"), string.StringInput)
    assert isinstance(form.input("nickname"), string.StringInput)
    assert isinstance(form.input("age"), numeric.NumericInput)
    assert form.input("password").input_type == "password"
    assert isinstance(form.input("bio", as_="text"), text.TextInput)


def test_unknown_input_type(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING), pytest.raises(ValueError, match="colour"):
        _form().input("name", as_="colour")
    assert any("colour" in record.getMessage() for record in caplog.records)


def test_register_input_type(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setitem(inputs.MAPPINGS, "colour", string.StringInput)
    assert _form().input("name", as_="colour").input_type == "colour"


def test_column_from_model_constraints(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.AppConfig, "DEFAULT_INPUT_SIZE", 50)
    binding = _form().input("name")
    assert binding.column is not None
    assert binding.limit == 10
    binding.input()
    assert binding.input_html_options["size"] == 10


def test_required_by_validators():
    form = _form()
    assert form.input("name").required is True
    assert form.input("nickname").required is False
    assert form.input("nickname", required=True).required is True


def test_association_binds_id_and_reflection():
    binding = _form().association("company", as_="string")
    assert binding.attribute_name == "company_id"
    assert binding.reflection is not None
    assert binding.reflection.name == "company"
    assert binding.label_text() == "Employer"


def test_label_text_lookup_order():
    assert _form().input("name").label_text() == "Your name"
    assert _form(action="new").input("bio").label_text() == "Bio"
    # Action-qualified keys win over the plain model key
    creating = builder.Builder("user", action="create", translator=_catalog())
    assert creating.input("email").label_text() == "Sign in e-mail"
    editing = builder.Builder("user", action="edit", translator=_catalog())
    assert editing.input("email").label_text() == "E-mail"


def test_label_text_falls_back_to_description(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.AppConfig, "TRANSLATE", False)
    assert _form().input("name").label_text() == "Full name"


def test_label_option_wins():
    assert _form().input("name", label="Who").label_text() == "Who"


def test_label_element_marks_required():
    html = str(_form().input("name", label_html={"class": "big"}).label())
    assert html.startswith("<label")
    assert 'for="user_name"' in html
    assert 'class="string required big"' in html
    assert '<abbr title="required">*</abbr>' in html
    assert "Who" not in html


def test_label_element_without_marker():
    html = str(_form().input("nickname").label())
    assert "<abbr" not in html
    assert 'class="string optional"' in html


def test_hint_text():
    form = builder.Builder("user", translator=_catalog())
    assert form.input("email").hint() == "We never share it"
    assert form.input("email", hint="Work address").hint() == "Work address"
    assert form.input("email", hint=False).hint() is None
    assert form.input("name").hint() is None


def test_placeholder_disabled_by_default():
    binding = _form().input("name")
    binding.input()
    assert "placeholder" not in binding.input_html_options


def test_placeholder_when_enabled():
    binding = _form().input("name", placeholder=True)
    binding.input()
    assert binding.input_html_options["placeholder"] == "Ada Lovelace"


def test_placeholder_text_from_options():
    binding = _form().input("nickname", placeholder="Ada")
    binding.input()
    assert binding.input_html_options["placeholder"] == "Ada"


def test_placeholder_does_not_overwrite_caller():
    binding = _form().input("name", placeholder=True, input_html={"placeholder": "Mine"})
    binding.input()
    assert binding.input_html_options["placeholder"] == "Mine"


def test_maxlength_when_enabled():
    binding = _form().input("name", maxlength=True)
    binding.input()
    assert binding.input_html_options["maxlength"] == 10


def test_maxlength_explicit_value():
    binding = _form().input("nickname", maxlength=4)
    binding.input()
    assert binding.input_html_options["maxlength"] == 4


def test_pattern_when_enabled():
    binding = _form().input("code", pattern=True)
    binding.input()
    assert binding.input_html_options["pattern"] == "^[A-Z]+$"


def test_pattern_explicit_value():
    binding = _form().input("nickname", pattern="[a-z]+")
    binding.input()
    assert binding.input_html_options["pattern"] == "[a-z]+"


def test_numeric_ignores_maxlength_by_default():
    binding = _form().input("age")
    html = str(binding.input())
    assert 'type="number"' in html
    assert 'value="0"' in html
    assert "maxlength" not in html
    assert "size" not in html


def test_string_input_value_and_password():
    assert 'value="Ada"' in str(_form().input("name").input())
    form = builder.Builder("user", User(name="Ada", password="secret"))
    assert "secret" not in str(form.input("password").input())


def test_text_input_renders_value():
    form = builder.Builder("user", User(name="Ada", bio="Hello <there>"))
    html = str(form.input("bio", as_="text").input())
    assert html.startswith("<textarea")
    assert "Hello &lt;there&gt;</textarea>" in html
    assert "size" not in html


def test_browser_validations_off(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.AppConfig, "BROWSER_VALIDATIONS", False)
    binding = _form().input("name")
    binding.input()
    assert "required" not in binding.input_html_options


def test_boolean_field_renders_checkbox():
    binding = _form().input("active")
    assert isinstance(binding, boolean.BooleanInput)
    html = str(binding.input())
    assert 'type="checkbox"' in html
    assert 'class="boolean optional"' in html
    assert "checked" not in html
    assert "size" not in html


def test_boolean_field_checked_when_true():
    form = builder.Builder("user", User(name="Ada", active=True))
    assert " checked" in str(form.input("active").input())
