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

import json
import os

import pytest

import formbind.i18n as i18n


def _path() -> str:
    return os.path.join(os.path.dirname(__file__), "testdata", "translations.json")


def test_catalog_primary_key():
    catalog = i18n.Catalog.from_file(_path())
    assert catalog(i18n.Key("user.email"), scope="formbind.labels") == "E-mail"


def test_catalog_falls_through_keys_in_order():
    catalog = i18n.Catalog.from_file(_path())
    default = [i18n.Key("user.missing"), i18n.Key("name"), "Literal"]
    assert catalog(i18n.Key("nowhere"), scope="formbind.labels", default=default) == "Your name"


def test_catalog_literal_default():
    catalog = i18n.Catalog.from_file(_path())
    assert catalog(i18n.Key("nowhere"), scope="formbind.labels", default=["Literal"]) == "Literal"


def test_catalog_missing_everything():
    catalog = i18n.Catalog()
    assert catalog(i18n.Key("nowhere"), scope="formbind.labels") is None


def test_catalog_ignores_branches():
    catalog = i18n.Catalog({"formbind": {"labels": {"user": {"email": "E-mail"}}}})
    assert catalog(i18n.Key("user"), scope="formbind.labels") is None
    assert catalog(i18n.Key("user.email.more"), scope="formbind.labels") is None


def test_catalog_update_merges_nested_keys():
    catalog = i18n.Catalog({"formbind": {"labels": {"email": "E-mail"}}})
    catalog.update({"formbind": {"labels": {"name": "Name"}}})
    assert catalog.lookup("formbind.labels.email") == "E-mail"
    assert catalog.lookup("formbind.labels.name") == "Name"


def test_catalog_copies_translations():
    translations = {"formbind": {"labels": {"email": "E-mail"}}}
    catalog = i18n.Catalog(translations)
    catalog.update({"formbind": {"labels": {"email": "Mail"}}})
    assert translations["formbind"]["labels"]["email"] == "E-mail"


def test_catalog_from_bad_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        i18n.Catalog.from_file(path)


def test_key_is_a_string():
    key = i18n.Key("user.email")
    assert key == "user.email"
    assert repr(key) == "Key('user.email')"


def test_catalog_blank_entry_falls_through():
    catalog = i18n.Catalog({"formbind": {"labels": {"user": {"email": "  "}, "email": "E-mail"}}})
    default = [i18n.Key("email"), "Fallback"]
    assert catalog(i18n.Key("user.email"), scope="formbind.labels", default=default) == "E-mail"


def test_catalog_blank_entries_reach_literal_default():
    catalog = i18n.Catalog({"formbind": {"labels": {"email": ""}}})
    assert catalog(i18n.Key("email"), scope="formbind.labels", default=["Fallback"]) == "Fallback"
