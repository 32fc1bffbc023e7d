from __future__ import annotations

import pytest

from ass_client.common.errors import JsonError
from ass_client.domain.document import AssData


def test_create_from_string():
    data = AssData.parse('{"id": 3, "path": "path"}')

    assert data.get_id() == 3
    assert data.get_path() == "path"


def test_missing_fields_are_absent():
    data = AssData.parse('{"name": "n"}')

    assert data.get_id() is None
    assert data.get_path() is None
    assert data.get("name") == "n"


def test_wrong_types_are_absent():
    data = AssData.parse('{"id": "3", "path": 7, "flag": true}')

    assert data.get_id() is None
    assert data.get_path() is None
    assert data.get_int("flag") is None


def test_non_object_documents():
    assert AssData.parse("null").get_id() is None
    assert AssData.parse("[1, 2]").get("id") is None
    assert AssData.parse('"text"').as_dict() is None


def test_items_of_array():
    data = AssData.parse('[{"id": 1}, {"id": 2}]')

    assert [item.get_id() for item in data.items()] == [1, 2]
    assert AssData.parse('{"id": 1}').items() == []


@pytest.mark.parametrize("text", ["", "{", "{'id': 1}", b"\xff"])
def test_malformed_body_fails(text):
    with pytest.raises(JsonError):
        AssData.parse(text)


def test_str_dumps_json():
    assert str(AssData({"id": 1})) == '{"id": 1}'
