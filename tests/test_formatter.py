import json
from datetime import datetime

import pytest

from core.formatter import (
    EMPTY_ARRAY_MESSAGE,
    PayloadKind,
    classify,
    format_response,
)

URL = "https://api.example.com/items"


class TestClassify:
    """Payload shape detection"""

    @pytest.mark.parametrize("payload, kind", [
        ([], PayloadKind.EMPTY_LIST),
        ([{"a": 1}], PayloadKind.OBJECT_LIST),
        ([1, 2, 3], PayloadKind.VALUE_LIST),
        ({"a": 1}, PayloadKind.MAPPING),
        ("plain text", PayloadKind.SCALAR),
        (42, PayloadKind.SCALAR),
        (None, PayloadKind.SCALAR),
        (True, PayloadKind.SCALAR),
    ])
    def test_kinds(self, payload, kind):
        assert classify(payload) == kind


class TestLists:
    """Array payloads"""

    def test_empty_array_message_ignores_source(self):
        assert format_response([], URL) == EMPTY_ARRAY_MESSAGE
        assert format_response([], "https://other.example.org") == EMPTY_ARRAY_MESSAGE

    def test_object_list_truncated_to_three_items(self):
        text = format_response([{"a": 1}, {"a": 2}, {"a": 3}, {"a": 4}], URL)

        assert text.startswith(f"Response from {URL}")
        assert "Found 4 items" in text
        assert "Item 1:" in text
        assert "Item 3:" in text
        assert "Item 4:" not in text
        assert text.count("  a: ") == 3
        assert "... and 1 more items" in text

    def test_object_list_without_truncation(self):
        text = format_response([{"a": 1}, {"a": 2}], URL)
        assert "Found 2 items" in text
        assert "more items" not in text

    def test_object_list_nested_values_serialized_inline(self):
        text = format_response([{"id": 1, "tags": ["x", "y"], "owner": {"name": "n"}}], URL)
        assert '  tags: ["x", "y"]' in text
        assert '  owner: {"name": "n"}' in text

    def test_value_list_is_never_truncated(self):
        # Lists of plain values are shown in full, unlike lists of objects.
        items = list(range(10))
        text = format_response(items, URL)

        assert "Found 10 items" in text
        assert "0, 1, 2, 3, 4, 5, 6, 7, 8, 9" in text
        assert "more items" not in text

    def test_value_list_renders_json_values(self):
        text = format_response([True, None, {"a": 1}, "x"], URL)
        assert 'true, null, {"a": 1}, x' in text

    def test_first_item_decides_object_list(self):
        # Later non-object items are shown inline under their own heading.
        text = format_response([{"a": 1}, 2], URL)

        assert classify([{"a": 1}, 2]) == PayloadKind.OBJECT_LIST
        assert "Found 2 items" in text
        assert "Item 1:\n  a: 1" in text
        assert "Item 2:\n  2" in text

    def test_value_list_with_object_later_stays_value_list(self):
        assert classify([2, {"a": 1}]) == PayloadKind.VALUE_LIST


class TestMappings:
    """Object payloads"""

    def test_error_short_circuits(self):
        text = format_response({"error": "E", "message": "M", "data": [1, 2]}, URL)
        lines = [line for line in text.splitlines()[1:] if line]

        assert lines == ["Error: E", "Message: M"]
        assert "Data" not in text

    def test_error_without_message(self):
        text = format_response({"error": "Not found"}, URL)
        assert "Error: Not found" in text
        assert "Message" not in text

    def test_status_rendered_once(self):
        text = format_response({"status": "ok", "count": 5}, URL)

        assert "Status: ok" in text
        assert "Count: 5" in text
        assert text.count("Status") == 1

    @pytest.mark.parametrize("success, expected", [(True, "Success"), (False, "Failed")])
    def test_success_flag(self, success, expected):
        text = format_response({"success": success, "id": 7}, URL)
        assert f"Status: {expected}" in text
        assert "Id: 7" in text
        assert "Success: " not in text

    def test_status_preferred_over_success(self):
        text = format_response({"success": False, "status": "pending"}, URL)
        assert "Status: pending" in text
        assert "Failed" not in text

    def test_label_capitalizes_first_character_only(self):
        text = format_response({"userId": 3, "HTTPCode": 200}, URL)
        assert "UserId: 3" in text
        assert "HTTPCode: 200" in text

    def test_short_array_field_lists_elements(self):
        text = format_response({"tags": ["a", "b"]}, URL)
        assert "Tags: 2 items\n  - a\n  - b" in text

    def test_long_and_empty_array_fields_only_counted(self):
        text = format_response({"ids": list(range(6)), "none": []}, URL)
        assert "Ids: 6 items" in text
        assert "None: 0 items" in text
        assert "  - " not in text

    def test_nested_object_one_level(self):
        text = format_response({"owner": {"login": "octocat", "meta": {"x": 1}}}, URL)
        assert "Owner:" in text
        assert "  • login: octocat" in text
        assert '  • meta: {"x": 1}' in text

    def test_fields_in_key_order(self):
        text = format_response({"b": 1, "a": 2}, URL)
        assert text.index("B: 1") < text.index("A: 2")
    def test_json_literals_rendered_as_json(self):
        text = format_response({"deleted": None, "active": True, "admin": False}, URL)
        assert "Deleted: null" in text
        assert "Active: true" in text
        assert "Admin: false" in text

    def test_non_ascii_text_kept_readable(self):
        text = format_response({"owner": {"tags": ["café"]}, "city": "Zürich"}, URL)
        assert '  • tags: ["café"]' in text
        assert "City: Zürich" in text
        assert "\\u00e9" not in text


class TestScalars:
    """Primitive and text payloads"""

    def test_text_payload(self):
        assert format_response("hello", URL) == f"Response from {URL}\n\nhello"

    def test_number_payload(self):
        assert format_response(3.5, URL).endswith("\n\n3.5")

    def test_null_payload(self):
        assert format_response(None, URL).endswith("\n\nnull")
        assert format_response(3.5, URL).endswith("\n\n3.5")


class TestFallback:
    """Formatting never raises"""

    def test_unserializable_nested_value_falls_back_to_json(self):
        payload = {"meta": {"created": {"at": datetime(2024, 1, 2)}}}
        text = format_response(payload, URL)

        assert text.startswith(f"Response from {URL}")
        assert json.dumps(payload, indent=2, default=str) in text

    def test_non_string_key_falls_back(self):
        text = format_response({1: "one"}, URL)
        assert '"1": "one"' in text

    def test_circular_reference_does_not_raise(self):
        inner = {}
        inner["self"] = inner
        text = format_response({"outer": {"inner": inner}}, URL)
        assert text.startswith(f"Response from {URL}")

    def test_value_whose_str_raises_does_not_raise(self):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("boom")

        text = format_response({"a": Unprintable()}, URL)

        assert text.startswith(f"Response from {URL}")
        assert "Unprintable" in text

    def test_deeply_nested_payload_does_not_raise(self):
        deep = []
        for _ in range(100_000):
            deep = [deep]

        text = format_response([1, deep], URL)

        assert text.startswith(f"Response from {URL}")

    def test_fallback_keeps_non_ascii(self):
        text = format_response({1: "café"}, URL)
        assert '"1": "café"' in text
