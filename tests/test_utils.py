from datetime import datetime, timedelta, timezone

from firstdata.utils import as_int, as_str, extract_embedded_code, find_value, gge4_timestamp

TREE = {
    "transaction_approved": 1,
    "level1": {
        "level2": {
            "level3": {"authorization_num": "ET1234"},
        },
        "flag": 0,
    },
    "items": [{"avs": "Y"}],
}


def test_find_value_at_top_level():
    assert find_value(TREE, "transaction_approved") == 1


def test_find_value_at_depth_three():
    assert find_value(TREE, "authorization_num") == "ET1234"


def test_find_value_inside_lists():
    assert find_value(TREE, "avs") == "Y"


def test_find_value_missing_key_is_none():
    assert find_value(TREE, "transarmor_token") is None
    assert find_value({}, "anything") is None
    assert find_value("not a tree", "anything") is None


def test_find_value_returns_falsy_matches():
    assert find_value(TREE, "flag") == 0


def test_find_value_is_depth_first_in_insertion_order():
    tree = {"outer": {"code": "nested"}, "code": "top"}
    assert find_value(tree, "code") == "nested"
    tree = {"code": "top", "outer": {"code": "nested"}}
    assert find_value(tree, "code") == "top"


def test_extract_embedded_code():
    assert extract_embedded_code("Error (204) occurred") == 204
    assert extract_embedded_code("Unauthorized Request. Bad or missing credentials.") is None
    assert extract_embedded_code("") is None


def test_gge4_timestamp_format():
    now = datetime(2024, 3, 5, 9, 7, 9, 123456, tzinfo=timezone(timedelta(hours=-5)))
    assert gge4_timestamp(now) == "2024-03-05T14:07:09Z"


def test_coercions():
    assert as_int("100") == 100
    assert as_int(True) == 1
    assert as_int("abc") is None
    assert as_int(None) is None
    assert as_str(1234) == "1234"
    assert as_str(None) is None


def test_find_value_in_very_deep_tree():
    tree = leaf = {}
    for _ in range(5000):
        leaf["next"] = {}
        leaf = leaf["next"]
    leaf["avs"] = "Z"
    assert find_value(tree, "avs") == "Z"
    assert find_value(tree, "cavv") is None


def test_as_int_on_infinity():
    assert as_int(float("inf")) is None
