import pytest

from firstdata.response_codes import (
    BANK_RESPONSE_CODES,
    DECLINE,
    REJECT,
    SUCCESS,
    classification_of,
    get_response_code,
)


def test_known_entries():
    assert get_response_code(100).name == "Approved"
    assert get_response_code("303").name == "Processor Decline"
    assert get_response_code(204).action == "Fix"
    assert get_response_code(0).code == "000"


def test_classifications():
    assert classification_of(100) == SUCCESS
    assert classification_of(204) == REJECT
    assert classification_of(303) == DECLINE
    assert classification_of(42) is None
    assert classification_of(None) is None
    assert classification_of("abc") is None


def test_every_entry_is_consistent():
    for number, entry in BANK_RESPONSE_CODES.items():
        assert int(entry.code) == number
        assert entry.response in (SUCCESS, REJECT, DECLINE)
        assert entry.name


def test_table_is_read_only():
    with pytest.raises(TypeError):
        BANK_RESPONSE_CODES[42] = BANK_RESPONSE_CODES[100]


def test_infinite_code_has_no_entry():
    assert get_response_code(float("inf")) is None
    assert classification_of(float("-inf")) is None
