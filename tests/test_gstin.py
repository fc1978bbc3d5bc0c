import pytest

from gstinvoice.utils.gstin import is_valid_gstin, normalize_gstin, state_code_from_gstin


@pytest.mark.parametrize("gstin", ["27AAAAA0000A1Z5", "07BBBBB0000B1Z5", " 29abcde1234f1z5 "])
def test_valid_gstin(gstin):
    assert is_valid_gstin(gstin)


@pytest.mark.parametrize("gstin", ["", None, "27AAAAA0000A1Z", "27AAAAA0000A1X5", "AAAAAA0000A1Z5", "27AAAAA0000A0Z5"])
def test_invalid_gstin(gstin):
    assert not is_valid_gstin(gstin)


def test_state_code_from_gstin():
    assert state_code_from_gstin("27AAAAA0000A1Z5") == "27"
    assert state_code_from_gstin("not-a-gstin") is None


def test_normalize_gstin():
    assert normalize_gstin(" 27aaaaa 0000a1z5 ") == "27AAAAA0000A1Z5"
