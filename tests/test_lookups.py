import pytest

from indian_docs import lookups
from indian_docs.core.patterns import VALID_STATE_CODES


def test_tables_loaded():
    assert lookups.BANK_NAMES["SBIN"] == "State Bank of India"
    assert lookups.STATE_NAMES["01"] == "Jammu and Kashmir"
    assert lookups.UPI_PROVIDER_NAMES["ybl"] == "Yes Bank"


def test_every_valid_state_code_has_a_name():
    assert set(lookups.STATE_NAMES) == set(VALID_STATE_CODES)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        lookups.BANK_NAMES["TEST"] = "Test Bank"


def test_case_folding():
    assert lookups.bank_name("kkbk") == "Kotak Mahindra Bank"
    assert lookups.provider_name("PhonePe") == "PhonePe"
    assert lookups.provider_name("PSB") == "Punjab & Sind Bank"
    assert lookups.state_name("36") == "Telangana"
