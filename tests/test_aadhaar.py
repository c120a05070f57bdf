import random

import pytest

from indian_docs import ErrorKind, InvalidDocumentError, verhoeff_check_digit
from indian_docs.validators import aadhaar

BASE = "23412341234"
VALID = BASE + verhoeff_check_digit(BASE)  # 234123412346


class TestValidate:
    def test_generated_numbers_are_valid(self):
        for base in (BASE, "37894561235", "52345678901"):
            assert aadhaar.validate(base + verhoeff_check_digit(base))

    def test_separators_are_ignored(self):
        assert aadhaar.validate(f"{VALID[:4]}-{VALID[4:8]}-{VALID[8:]}")
        assert aadhaar.validate(f"{VALID[:4]} {VALID[4:8]} {VALID[8:]}")
        assert aadhaar.validate(f" {VALID} ")

    @pytest.mark.parametrize(
        "value", ["", "23412341234", "2341234123456", "23412341234A", "abcd1234efgh"]
    )
    def test_bad_format(self, value):
        assert not aadhaar.validate(value)

    def test_leading_zero_or_one(self):
        assert not aadhaar.validate("023412341234")
        assert not aadhaar.validate("123412341234")

    def test_bad_checksum(self):
        assert not aadhaar.validate("234123412345")

    def test_any_eleven_digit_base_completes_to_valid(self):
        rng = random.Random(12)
        for _ in range(300):
            base = str(rng.randint(2, 9)) + "".join(str(rng.randint(0, 9)) for _ in range(10))
            assert aadhaar.validate(base + verhoeff_check_digit(base)), base


@pytest.mark.parametrize("digit", "0123456789")
def test_repeated_digits_rejected_by_both_paths(digit):
    number = digit * 12
    assert aadhaar.validate(number) is False
    assert aadhaar.validate_detailed(number).is_valid is False


def test_boolean_and_detailed_agree():
    rng = random.Random(7)
    samples = [VALID, "234123412345", "023412341234", "2341-2341-2346", "", "12345"]
    samples += ["".join(str(rng.randint(0, 9)) for _ in range(12)) for _ in range(500)]
    for s in samples:
        assert aadhaar.validate(s) == aadhaar.validate_detailed(s).is_valid, s


class TestValidateDetailed:
    def test_valid(self):
        result = aadhaar.validate_detailed("234123412346")
        assert result.is_valid
        assert result.error is None
        assert result.masked_aadhaar == "XXXX XXXX 2346"

    def test_valid_with_formatting(self):
        result = aadhaar.validate_detailed("2341-2341-2346")
        assert result.is_valid
        assert result.masked_aadhaar == "XXXX XXXX 2346"

    @pytest.mark.parametrize(
        "value, error, reason",
        [
            ("", "Aadhaar cannot be empty", ErrorKind.EMPTY_INPUT),
            ("23412341234", "Aadhaar must be 12 digits long", ErrorKind.LENGTH_MISMATCH),
            ("23412341234A", "Aadhaar must contain only digits", ErrorKind.STRUCTURAL_MISMATCH),
            ("023412341234", "Aadhaar cannot start with 0 or 1", ErrorKind.BUSINESS_RULE_VIOLATION),
            ("123412341234", "Aadhaar cannot start with 0 or 1", ErrorKind.BUSINESS_RULE_VIOLATION),
            ("234123412345", "Aadhaar checksum validation failed", ErrorKind.CHECKSUM_FAILURE),
            ("222222222222", "Aadhaar checksum validation failed", ErrorKind.CHECKSUM_FAILURE),
        ],
    )
    def test_errors(self, value, error, reason):
        result = aadhaar.validate_detailed(value)
        assert not result.is_valid
        assert result.error == error
        assert result.reason is reason
        assert result.masked_aadhaar is None


def test_normalize():
    assert aadhaar.normalize("2341-2341-2346") == "234123412346"
    assert aadhaar.normalize(" 2341 2341 2346 ") == "234123412346"


def test_mask_and_format():
    assert aadhaar.mask(VALID) == "XXXX XXXX " + VALID[8:]
    assert aadhaar.format(VALID) == f"{VALID[:4]} {VALID[4:8]} {VALID[8:]}"
    assert aadhaar.format("2341-2341-2346") == "2341 2341 2346"


@pytest.mark.parametrize("value", ["INVALID", "234123412345", "222222222222"])
def test_mask_and_format_reject_invalid(value):
    with pytest.raises(InvalidDocumentError, match="Invalid Aadhaar format"):
        aadhaar.mask(value)
    with pytest.raises(InvalidDocumentError):
        aadhaar.format(value)
