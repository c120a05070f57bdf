import random
import string

import pytest

from indian_docs.core.checksums import (
    gst_check_char,
    gst_checksum_ok,
    verhoeff_check_digit,
    verhoeff_ok,
)
from indian_docs.core.errors import InvalidDocumentError

ALNUM = string.digits + string.ascii_uppercase


class TestVerhoeff:
    def test_known_check_digit(self):
        assert verhoeff_check_digit("23412341234") == "6"
        assert verhoeff_ok("234123412346")

    def test_wrong_check_digit_rejected(self):
        assert not verhoeff_ok("234123412345")

    def test_empty_and_non_digits(self):
        assert verhoeff_ok("") is False
        assert verhoeff_ok("23412341234A") is False
        with pytest.raises(InvalidDocumentError, match="Input cannot be empty"):
            verhoeff_check_digit("")
        with pytest.raises(ValueError):
            verhoeff_check_digit("12a4")

    def test_generated_digit_always_validates(self):
        rng = random.Random(20240101)
        for _ in range(500):
            base = "".join(rng.choice(string.digits) for _ in range(rng.randint(1, 20)))
            check = verhoeff_check_digit(base)
            assert len(check) == 1 and check in string.digits
            assert verhoeff_ok(base + check), base

    def test_single_digit_errors_detected(self):
        number = "234123412346"
        for i, ch in enumerate(number):
            for d in string.digits:
                if d == ch:
                    continue
                assert not verhoeff_ok(number[:i] + d + number[i + 1:])

    def test_adjacent_transpositions_detected(self):
        number = "234123412346"
        for i in range(len(number) - 1):
            a, b = number[i], number[i + 1]
            if a == b:
                continue
            assert not verhoeff_ok(number[:i] + b + a + number[i + 2:])


class TestGstChecksum:
    def test_known_check_char(self):
        assert gst_check_char("29ABCDE1234F1Z") == "W"
        assert gst_checksum_ok("29ABCDE1234F1ZW")

    def test_wrong_check_char_rejected(self):
        assert not gst_checksum_ok("29ABCDE1234F1Z5")
        assert not gst_checksum_ok("29ABCDE1234F1Z6")

    @pytest.mark.parametrize("bad", ["29ABCDE1234F1", "29ABCDE1234F1ZZ"])
    def test_calculate_rejects_wrong_length(self, bad):
        with pytest.raises(InvalidDocumentError, match="exactly 14 characters"):
            gst_check_char(bad)

    @pytest.mark.parametrize("bad", ["29ABCDE1234F1@", "29ABCDE1234F1#", "29abcde1234f1z"])
    def test_calculate_rejects_bad_characters(self, bad):
        with pytest.raises(InvalidDocumentError, match="Invalid character"):
            gst_check_char(bad)

    def test_validate_never_raises(self):
        assert gst_checksum_ok("29ABCDE1234F1") is False
        assert gst_checksum_ok("29ABCDE1234F1ZZ5") is False
        assert gst_checksum_ok("29ABCDE1234F1@W") is False
        assert gst_checksum_ok("") is False

    def test_check_char_is_single_alphanumeric(self):
        for base in ("29ABCDE1234F1Z", "09ALWPG5809L1Z", "27BNZAA2318J1Z"):
            check = gst_check_char(base)
            assert len(check) == 1 and check in ALNUM

    def test_calculated_char_always_validates(self):
        rng = random.Random(36)
        for _ in range(500):
            base = "".join(rng.choice(ALNUM) for _ in range(14))
            assert gst_checksum_ok(base + gst_check_char(base)), base
