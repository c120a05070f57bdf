import pytest

from indian_docs import ErrorKind, InvalidDocumentError
from indian_docs.validators import pan


@pytest.mark.parametrize("value", ["ABCDE1234F", "abcde1234f", "ABCDE-1234-F", " ABCDE 1234 F "])
def test_valid_pans(value):
    assert pan.validate(value)


@pytest.mark.parametrize("value", ["", "12CDE1234F", "ABCDE12345", "ABCD1234F", "ABCDEF1234", "ABCDE1234FG"])
def test_invalid_pans(value):
    assert not pan.validate(value)


def test_detailed_valid_carries_normalized_form():
    result = pan.validate_detailed("abcde-1234-f")
    assert result.is_valid
    assert result.error is None
    assert result.reason is None
    assert result.normalized_pan == "ABCDE1234F"


@pytest.mark.parametrize(
    "value, error, reason",
    [
        ("", "PAN cannot be empty", ErrorKind.EMPTY_INPUT),
        ("ABCDE1234", "PAN must be 10 characters long", ErrorKind.LENGTH_MISMATCH),
        ("   ", "PAN must be 10 characters long", ErrorKind.LENGTH_MISMATCH),
        (
            "12CDE1234F",
            "PAN format is invalid. Expected format: 5 letters + 4 digits + 1 letter",
            ErrorKind.STRUCTURAL_MISMATCH,
        ),
    ],
)
def test_detailed_errors(value, error, reason):
    result = pan.validate_detailed(value)
    assert not result.is_valid
    assert result.error == error
    assert result.reason is reason
    assert result.normalized_pan is None


def test_normalize():
    assert pan.normalize(" abcde-1234-f ") == "ABCDE1234F"


def test_mask():
    assert pan.mask("ABCDE1234F") == "ABC******F"
    assert pan.mask("abcde 1234 f") == "ABC******F"


def test_mask_rejects_invalid():
    with pytest.raises(InvalidDocumentError, match="Invalid PAN format"):
        pan.mask("12CDE1234F")


def test_result_is_immutable():
    result = pan.validate_detailed("ABCDE1234F")
    with pytest.raises(AttributeError):
        result.is_valid = False
