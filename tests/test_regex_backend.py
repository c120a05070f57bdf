import pytest

from indian_docs.detect.regex_backend import RegexBackend

SAMPLE = (
    "PAN ABCDE1234F, Aadhaar 2341 2341 2346, GSTIN 29ABCDE1234F1ZW, "
    "IFSC SBIN0001234 and pay alice.w@okaxis."
)


@pytest.fixture
def backend():
    return RegexBackend()


def test_detects_every_type(backend):
    spans = backend.detect(SAMPLE)
    found = {s.type: s.text for s in spans}
    assert found == {
        "PAN": "ABCDE1234F",
        "AADHAAR": "2341 2341 2346",
        "GSTIN": "29ABCDE1234F1ZW",
        "IFSC": "SBIN0001234",
        "UPI_VPA": "alice.w@okaxis",
    }


def test_offsets_point_into_original_text(backend):
    for s in backend.detect(SAMPLE):
        assert SAMPLE[s.start:s.end] == s.text


def test_lowercase_pan_detected(backend):
    spans = backend.detect("pan: abcde1234f")
    assert [s.type for s in spans] == ["PAN"]


def test_checksum_failures_are_dropped(backend):
    text = "Aadhaar 2341 2341 2345 and GSTIN 29ABCDE1234F1Z5"
    assert backend.detect(text) == []


def test_aadhaar_not_matched_inside_longer_numbers(backend):
    assert not any(s.type == "AADHAAR" for s in backend.detect("ref 92341234123461"))


def test_email_is_not_a_vpa(backend):
    assert not any(s.type == "UPI_VPA" for s in backend.detect("mail alice@example.com"))


def test_type_filter():
    only_pan = RegexBackend(types=["pan"])
    assert {s.type for s in only_pan.detect(SAMPLE)} == {"PAN"}


def test_checksum_types_rank_above_format_only(backend):
    conf = {r[2]["type"]: r[2]["confidence"] for r in backend.rules}
    assert conf["GSTIN"] > conf["PAN"]
    assert conf["AADHAAR"] > conf["IFSC"]
