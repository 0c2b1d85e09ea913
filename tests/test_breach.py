import pytest
from pydantic import ValidationError

from warden import breach_count_from_range, breach_lookup_key

PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


def test_lookup_key_split():
    key = breach_lookup_key("password")
    assert key.prefix == "5BAA6"
    assert key.suffix == PASSWORD_SUFFIX
    assert key.prefix + key.suffix == key.digest


def test_lookup_key_wire_names():
    assert set(breach_lookup_key("x").to_wire()) == {"digest", "prefix", "suffix"}


def test_lookup_key_is_immutable():
    key = breach_lookup_key("x")
    with pytest.raises(ValidationError):
        key.prefix = "00000"


def test_count_found():
    body = "\r\n".join([
        "0018A45C4D1DEF81644B54AB7F969B88D65:3",
        f"{PASSWORD_SUFFIX}:9545824",
        "00D4F6E8FA6EECAD2A3AA415EEC418D38EC:2",
    ])
    assert breach_count_from_range("password", body) == 9545824


def test_count_is_case_insensitive():
    assert breach_count_from_range("password", f"{PASSWORD_SUFFIX.lower()}:12") == 12


def test_count_absent():
    assert breach_count_from_range("password", "0018A45C4D1DEF81644B54AB7F969B88D65:3") == 0
    assert breach_count_from_range("password", "") == 0


def test_padding_entry_is_not_a_hit():
    assert breach_count_from_range("password", f"{PASSWORD_SUFFIX}:0") == 0


def test_malformed_lines_skipped():
    body = "\n".join(["no separator here", f"{PASSWORD_SUFFIX}:7"])
    assert breach_count_from_range("password", body) == 7


def test_unparseable_count_is_zero():
    assert breach_count_from_range("password", f"{PASSWORD_SUFFIX}:lots") == 0
