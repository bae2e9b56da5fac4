import logging

import pytest

from otpcore import TOTP, InvalidEncoding

# RFC 6238 appendix B, SHA-1 rows: (unix seconds, 8 digit code)
RFC6238_VECTORS = [
    (59, "94287082"),
    (1111111109, "07081804"),
    (1111111111, "14050471"),
    (1234567890, "89005924"),
    (2000000000, "69279037"),
    (20000000000, "65353130"),
]


@pytest.mark.parametrize("seconds,code", RFC6238_VECTORS)
def test_totp_rfc6238_vectors(rfc_secret: str, seconds: int, code: str):
    assert TOTP(rfc_secret, digits=8).at(seconds * 1000) == code
    assert TOTP(rfc_secret).at(seconds * 1000) == code[-6:]


def test_timecode(rfc_secret: str):
    totp = TOTP(rfc_secret)
    assert totp.timecode(0) == 0
    assert totp.timecode(29999) == 0
    assert totp.timecode(30000) == 1
    assert totp.timecode(59000) == 1
    assert totp.timecode(1111111109000) == 0x23523EC

    assert TOTP(rfc_secret, interval=60).timecode(59000) == 0


def test_same_code_within_time_step(rfc_secret: str):
    totp = TOTP(rfc_secret)
    assert totp.at(0) == totp.at(29999) == "755224"
    assert totp.at(30000) == "287082"


def test_at_is_deterministic(rfc_secret: str):
    totp = TOTP(rfc_secret)
    assert totp.at(1234567890123) == totp.at(1234567890123)
    assert TOTP(rfc_secret).at(1234567890123) == totp.at(1234567890123)


def test_fixed_width(rfc_secret: str):
    totp = TOTP(rfc_secret)
    for step in range(0, 500):
        code = totp.at(step * 30000)
        assert len(code) == 6
        assert code.isdigit()


def test_now_uses_clock(rfc_secret: str):
    totp = TOTP(rfc_secret, clock=lambda: 59000)
    assert totp.now() == "287082"


def test_verify(rfc_secret: str):
    totp = TOTP(rfc_secret)
    assert totp.verify("287082", 59000)
    assert totp.verify("287082", 30000)
    assert not totp.verify("287082", 60000)
    assert not totp.verify("000000", 59000)
    assert not totp.verify("", 59000)
    assert not totp.verify("2870820", 59000)


def test_verify_defaults_to_clock(rfc_secret: str):
    totp = TOTP(rfc_secret, clock=lambda: 1111111109000)
    assert totp.verify("081804")
    assert not totp.verify("287082")


def test_verify_is_exact_string_match(rfc_secret: str):
    assert not TOTP(rfc_secret).verify("２８７０８２", 59000)
    assert not TOTP(rfc_secret).verify(" 287082", 59000)


def test_verify_lone_surrogate_is_mismatch(rfc_secret: str):
    assert TOTP(rfc_secret).verify("\ud800", 59000) is False
    assert TOTP(rfc_secret).verify("28708\udfff", 59000) is False


def test_verify_invalid_secret_raises():
    with pytest.raises(InvalidEncoding):
        TOTP("1!!!").verify("000000", 59000)


def test_verify_failure_logged_without_code(rfc_secret: str, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="otpcore")
    assert not TOTP(rfc_secret).verify("123456", 59000)

    assert "123456" not in caplog.text
    assert rfc_secret not in caplog.text
    assert any(record.name == "otpcore.totp" for record in caplog.records)


def test_custom_configuration(rfc_secret: str):
    totp = TOTP(rfc_secret, digits=8, interval=60)
    # 59 s falls in counter 0 with a 60 s interval
    assert totp.at(59000) == "84755224"
    assert totp.at(60000) == "94287082"


@pytest.mark.parametrize("interval", [0, -30, 1.5, True])
def test_invalid_interval(rfc_secret: str, interval):
    with pytest.raises(ValueError):
        TOTP(rfc_secret, interval=interval)


def test_negative_timestamp_rejected(rfc_secret: str):
    with pytest.raises(ValueError):
        TOTP(rfc_secret).at(-30000)
