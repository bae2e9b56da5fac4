from typing import Optional, Union

from . import base32
from .base32 import InvalidEncoding as InvalidEncoding
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import TOTP as TOTP


def encode_base32(data: Union[bytes, str]) -> str:
    """
    Encodes bytes, or text as UTF-8, to padded Base32.
    """
    return base32.encode(data)


def decode_base32(text: str) -> bytes:
    """
    Decodes Base32 text; raises InvalidEncoding on characters outside A-Z2-7.
    """
    return base32.decode(text)


def generate_code(secret: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Returns the 6 digit, 30 second TOTP code for ``secret``.

    :param secret: secret in base32 format
    :param timestamp_ms: Unix time in milliseconds, defaults to now
    :returns: OTP value
    """
    totp = TOTP(secret)
    if timestamp_ms is None:
        return totp.now()
    return totp.at(timestamp_ms)


def verify_code(secret: str, code: str, timestamp_ms: Optional[int] = None) -> bool:
    """
    Checks ``code`` against the TOTP code for ``secret`` at ``timestamp_ms``.

    :param secret: secret in base32 format
    :param code: the OTP to check
    :param timestamp_ms: Unix time in milliseconds, defaults to now
    :returns: True if the code matches
    """
    return TOTP(secret).verify(code, timestamp_ms)
