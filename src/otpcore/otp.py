from typing import Callable, Optional

from . import base32, utils

DEFAULT_DIGITS = 6

HmacProvider = Callable[[bytes, bytes], bytes]


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(self, s: str, digits: int = DEFAULT_DIGITS, hmac: Optional[HmacProvider] = None) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of decimal digits in the OTP
        :param hmac: ``hmac(key, message) -> digest`` callable, HMAC-SHA1 by default
        """
        if not 0 < digits <= 10:
            raise ValueError("digits must be between 1 and 10")
        self.digits = digits
        self.hmac = hmac if hmac is not None else utils.hmac_sha1
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0:
            raise ValueError("input must be positive integer")
        hmac_hash = bytearray(self.hmac(self.byte_secret(), self.int_to_bytestring(input)))
        if len(hmac_hash) != 20:
            raise ValueError("digest is {} bytes, HMAC-SHA1 produces 20".format(len(hmac_hash)))

        # Dynamic truncation: the low nibble of byte 19 picks where the
        # 4 bytes start, so offset + 3 <= 18 always stays inside the digest.
        # Only the first byte loses its top bit, which keeps the result in 31 bits.
        offset = hmac_hash[19] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        # 42 -> "000042"
        return str(code % 10**self.digits).zfill(self.digits)

    def byte_secret(self) -> bytes:
        """
        Decodes the base32 secret into the HMAC key.

        An empty secret, or one too short to fill a byte such as "A", yields
        an empty key. HMAC accepts that, so codes are still generated.
        """
        # "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ" -> b"12345678901234567890"
        return base32.decode(self.secret)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        # 12345 -> b"\x00\x00\x00\x00\x00\x00\x30\x39", most significant byte first.
        # Raises OverflowError once the counter no longer fits in 64 bits.
        return i.to_bytes(padding, "big")
