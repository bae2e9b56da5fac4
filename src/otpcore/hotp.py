import logging
from typing import Optional

from . import utils
from .otp import DEFAULT_DIGITS, OTP, HmacProvider

log = logging.getLogger(__name__)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        hmac: Optional[HmacProvider] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param hmac: HMAC provider, defaults to HMAC-SHA1
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, hmac=hmac)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        if utils.strings_equal(str(otp), self.at(counter)):
            return True
        log.debug("hotp verification failed at counter %d", self.initial_count + counter)
        return False
