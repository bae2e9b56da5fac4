import logging
from typing import Callable, Optional

from . import utils
from .otp import DEFAULT_DIGITS, OTP, HmacProvider

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30


class TOTP(OTP):
    """
    Handler for time-based OTP counters.

    Timestamps are integers in milliseconds since the Unix epoch. T0 is the
    epoch itself, so the counter is simply the number of whole intervals
    elapsed.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        hmac: Optional[HmacProvider] = None,
        interval: int = DEFAULT_INTERVAL,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP
        :param hmac: HMAC provider, defaults to HMAC-SHA1
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param clock: callable returning the current time in milliseconds
        """
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        self.interval = interval
        self.clock = clock if clock is not None else utils.current_millis
        super().__init__(s=s, digits=digits, hmac=hmac)

    def at(self, for_time: int) -> str:
        """
        Accepts a Unix timestamp in milliseconds and returns the OTP for it.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock())

    def verify(self, otp: str, for_time: Optional[int] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Only the interval containing ``for_time`` is checked. A wrong code
        gives ``False``; a malformed secret still raises.

        :param otp: the OTP to check against
        :param for_time: time to check OTP at in milliseconds (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = self.clock()

        if utils.strings_equal(str(otp), self.at(for_time)):
            return True
        log.debug("totp verification failed for time step %d", self.timecode(for_time))
        return False

    def timecode(self, for_time: int) -> int:
        """
        Accepts a Unix timestamp in milliseconds and returns the counter
        value of the interval it falls in.

        59000 -> 1 with a 30 second interval
        """
        return int(for_time) // 1000 // self.interval
