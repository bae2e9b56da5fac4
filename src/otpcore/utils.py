import hashlib
import hmac
import time


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Default HMAC provider: HMAC-SHA1 over ``message``, 20 bytes.
    """
    return hmac.new(key, message, hashlib.sha1).digest()


def current_millis() -> int:
    """
    Default clock: milliseconds since the Unix epoch.
    """
    return int(time.time() * 1000)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    # surrogatepass so any str can be compared, lone surrogates included
    return hmac.compare_digest(s1.encode("utf-8", "surrogatepass"), s2.encode("utf-8", "surrogatepass"))
