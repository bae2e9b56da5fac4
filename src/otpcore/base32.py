import logging
from typing import Dict, Union

log = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# "A" -> 0, "B" -> 1, ... "7" -> 31
_LOOKUP: Dict[str, int] = {char: index for index, char in enumerate(ALPHABET)}


class InvalidEncoding(ValueError):
    """
    Raised when Base32 text contains a character outside A-Z2-7.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__("Invalid base32 character {!r} at position {}".format(char, position))


def encode(data: Union[bytes, str]) -> str:
    """
    Encodes bytes (or text, as UTF-8) to padded RFC 4648 Base32.

    :param data: bytes to encode; ``str`` is encoded to UTF-8 first
    :returns: Base32 text, length a multiple of 8
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("expected bytes or str, got {}".format(type(data).__name__))

    output = []
    buffer = 0
    bits = 0
    for byte in bytes(data):
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            output.append(ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1

    # Leftover 1-4 bits become the high bits of one last symbol
    if bits:
        output.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])

    if len(output) % 8:
        output.extend("=" * (8 - len(output) % 8))
    return "".join(output)


def decode(text: str) -> bytes:
    """
    Decodes Base32 text to bytes.

    Input is case-insensitive and padding is optional. Bits that do not fill
    a whole trailing byte are dropped rather than rejected, so only inputs
    whose byte length is a multiple of 5 survive an encode/decode round trip
    unchanged. Existing secrets depend on this, so it must stay.

    :param text: Base32 text, optionally padded with ``=``
    :returns: decoded bytes
    :raises InvalidEncoding: if a character is not in the alphabet
    """
    stripped = text.rstrip("=")

    result = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(stripped):
        value = _LOOKUP.get(char.upper())
        # "A" decodes to 0, so test for a miss explicitly
        if value is None:
            log.debug("rejected base32 input at position %d", position)
            raise InvalidEncoding(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    return bytes(result)
