import pytest

# RFC 4226 / RFC 6238 test key, ASCII "12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
RFC_KEY = b"12345678901234567890"


class RecordingHmac:
    def __init__(self, digest: bytes):
        self.digest = digest
        self.calls = []

    def __call__(self, key: bytes, message: bytes) -> bytes:
        self.calls.append((key, message))
        return self.digest


@pytest.fixture
def rfc_secret() -> str:
    return RFC_SECRET
