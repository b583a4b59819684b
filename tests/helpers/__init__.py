"""Shared test helpers: fixed key material and a mock HTTP response."""
import json

SENDER_ADDRESS = "24163afcc6e33b0a9473852e18327fa9"
KEY_SEED = bytes(range(32))
# Move bytecode magic followed by filler; never executed in tests
SCRIPT_CODE = b"\xa1\x1c\xeb\x0b\x02\x00\x00\x00" + b"set_message"


class MockResponse:
    """Mock response for testing"""

    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text if text is not None else json.dumps(json_data)

    def json(self):
        if self._json_data is None:
            raise json.JSONDecodeError("Invalid JSON", self.text or "", 0)
        return self._json_data


def write_key_file(path, seed=KEY_SEED, tag=0):
    """Write a Shuffle key file: one tag byte followed by the seed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(bytes([tag]) + seed)
    return path
