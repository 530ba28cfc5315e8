import time
from typing import Optional, Union


class NonceCreator:
    def __init__(self):
        self._last_tracking_nonce = 0

    def get_tracking_nonce(self, ts_us: Optional[Union[float, int]] = None) -> int:
        nonce = int(ts_us if ts_us is not None else self._time() * 1e6)
        self._last_tracking_nonce = nonce if nonce > self._last_tracking_nonce else self._last_tracking_nonce + 1
        return self._last_tracking_nonce

    @staticmethod
    def _time() -> float:
        """Mocked in test cases without affecting system `time.time()`."""
        return time.time()


_nonce_provider = NonceCreator()


def get_tracking_nonce() -> int:
    return _nonce_provider.get_tracking_nonce()
