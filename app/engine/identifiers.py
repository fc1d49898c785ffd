"""
Transaction and reference identifiers.

IDs combine the current epoch milliseconds with a random suffix. Nothing
is persisted, so there is no collision check: two requests in the same
millisecond rely on the 9-character suffix to stay distinct.
"""

import random
import string
import time

_ALPHABET = string.digits + string.ascii_uppercase
_SUFFIX_LENGTH = 9


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def generate_transaction_id() -> str:
    """e.g. ``TXN_1718000000000_K3Z9Q0ABC``"""
    suffix = "".join(random.choices(_ALPHABET, k=_SUFFIX_LENGTH))
    return f"TXN_{_epoch_ms()}_{suffix}"


def generate_reference() -> str:
    """e.g. ``REF_1718000000000``"""
    return f"REF_{_epoch_ms()}"
