"""Generation of short identifiers."""

import hashlib
import time


def generate_id16() -> str:
    """Return a 16 character upper-case hex id derived from the current time."""
    digest = hashlib.sha1(str(time.time_ns()).encode()).digest()
    return digest[:8].hex().upper()