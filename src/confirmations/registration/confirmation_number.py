"""Confirmation number generator.

Codes look like ``GC-1760700000000-3FA9C2``: a fixed prefix, the epoch
time in milliseconds (13 digits), and six uppercase hex characters. They
are display tokens echoed to the registrant, not credentials.
"""

import re
import time
from uuid import uuid4

CONFIRMATION_PREFIX = "GC"
CONFIRMATION_NUMBER_PATTERN = re.compile(rf"^{CONFIRMATION_PREFIX}-\d{{13}}-[0-9A-F]{{6}}$")


def generate_confirmation_number() -> str:
    millis = int(time.time() * 1000)
    suffix = uuid4().hex[:6].upper()
    return f"{CONFIRMATION_PREFIX}-{millis:013d}-{suffix}"
