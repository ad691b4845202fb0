"""Identifier Generator — short, URL-safe opaque primary keys.

Invariants:
    - 21 symbols over the 64-character URL-safe alphabet (~126 bits of entropy)
    - Drawn from the OS CSPRNG; no uniqueness check against the store
    - Only GenerationError escapes, and only when the entropy source is missing
"""

import secrets
import string

from inventory.core.domain_types import RecordId
from inventory.core.errors import GenerationError

ALPHABET = string.ascii_letters + string.digits + "_-"
DEFAULT_SIZE = 21


def generate_id(size: int = DEFAULT_SIZE) -> RecordId:
    """Return a fresh random identifier."""
    try:
        return RecordId("".join(secrets.choice(ALPHABET) for _ in range(size)))
    except NotImplementedError as e:
        # os.urandom raises this when no randomness source is found
        raise GenerationError(str(e) or "no randomness source") from e
