import secrets
import uuid
from typing import Callable

ID_BYTES = 16

class IdentifierGenerationError(RuntimeError):
    """The random source could not supply a full identifier."""

def new_receipt_id(random_bytes: Callable[[int], bytes] = secrets.token_bytes) -> str:
    """
    Returns a random identifier laid out like a UUID v4:
      xxxxxxxx-xxxx-4xxx-[89ab]xxx-xxxxxxxxxxxx
    Raises IdentifierGenerationError if fewer than 16 random bytes are available.
    """
    try:
        raw = random_bytes(ID_BYTES)
    except OSError as exc:
        raise IdentifierGenerationError("random source unavailable") from exc
    if len(raw) != ID_BYTES:
        raise IdentifierGenerationError(f"expected {ID_BYTES} random bytes, got {len(raw)}")

    # version=4 also forces the RFC 4122 variant bits (10xx)
    return str(uuid.UUID(bytes=bytes(raw), version=4))
