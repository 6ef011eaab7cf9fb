"""
Delegated collaborators.

The engine does not implement digests, randomness or format parsing itself.
This module wraps the libraries that do:

    - hashlib: named digest registry for TextValue.hash()
    - secrets: cryptographically secure integers for random()/shuffle()
    - json: well-formedness check for is_json()
    - base64/binascii: round-trip check for is_base64()
    - phpserialize: PHP serialize-format check for is_serialized()
"""

import base64
import binascii
import hashlib
import json
import secrets
from typing import List, Optional, Sequence, TypeVar

import phpserialize

T = TypeVar("T")


def digest_algorithms() -> List[str]:
    """Names accepted by :func:`digest`, sorted."""
    # shake_* need an explicit output length and are left out
    return sorted(
        name for name in hashlib.algorithms_available if not name.startswith("shake_")
    )


def digest(data: bytes, algorithm: str, raw_output: bool = False) -> Optional[str]:
    """
    Hash ``data`` with the named algorithm.

    Returns:
        Optional[str]: Lower-case hex digest, or the raw digest bytes mapped
            one-to-one onto codepoints (latin-1) when ``raw_output`` is set.
            None when the algorithm name is not registered.
    """
    if algorithm not in digest_algorithms():
        return None

    hasher = hashlib.new(algorithm, data)
    if raw_output:
        return hasher.digest().decode("latin-1")
    return hasher.hexdigest()


def random_index(upper: int) -> int:
    """Uniform secure integer in ``[0, upper)``."""
    return secrets.randbelow(upper)


def secure_shuffle(items: Sequence[T]) -> List[T]:
    shuffled = list(items)
    secrets.SystemRandom().shuffle(shuffled)
    return shuffled


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name}")


def is_well_formed_json(text: str) -> bool:
    """Strict JSON check: NaN and Infinity are not accepted."""
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        return False
    return True


def is_base64_round_trip(text: str) -> bool:
    """True when ``text`` decodes as strict base64 and re-encodes to itself."""
    if text == "":
        return False
    try:
        decoded = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == text


def is_php_serialized(data: bytes) -> bool:
    if data == b"":
        return False
    try:
        phpserialize.loads(data)
    except (ValueError, TypeError, IndexError):
        return False
    return True
