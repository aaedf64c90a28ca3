"""Key derivation and XOR obfuscation of names and file contents."""

from __future__ import annotations

from .models import MAX_NAME_SIZE

_WIDTH = MAX_NAME_SIZE - 1

_PERMUTATIONS = (
    (2, 1, 3, 0), (0, 2, 3, 1), (1, 3, 0, 2), (3, 1, 2, 0),
    (0, 3, 1, 2), (1, 0, 2, 3), (2, 0, 1, 3), (3, 2, 0, 1),
    (1, 2, 3, 0), (2, 3, 1, 0), (0, 1, 2, 3), (3, 0, 2, 1),
    (0, 3, 2, 1), (1, 0, 3, 2), (2, 0, 3, 1), (3, 1, 0, 2),
    (0, 2, 1, 3), (1, 3, 2, 0), (2, 3, 0, 1), (3, 2, 1, 0),
    (0, 1, 3, 2), (1, 2, 0, 3), (2, 1, 0, 3), (3, 0, 1, 2),
)

_KEY_PIECES = ("k`t'=_", "|bdUbK", "E^3(-}", ";.<@wD")
_USER_MASK = "D9#-<{y|d]A'd/SD.!9~iH#k"
_STRING_MASK = "(4S`};:/B,y7sFS*9$k2B$3@"


def get_permutation(index: int) -> tuple[int, int, int, int]:
    """Return one of the 24 orderings of four items."""
    if not 0 <= index < len(_PERMUTATIONS):
        raise ValueError(f"permutation index out of range: {index}")
    return _PERMUTATIONS[index]


def _codes(text: str) -> bytes:
    return text.encode("ascii")


def _mix(source: str, *masks: str) -> str:
    if not source:
        raise ValueError("cannot derive from an empty string")
    src = _codes(source)
    mask_codes = [_codes(mask) for mask in masks]
    chars = []
    for i in range(_WIDTH):
        value = src[i % len(src)]
        for mask in mask_codes:
            value ^= mask[i]
        chars.append(chr(value % 95 + 32))
    return "".join(chars)


def xor_user(source: str) -> str:
    """Scramble a username into 24 printable characters."""
    return _mix(source, _USER_MASK)


def generate_key(username: str) -> str:
    """Derive the 24-character key belonging to ``username``."""
    order = get_permutation(len(username))
    pad = "".join(_KEY_PIECES[i] for i in order)
    return _mix(xor_user(username), pad)


def _check_key(key: str) -> None:
    if len(key) < _WIDTH:
        raise ValueError(f"key must have at least {_WIDTH} characters")


def xor_string(source: str, key: str) -> str:
    """Scramble a name with a key into 24 characters safe for a file name."""
    _check_key(key)
    return _mix(source, key, _STRING_MASK).replace("/", "0")


def xor_bytes(data: bytes, key: str) -> bytes:
    """XOR data with the key repeated every 24 bytes; applying it twice restores data."""
    _check_key(key)
    key_codes = _codes(key)[:_WIDTH]
    return bytes(byte ^ key_codes[i % _WIDTH] for i, byte in enumerate(data))