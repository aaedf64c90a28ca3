"""Run-length encoding of file contents as (byte, count) pairs."""

from __future__ import annotations

MAX_RUN = 255


class CompressionError(ValueError):
    """Raised when compressed data cannot be expanded."""


def rle_compress(data: bytes) -> bytes:
    """Encode ``data`` as pairs of byte value and run length (at most 255)."""
    out = bytearray()
    run_byte: int | None = None
    count = 0
    for byte in data:
        if byte == run_byte and count < MAX_RUN:
            count += 1
            continue
        if run_byte is not None:
            out += bytes((run_byte, count))
        run_byte, count = byte, 1
    if run_byte is not None:
        out += bytes((run_byte, count))
    return bytes(out)


def rle_decompress(data: bytes, expected_size: int) -> bytes:
    """Expand run-length pairs into exactly ``expected_size`` bytes.

    Raises CompressionError if the pairs are malformed or expand beyond
    ``expected_size``. Output shorter than expected is padded with zeros.
    """
    if len(data) % 2:
        raise CompressionError("compressed data has an odd length")
    out = bytearray()
    for byte, count in zip(data[::2], data[1::2]):
        if len(out) + count > expected_size:
            raise CompressionError(
                "write index greater than decompressed size"
            )
        out += bytes((byte,)) * count
    out += bytes(expected_size - len(out))
    return bytes(out)


def format_runs(data: bytes) -> str:
    """Describe each run of compressed data on its own line."""
    return "".join(
        f"Data: {chr(byte)} Count: {count}\n"
        for byte, count in zip(data[::2], data[1::2])
    )