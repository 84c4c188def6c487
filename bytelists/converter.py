"""Convert native-width integers to big-endian byte strings of another width.

A value is first read as an integer of ``native_size`` bytes (1, 2, 4 or 8),
signed or unsigned, exactly as if its two's-complement bits were stored in
memory at that width. It is then clamped to the range of an integer of
``output_size`` bytes (1 to 8) and encoded big-endian.
"""

from __future__ import annotations

__all__ = ["ConversionError", "convert", "clamp"]

NATIVE_SIZES = (1, 2, 4, 8)
MAX_OUTPUT_SIZE = 8


class ConversionError(ValueError):
    """Raised when a native or output size is not supported."""


def _check_output_size(output_size: int) -> None:
    if not 1 <= output_size <= MAX_OUTPUT_SIZE:
        raise ConversionError(
            f"output size must be between 1 and {MAX_OUTPUT_SIZE} bytes, got {output_size}"
        )


def _check_native_size(native_size: int) -> None:
    if native_size not in NATIVE_SIZES:
        raise ConversionError(
            f"native size must be one of {NATIVE_SIZES}, got {native_size}"
        )


def _reinterpret(value: int, native_size: int, signed: bool) -> int:
    """Read ``value`` as the integer its low ``native_size`` bytes represent."""
    bits = native_size * 8
    raw = value & ((1 << bits) - 1)
    if signed and raw >> (bits - 1):
        raw -= 1 << bits
    return raw


def _bounds(output_size: int, signed: bool) -> tuple[int, int]:
    bits = output_size * 8
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def clamp(value: int, output_size: int, signed: bool) -> int:
    """Clamp ``value`` to the range of an ``output_size``-byte integer."""
    _check_output_size(output_size)
    low, high = _bounds(output_size, signed)
    return min(max(value, low), high)


def convert(value: int, native_size: int, output_size: int, signed: bool) -> bytes:
    """Return ``value`` as ``output_size`` big-endian bytes, clamped to fit.

    Raises :class:`ConversionError` if either size is unsupported.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    _check_output_size(output_size)
    _check_native_size(native_size)
    native = _reinterpret(value, native_size, signed)
    return clamp(native, output_size, signed).to_bytes(
        output_size, "big", signed=signed
    )