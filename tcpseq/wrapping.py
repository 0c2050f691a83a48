"""32-bit wrapping sequence numbers and their conversion to 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_HALF32 = _MOD32 // 2
_MOD64 = 1 << 64


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around on overflow, as used for TCP seqnos and acknos."""

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError(f"raw value must be an int, not {type(self.raw_value).__name__}")
        object.__setattr__(self, "raw_value", self.raw_value % _MOD32)

    def __add__(self, other: int) -> WrappingInt32:
        """The point `other` steps past this one."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Signed offset to another WrappingInt32, or the point `other` steps before this one."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) % _MOD32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)

    def __int__(self) -> int:
        return self.raw_value


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be a 64-bit unsigned integer, got {value}")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a sequence number relative to `isn`."""
    _check_u64("n", n)
    return isn + n % _MOD32


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and lies closest to `checkpoint`."""
    _check_u64("checkpoint", checkpoint)
    times, low = divmod(checkpoint, _MOD32)
    offset = (n.raw_value - isn.raw_value) % _MOD32

    if offset <= low:
        if low <= _HALF32 or offset >= low - _HALF32:
            result = times * _MOD32 + offset
        else:
            result = (times + 1) * _MOD32 + offset
    elif low >= _HALF32 or offset <= low + _HALF32:
        result = times * _MOD32 + offset
    elif times < 1:
        result = times * _MOD32 + offset
    else:
        result = (times - 1) * _MOD32 + offset
    return result % _MOD64