# SPDX-License-Identifier: MIT


def asciz(s: bytes) -> bytes:
    return s.partition(b"\0")[0]


def split_asciz(s: bytes) -> list[bytes]:
    """Split a run of NUL-terminated strings."""
    names = s.split(b"\0")
    if names and names[-1] == b"":
        names.pop()
    return names


def get_bit(value: int, bit: int) -> bool:
    return bool(value & (1 << bit))


def pack_bits(*flags: bool) -> int:
    """Pack flags into an int, first flag in the least significant bit."""
    value = 0
    for bit, flag in enumerate(flags):
        if flag:
            value |= 1 << bit
    return value


def to_bool(value: str) -> bool:
    return value.strip() not in ("", "0", "false", "False")


def from_bool(value: bool) -> str:
    return "1" if value else "0"


def add_unique(mapping: dict, key, value, what: str) -> None:
    if key in mapping:
        raise ValueError(f"Duplicate {what} {key}")
    mapping[key] = value
