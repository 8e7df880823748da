from __future__ import annotations

from typing import Tuple

CRC32_POLYNOMIAL = 0xEDB88320


def build_crc32_table() -> Tuple[int, ...]:
    """Return the 256-entry lookup table for the reflected CRC-32."""
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ CRC32_POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CHECKSUM_TABLE = build_crc32_table()


def crc32_value(data: bytes) -> int:
    """Return the unsigned CRC-32 of the payload."""
    crc = 0xFFFFFFFF
    for value in data:
        crc = CHECKSUM_TABLE[(crc ^ value) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF
