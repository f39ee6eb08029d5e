from re import fullmatch
from typing import Iterable

PRIMARY_BITS = 64
TOTAL_BITS = 128
FIRST_FIELD = 2  # field 1 is the secondary bitmap indicator, never set by the caller
NIBBLE = 4


class Bitmap:

    @staticmethod
    def calculate(fields: Iterable[int]) -> str:
        bits: list[bool] = [False] * TOTAL_BITS

        for field in fields:
            if not FIRST_FIELD <= field <= TOTAL_BITS:
                continue

            bits[field - 1] = True

        has_secondary_bitmap = any(bits[PRIMARY_BITS:])

        if has_secondary_bitmap:
            bits[0] = True

        length = TOTAL_BITS if has_secondary_bitmap else PRIMARY_BITS
        hex_bitmap: str = str()

        for position in range(0, length, NIBBLE):
            value = int()

            for offset, bit in enumerate(bits[position: position + NIBBLE]):
                if bit:
                    value |= 1 << (NIBBLE - 1 - offset)

            hex_bitmap = hex_bitmap + f"{value:x}"

        return hex_bitmap

    @staticmethod
    def decode(bitmap: str) -> set[int]:
        if len(bitmap) not in (PRIMARY_BITS // NIBBLE, TOTAL_BITS // NIBBLE):
            raise ValueError(f"Bitmap must contain 16 or 32 hex digits, got {len(bitmap)}")

        if not fullmatch(r"[0-9a-fA-F]+", bitmap):
            raise ValueError(f"Bitmap {bitmap} is not a hex string")

        if Bitmap.has_secondary_bitmap(bitmap) != (len(bitmap) == TOTAL_BITS // NIBBLE):
            raise ValueError(f"Bitmap {bitmap} length doesn't match its secondary bitmap indicator")

        value = int(bitmap, 16)
        length = len(bitmap) * NIBBLE
        fields: set[int] = set()

        for bit in range(1, length):
            if value & (1 << (length - 1 - bit)):
                fields.add(bit + 1)

        return fields

    @staticmethod
    def has_secondary_bitmap(bitmap: str) -> bool:
        return bool(int(bitmap[0], 16) & 0b1000)
