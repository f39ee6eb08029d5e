"""
Hex helpers used on the wire: signatures travel as lowercase hex, the vendor error text (field 113) as
hex-encoded single-byte characters
"""

from binascii import hexlify, unhexlify


def bytes_to_hex(data: bytes) -> str:
    return hexlify(data).decode("ascii")


def hex_to_bytes(hex_string: str) -> bytes:
    return unhexlify(hex_string)  # binascii.Error is a ValueError


def hex_to_text(hex_string: str) -> str:
    # One byte is one character, multibyte UTF-8 text will not survive the decoding
    return hex_to_bytes(hex_string).decode("latin-1")
