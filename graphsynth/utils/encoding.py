from urllib.parse import quote_from_bytes, unquote_to_bytes


def encode_property(raw: bytes) -> str:
    """Percent-encodes arbitrary bytes into text that never contains `|` or a newline."""
    return quote_from_bytes(raw, safe="")


def decode_property(text: str) -> bytes:
    return unquote_to_bytes(text)
