from typing import Union


ENCODING = "utf-8"


def text_encode(value: str) -> bytes:
    return value.encode(ENCODING)


def text_decode(value: Union[bytes, bytearray, memoryview]) -> str:
    """Decode UTF-8 bytes, raising ``UnicodeDecodeError`` on malformed input."""
    return bytes(value).decode(ENCODING)
