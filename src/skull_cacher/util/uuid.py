import re
import uuid

_COMPACT_PATTERN = re.compile(r"^[0-9a-fA-F]{32}$")
_DASHED_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def compact_hex(identifier: uuid.UUID) -> str:
    """The session server only accepts identifiers without hyphens."""
    return identifier.hex


def parse_identifier(text: str) -> uuid.UUID:
    text = text.strip()

    if _DASHED_PATTERN.match(text):
        return uuid.UUID(text)

    if _COMPACT_PATTERN.match(text):
        # Format the compact form as a UUID string
        uuid_str = f"{text[:8]}-{text[8:12]}-{text[12:16]}-{text[16:20]}-{text[20:32]}"
        return uuid.UUID(uuid_str)

    raise ValueError(f"Not a player identifier: {text!r}")


def is_identifier(text: str) -> bool:
    try:
        parse_identifier(text)
    except ValueError:
        return False

    return True
