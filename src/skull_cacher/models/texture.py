import uuid
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from skull_cacher.exceptions import MalformedProfileError


class Texture(BaseModel):
    """A player's skin texture as handed out by the session server.

    ``signature`` and ``value`` are opaque to this package. Consumers use the
    signature to verify the value, which holds the base64 encoded texture
    payload.
    """

    model_config = ConfigDict(frozen=True)

    identifier: uuid.UUID
    signature: str
    value: str

    @classmethod
    def from_property(cls, identifier: uuid.UUID, prop: Any) -> "Texture":
        """Build a texture from one element of a profile's ``properties`` list."""
        return cls(identifier=identifier, **_extract_fields(prop, "profile property"))

    @classmethod
    def from_document(cls, identifier: uuid.UUID, document: Any) -> "Texture":
        return cls(identifier=identifier, **_extract_fields(document, "record"))

    def to_document(self) -> Dict[str, str]:
        # The identifier lives in the file name, not the body
        return {"signature": self.signature, "value": self.value}


def _extract_fields(data, kind):
    if not isinstance(data, dict):
        raise MalformedProfileError(f"Expected a JSON object for {kind}, got {data!r}")

    fields = {}
    for key in ("signature", "value"):
        field = data.get(key)
        if not isinstance(field, str):
            raise MalformedProfileError(f"{kind} is missing string field {key!r}")
        fields[key] = field

    return fields
