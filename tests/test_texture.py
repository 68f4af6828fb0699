import uuid

import pydantic
import pytest

from skull_cacher.exceptions import MalformedProfileError
from skull_cacher.models import Texture

IDENTIFIER = uuid.UUID("123e4567-e89b-12d3-a456-426614174000")


def test_from_property_ignores_extra_fields():
    texture = Texture.from_property(
        IDENTIFIER, {"name": "textures", "signature": "S", "value": "V"}
    )

    assert texture == Texture(identifier=IDENTIFIER, signature="S", value="V")


@pytest.mark.parametrize(
    "prop",
    [
        {"value": "V"},
        {"signature": "S"},
        {"signature": None, "value": "V"},
        {"signature": "S", "value": 12},
        ["S", "V"],
        None,
    ],
)
def test_incomplete_property_is_rejected(prop):
    with pytest.raises(MalformedProfileError):
        Texture.from_property(IDENTIFIER, prop)


def test_texture_requires_every_field():
    with pytest.raises(pydantic.ValidationError):
        Texture(identifier=IDENTIFIER, signature="S")


def test_texture_is_immutable():
    texture = Texture(identifier=IDENTIFIER, signature="S", value="V")
    with pytest.raises(pydantic.ValidationError):
        texture.value = "other"


def test_document_leaves_out_identifier():
    texture = Texture(identifier=IDENTIFIER, signature="S", value="V")

    document = texture.to_document()

    assert document == {"signature": "S", "value": "V"}
    assert Texture.from_document(IDENTIFIER, document) == texture
