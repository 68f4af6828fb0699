import threading
import uuid

from skull_cacher.cache import MemoryTextureCache
from skull_cacher.models import Texture


def make_texture(identifier=None, value="V"):
    return Texture(identifier=identifier or uuid.uuid4(), signature="S", value=value)


def test_put_get_remove():
    cache = MemoryTextureCache()
    texture = make_texture()

    assert cache.get_texture(texture.identifier) is None
    assert texture.identifier not in cache

    cache.put_texture(texture)
    assert cache.get_texture(texture.identifier) == texture
    assert texture.identifier in cache
    assert len(cache) == 1

    assert cache.remove_texture(texture.identifier) == texture
    assert cache.remove_texture(texture.identifier) is None
    assert len(cache) == 0


def test_put_replaces_existing_entry():
    cache = MemoryTextureCache()
    identifier = uuid.uuid4()

    cache.put_texture(make_texture(identifier, value="old"))
    cache.put_texture(make_texture(identifier, value="new"))

    assert len(cache) == 1
    assert cache.get_texture(identifier).value == "new"


def test_items_is_a_snapshot():
    cache = MemoryTextureCache()
    cache.put_texture(make_texture())

    items = cache.items()
    cache.put_texture(make_texture())

    assert len(items) == 1
    assert len(cache.items()) == 2


def test_empty_cache_is_still_a_cache():
    # An empty cache has len() == 0, callers must not mistake it for "no cache"
    assert len(MemoryTextureCache()) == 0


def test_concurrent_writers():
    cache = MemoryTextureCache()
    textures = [make_texture() for _ in range(400)]

    def writer(chunk):
        for texture in chunk:
            cache.put_texture(texture)
            cache.items()

    threads = [
        threading.Thread(target=writer, args=(textures[i::8],)) for i in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 400
    assert {t.identifier for t in cache.items()} == {t.identifier for t in textures}
