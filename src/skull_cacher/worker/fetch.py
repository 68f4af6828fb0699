import uuid
from typing import Callable, Optional

from skull_cacher.cache import AbstractTextureCache
from skull_cacher.clients import Client
from skull_cacher.exceptions import MalformedProfileError
from skull_cacher.models import Texture
from skull_cacher.outcomes import Error, Fail, Outcome, OutcomeChannel, Started, Success
from skull_cacher.util.logging import get_logger

logger = get_logger(__name__)


class FetchWorker:
    """
    Fetches the texture of one player from the session server.

    The worker emits Started, then exactly one of Success, Fail or Error on its
    channel. Only a successful fetch touches the cache, and the texture is in
    the cache before Success is emitted.

    Args:
        identifier: The player to fetch
        client: Session server client
        cache: Cache that receives the fetched texture
        channel: Where outcomes are delivered
        on_cached: Called with the texture right after it was cached
    """

    def __init__(
        self,
        identifier: uuid.UUID,
        client: Client,
        cache: AbstractTextureCache,
        channel: OutcomeChannel,
        on_cached: Optional[Callable[[Texture], None]] = None,
    ):
        self.identifier = identifier
        self.client = client
        self.cache = cache
        self.channel = channel
        self.on_cached = on_cached

    def run(self) -> Outcome:
        self.channel.emit(Started())

        try:
            outcome = self._fetch()
        except Exception as e:
            logger.warning(
                "Texture fetch errored",
                identifier=str(self.identifier),
                error=repr(e),
            )
            outcome = Error(cause=e)

        self.channel.emit(outcome)
        return outcome

    def _fetch(self) -> Outcome:
        logger.debug("Fetching texture", identifier=str(self.identifier))
        response = self.client.get_profile(self.identifier)

        if response.status_code != 200:
            logger.info(
                "Profile not found",
                identifier=str(self.identifier),
                status_code=response.status_code,
            )
            return Fail(reason=f"profile not found (status {response.status_code})")

        profile = response.json()
        if not isinstance(profile, dict):
            raise MalformedProfileError(f"Expected a JSON object, got {profile!r}")

        properties = profile.get("properties")
        if not isinstance(properties, list):
            raise MalformedProfileError("Profile has no properties list")

        if not properties:
            logger.info("Profile has no properties", identifier=str(self.identifier))
            return Fail(reason="profile has no properties")

        texture = Texture.from_property(self.identifier, properties[0])

        self.cache.put_texture(texture)
        if self.on_cached is not None:
            try:
                self.on_cached(texture)
            except Exception:
                logger.exception(
                    "Texture cached but post-cache hook failed",
                    identifier=str(self.identifier),
                )

        logger.info("Texture cached", identifier=str(self.identifier))
        return Success(texture=texture)
