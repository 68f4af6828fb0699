import threading
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Optional, Union

from skull_cacher.cache import AbstractTextureCache, MemoryTextureCache
from skull_cacher.clients import Client
from skull_cacher.constants import DEFAULT_READ_TIMEOUT
from skull_cacher.models import Texture
from skull_cacher.outcomes import (
    Error,
    Fail,
    OutcomeCallback,
    OutcomeChannel,
    Success,
    resolved,
)
from skull_cacher.resolvers import MojangNameResolver, NameResolver
from skull_cacher.store import TextureStore
from skull_cacher.util.logging import get_logger
from skull_cacher.util.uuid import is_identifier, parse_identifier
from skull_cacher.worker import FetchWorker


class SkullCacherClient:
    """
    Caches player skin textures in memory, backed by one file per player.

    Call ``load`` once before the first request and ``unload`` once at
    shutdown. Requests that hit the cache are answered on the calling thread;
    misses are fetched on a thread pool and their callbacks run on a worker
    thread, so consumers tied to one thread have to marshal results back
    themselves.

    Args:
        cache_dir: Directory holding the persisted texture records
        ignore_errors: Do not report record file I/O faults to the logger
        read_timeout: Seconds to wait for the session server per fetch
        max_workers: Size of the fetch pool (None for the executor default)
        persist_on_fetch: Also write each texture to disk as soon as it is fetched
        coalesce_requests: Share one fetch between concurrent misses for a player
    """

    def __init__(
        self,
        cache_dir,
        ignore_errors: bool = False,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        max_workers: Optional[int] = None,
        persist_on_fetch: bool = False,
        coalesce_requests: bool = True,
        http_client: Optional[Client] = None,
        resolver: Optional[NameResolver] = None,
        cache: Optional[AbstractTextureCache] = None,
        store: Optional[TextureStore] = None,
        logger=None,
    ):
        self.cache_dir = cache_dir
        self.persist_on_fetch = persist_on_fetch
        self.coalesce_requests = coalesce_requests
        self.logger = logger if logger is not None else get_logger(__name__)

        self._owns_http_client = http_client is None
        self.http_client = http_client or Client(read_timeout=read_timeout)
        self.resolver = resolver or MojangNameResolver(self.http_client)
        self.cache = cache if cache is not None else MemoryTextureCache()
        self.store = store or TextureStore(
            ignore_errors=ignore_errors, logger=self.logger
        )

        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="skull-cacher"
        )
        self._in_flight: Dict[uuid.UUID, OutcomeChannel] = {}
        self._in_flight_lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings=None, **kwargs):
        if settings is None:
            from skull_cacher.config import settings

        owns_http_client = "http_client" not in kwargs
        if owns_http_client:
            kwargs["http_client"] = Client(
                session_url=settings.SESSION_URL,
                api_url=settings.API_URL,
                read_timeout=kwargs.get("read_timeout", settings.READ_TIMEOUT),
            )

        client = cls(
            cache_dir=kwargs.pop("cache_dir", settings.CACHE_DIR),
            ignore_errors=kwargs.pop("ignore_errors", settings.IGNORE_ERRORS),
            read_timeout=kwargs.pop("read_timeout", settings.READ_TIMEOUT),
            max_workers=kwargs.pop("max_workers", settings.MAX_WORKERS),
            persist_on_fetch=kwargs.pop("persist_on_fetch", settings.PERSIST_ON_FETCH),
            coalesce_requests=kwargs.pop(
                "coalesce_requests", settings.COALESCE_REQUESTS
            ),
            **kwargs,
        )
        client._owns_http_client = owns_http_client
        return client

    def set_logger(self, logger):
        self.logger = logger
        self.store.logger = logger

    def load(self) -> int:
        """Fill the memory cache from the record files; returns how many were read."""
        count = 0
        for texture in self.store.load(self.cache_dir):
            self.cache.put_texture(texture)
            count += 1

        self.logger.info(
            "Texture cache loaded", count=count, cache_dir=str(self.cache_dir)
        )
        return count

    def unload(self) -> int:
        """Write every cached texture to disk; returns how many were written.

        The memory cache is left as it is.
        """
        written = 0
        for texture in self.cache.items():
            if self.store.save(self.cache_dir, texture):
                written += 1

        self.logger.info(
            "Texture cache saved",
            count=written,
            cached=len(self.cache),
            cache_dir=str(self.cache_dir),
        )
        return written

    def get_cached_texture(self, identifier: uuid.UUID) -> Optional[Texture]:
        return self.cache.get_texture(identifier)

    def request_texture(
        self,
        player: Union[uuid.UUID, str],
        callback: Optional[OutcomeCallback] = None,
    ) -> Future:
        """
        Request the texture of a player given by identifier or by name.

        A cached texture is delivered as Success before this returns. Otherwise
        the fetch is scheduled and Started followed by Success, Fail or Error
        are delivered from a worker thread. The returned future resolves with
        the final outcome.
        """
        if isinstance(player, uuid.UUID):
            return self._request_identifier(player, callback)

        if not isinstance(player, str):
            return resolved(
                Error(cause=TypeError(f"Not a player name or UUID: {player!r}")),
                callback,
            )

        if is_identifier(player):
            return self._request_identifier(parse_identifier(player), callback)

        return self.request_texture_by_name(player, callback)

    def request_texture_by_name(
        self, name: str, callback: Optional[OutcomeCallback] = None
    ) -> Future:
        channel = OutcomeChannel()
        future = channel.subscribe(callback)

        def on_identifier(identifier):
            if identifier is None:
                channel.emit(Fail(reason=f"unknown player name {name!r}"))
                return

            self._request_identifier(identifier, channel.emit)

        def resolve():
            try:
                self.resolver.resolve(name, on_identifier)
            except Exception as e:
                self.logger.warning("Name resolution errored", name=name, error=repr(e))
                channel.emit(Error(cause=e))

        try:
            self._pool.submit(resolve)
        except RuntimeError as e:
            channel.emit(Error(cause=e))

        return future

    def remove_texture(
        self,
        identifier: Union[uuid.UUID, str],
        callback: Optional[OutcomeCallback] = None,
    ) -> Future:
        """
        Drop a texture from the cache and delete its record file.

        Delivers Fail when the texture is not cached or when an existing record
        file could not be deleted; the cache is left untouched in that case.
        """
        if not isinstance(identifier, uuid.UUID):
            try:
                identifier = parse_identifier(str(identifier))
            except ValueError:
                return resolved(
                    Fail(reason=f"not a player UUID: {identifier!r}"), callback
                )

        texture = self.cache.get_texture(identifier)
        if texture is None:
            return resolved(Fail(reason="texture is not cached"), callback)

        if self.store.exists(self.cache_dir, identifier) and not self.store.delete(
            self.cache_dir, texture
        ):
            return resolved(
                Fail(reason="texture record could not be deleted"), callback
            )

        self.cache.remove_texture(identifier)
        self.logger.info("Texture removed", identifier=str(identifier))
        return resolved(Success(texture=texture), callback)

    def _request_identifier(
        self, identifier: uuid.UUID, callback: Optional[OutcomeCallback]
    ) -> Future:
        texture = self.cache.get_texture(identifier)
        if texture is not None:
            self.logger.debug("Texture already cached", identifier=str(identifier))
            return resolved(Success(texture=texture), callback)

        if not self.coalesce_requests:
            channel = OutcomeChannel(identifier)
            future = channel.subscribe(callback)
            self._submit(channel)
            return future

        with self._in_flight_lock:
            # The fetch may have finished since the first lookup
            texture = self.cache.get_texture(identifier)
            if texture is None:
                channel = self._in_flight.get(identifier)
                if channel is None:
                    channel = OutcomeChannel(identifier)
                    self._in_flight[identifier] = channel
                    self._submit(channel)
                else:
                    self.logger.debug(
                        "Joining fetch in flight", identifier=str(identifier)
                    )

        if texture is not None:
            return resolved(Success(texture=texture), callback)

        return channel.subscribe(callback)

    def _submit(self, channel: OutcomeChannel):
        worker = FetchWorker(
            channel.identifier,
            self.http_client,
            self.cache,
            channel,
            on_cached=self._persist if self.persist_on_fetch else None,
        )

        try:
            self._pool.submit(self._run_worker, worker)
        except RuntimeError as e:
            # The pool was shut down
            self._forget(channel)
            channel.emit(Error(cause=e))

    def _run_worker(self, worker: FetchWorker):
        try:
            worker.run()
        finally:
            self._forget(worker.channel)

    def _forget(self, channel: OutcomeChannel):
        if not self.coalesce_requests:
            return

        with self._in_flight_lock:
            if self._in_flight.get(channel.identifier) is channel:
                del self._in_flight[channel.identifier]

    def _persist(self, texture: Texture):
        self.store.save(self.cache_dir, texture)

    def close(self, wait: bool = True):
        self._pool.shutdown(wait=wait)
        if self._owns_http_client:
            self.http_client.close()

    def __len__(self):
        return len(self.cache)

    def __enter__(self):
        self.load()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # Let fetches in flight land in the cache before it is written out
        self._pool.shutdown(wait=True)
        try:
            self.unload()
        finally:
            self.close()
