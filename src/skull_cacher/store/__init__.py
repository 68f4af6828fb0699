import json
import os
import tempfile
import uuid
from typing import Iterator, Optional

from skull_cacher.constants import TEXTURE_FILE_EXTENSION
from skull_cacher.exceptions import MalformedProfileError, TextureStoreError
from skull_cacher.models import Texture
from skull_cacher.util.logging import get_logger
from skull_cacher.util.uuid import parse_identifier


class TextureStore:
    """
    Persists textures as one JSON file per player.

    A record lives at ``{directory}/{identifier}.texture`` and holds only the
    signature and the value; the identifier is recovered from the file name.

    Args:
        ignore_errors: Swallow I/O faults instead of reporting them to the logger
        logger: Where to report I/O faults (defaults to this module's logger)
        extension: File extension shared by save, load and delete
    """

    def __init__(
        self, ignore_errors=False, logger=None, extension=TEXTURE_FILE_EXTENSION
    ):
        self.ignore_errors = ignore_errors
        self.logger = logger if logger is not None else get_logger(__name__)
        self.extension = extension.lstrip(".")

    def path_for(self, directory, identifier: uuid.UUID) -> str:
        return os.path.join(directory, f"{identifier}.{self.extension}")

    def exists(self, directory, identifier: uuid.UUID) -> bool:
        return os.path.isfile(self.path_for(directory, identifier))

    def load(self, directory) -> Iterator[Texture]:
        """Yield every readable record in ``directory``.

        Each call starts a fresh scan. A missing directory yields nothing, and
        records that cannot be parsed are skipped.
        """
        if directory is None or not os.path.isdir(directory):
            return

        try:
            entries = sorted(os.listdir(directory))
        except OSError:
            self._report("Could not list texture directory", directory=str(directory))
            return

        suffix = f".{self.extension}"
        for entry in entries:
            if not entry.endswith(suffix):
                continue

            path = os.path.join(directory, entry)
            if not os.path.isfile(path):
                continue

            texture = self._load_file(path, entry[: -len(suffix)])
            if texture is not None:
                yield texture

    def _load_file(self, path, stem) -> Optional[Texture]:
        try:
            identifier = parse_identifier(stem)
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
            return Texture.from_document(identifier, document)
        except (OSError, ValueError, MalformedProfileError):
            self._report("Could not load texture from file", path=path)
            return None

    def save(self, directory, texture: Texture, strict=False) -> bool:
        """Write ``texture`` to its record file, replacing any previous content.

        Returns whether the record was written. With ``strict`` the underlying
        fault is raised as ``TextureStoreError`` instead of being reported.
        """
        path = self.path_for(directory, texture.identifier)
        tmp_path = None

        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{texture.identifier}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(texture.to_document(), f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

            if strict:
                raise TextureStoreError(f"Couldn't write texture file {path}") from e

            self._report("Couldn't write texture file", path=path)
            return False

        self.logger.debug(
            "Texture saved", identifier=str(texture.identifier), path=path
        )
        return True

    def delete(self, directory, texture: Texture) -> bool:
        """Remove the record file for ``texture``; returns whether one was deleted."""
        path = self.path_for(directory, texture.identifier)

        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except OSError:
            self._report("Couldn't delete texture file", path=path)
            return False

        self.logger.debug(
            "Texture deleted", identifier=str(texture.identifier), path=path
        )
        return True

    def _report(self, message, **kwargs):
        # Only ever called from inside an except block
        if not self.ignore_errors:
            self.logger.exception(message, **kwargs)
