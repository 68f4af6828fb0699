class SkullCacherError(Exception):
    pass


class MalformedProfileError(SkullCacherError):
    """Raised when a profile response or a record document has the wrong shape."""


class TextureStoreError(SkullCacherError):
    """Raised by the record store when strict error propagation is requested."""
