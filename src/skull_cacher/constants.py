import enum

DEFAULT_SESSION_URL = "https://sessionserver.mojang.com"
DEFAULT_API_URL = "https://api.mojang.com"

PROFILE_PATH = "/session/minecraft/profile/{compact_id}"
NAME_LOOKUP_PATH = "/users/profiles/minecraft/{name}"

# Seconds to wait for the session server before giving up on a fetch
DEFAULT_READ_TIMEOUT = 10.0

# Used for writing, loading and deleting record files alike
TEXTURE_FILE_EXTENSION = "texture"


class OUTCOME_KIND(enum.Enum):
    STARTED = "STARTED"
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
    ERROR = "ERROR"
