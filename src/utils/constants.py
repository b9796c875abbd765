from enum import Enum


class FilterKind(Enum):
    NONE = "none"
    NAME = "name"
    EVENT_CODE = "event_code"
    EVENT_NAME = "event_name"
    ALL_USERS = "all_users"


class FilterKeywords(Enum):
    EVENT_PREFIX = "event:"
    ALL_USERS = "all:users"


class EnvConstants(Enum):
    ID_SET_CACHE_TTL_SECONDS = "ID_SET_CACHE_TTL_SECONDS"
    PRESENCE_TTL_SECONDS = "PRESENCE_TTL_SECONDS"
    LOG_LEVEL = "LOG_LEVEL"
