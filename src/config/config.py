import os
from dataclasses import dataclass

from utils.config_utils import load_defaults
from utils.constants import EnvConstants


@dataclass(frozen=True)
class Settings:
    id_set_cache_ttl_seconds: float
    presence_ttl_seconds: float
    log_level: str

    def __init__(self):
        defaults = load_defaults()
        object.__setattr__(
            self,
            "id_set_cache_ttl_seconds",
            float(
                os.getenv(
                    EnvConstants.ID_SET_CACHE_TTL_SECONDS.value,
                    str(defaults["cache"]["id_set_ttl_seconds"]),
                ).strip()
            ),
        )
        object.__setattr__(
            self,
            "presence_ttl_seconds",
            float(
                os.getenv(
                    EnvConstants.PRESENCE_TTL_SECONDS.value,
                    str(defaults["presence"]["ttl_seconds"]),
                ).strip()
            ),
        )
        object.__setattr__(
            self,
            "log_level",
            os.getenv(EnvConstants.LOG_LEVEL.value, defaults["logging"]["level"])
            .strip()
            .upper(),
        )


SETTINGS = Settings()
