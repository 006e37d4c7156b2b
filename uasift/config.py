# uasift/config.py

from typing import List
from pydantic_settings import BaseSettings
from uasift.rules import UA_MAX_LENGTH


class Settings(BaseSettings):
    # HTTP service
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Classification
    ua_max_length: int = UA_MAX_LENGTH

    # Extension bundles applied to the service's rule table, e.g. ["crawlers", "clis"]
    extensions: List[str] = []

    # Splice extension rules before the defaults instead of replacing them
    prepend_extensions: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "UASIFT_"


settings = Settings()
