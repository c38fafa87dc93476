from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Level used for the "mws_engine" logger. Accepts standard logging names.
    MWS_LOG_LEVEL: str = "INFO"

    # When enabled, importing the logger module installs a stdout handler via
    # logging.basicConfig. Host applications normally configure logging
    # themselves, so this is off unless explicitly requested.
    MWS_CONFIGURE_LOGGING: bool = False

    # Register the built-in catalog sections (Products, Subscriptions) lazily
    # on first lookup. Disable to start from an empty registry and call
    # init_catalog()/register_section() by hand.
    MWS_AUTOLOAD_SECTIONS: bool = True

    # Record every build_request() call into the in-memory request event log.
    MWS_RECORD_EVENTS: bool = False
    MWS_EVENT_LOG_SIZE: int = 1000

    class Config:
        env_file = None
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def log_level(self) -> str:
        return (self.MWS_LOG_LEVEL or "INFO").upper()


settings = Settings()
