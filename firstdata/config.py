import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

LIVE_API_URL = "https://api.globalgatewaye4.firstdata.com/transaction/"
TEST_API_URL = "https://api.demo.globalgatewaye4.firstdata.com/transaction/"

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _env_seconds(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number of seconds, using %s", name, value, default)
        return default


class Config:
    GATEWAY_ID = ""
    PASSWORD = ""
    KEY_ID = ""
    HMAC_KEY = ""
    API_VERSION = "v12"
    TEST_MODE = False
    CONNECT_TIMEOUT = 30
    TIMEOUT = 60

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(Config, name.upper()):
                raise TypeError(f"Unknown configuration option: {name}")
            setattr(self, name.upper(), value)

    @classmethod
    def from_env(cls, **overrides):
        values = dict(
            GATEWAY_ID=os.getenv("FIRSTDATA_GATEWAY_ID", cls.GATEWAY_ID),
            PASSWORD=os.getenv("FIRSTDATA_PASSWORD", cls.PASSWORD),
            KEY_ID=os.getenv("FIRSTDATA_KEY_ID", cls.KEY_ID),
            HMAC_KEY=os.getenv("FIRSTDATA_HMAC_KEY", cls.HMAC_KEY),
            API_VERSION=os.getenv("FIRSTDATA_API_VERSION", cls.API_VERSION),
            TEST_MODE=_env_flag("FIRSTDATA_TEST_MODE", cls.TEST_MODE),
            CONNECT_TIMEOUT=_env_seconds("FIRSTDATA_CONNECT_TIMEOUT", cls.CONNECT_TIMEOUT),
            TIMEOUT=_env_seconds("FIRSTDATA_TIMEOUT", cls.TIMEOUT),
        )
        values.update({k.upper(): v for k, v in overrides.items()})
        return cls(**values)

    @property
    def base_url(self):
        return TEST_API_URL if self.TEST_MODE else LIVE_API_URL


config = Config.from_env()
