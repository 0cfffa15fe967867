# config.py
from pathlib import Path

from dynaconf import Dynaconf

from utils.bssid.constants import (
    DEFAULT_HEADER_MARKERS,
    DEFAULT_SEPARATOR_PREFIX,
    DEFAULT_ADDRESS_HEADER,
    DEFAULT_BSSID_KEYWORDS,
    MODE_ACCESS,
)

BASE_DIR = Path(__file__).resolve().parent


def load_settings(*settings_files: str) -> Dynaconf:
    """Load settings from settings.toml (or the given files) and BSSIDSCAN_ env vars."""
    files = list(settings_files) or [str(BASE_DIR / 'settings.toml')]
    return Dynaconf(
        envvar_prefix='BSSIDSCAN',
        settings_files=files,
        environments=True,
        LOG_LEVEL='INFO',
        HEADER_MARKERS=list(DEFAULT_HEADER_MARKERS),
        SEPARATOR_PREFIX=DEFAULT_SEPARATOR_PREFIX,
        ADDRESS_HEADER=DEFAULT_ADDRESS_HEADER,
        BSSID_KEYWORDS=list(DEFAULT_BSSID_KEYWORDS),
        ACCESS_MODE=MODE_ACCESS,
    )


settings = load_settings()
