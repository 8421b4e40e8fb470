from dataclasses import dataclass
from typing import Optional

from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from kraph.config.settings import (
    StoreConfig,
    SerializationConfig,
    KraphConfig,
)

settings = Dynaconf(
    envvar_prefix="KRAPH",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key: str):
    return settings.get(key, DEFAULTS[key])


def _parse_optional_int(value):
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")
    log_level: str = _setting("LOG_LEVEL")

    # ---------------- Kraph Policy ----------------
    kraph: KraphConfig = KraphConfig(
        store=StoreConfig(
            prefer_writers=_setting("STORE_PREFER_WRITERS"),
        ),
        serialization=SerializationConfig(
            indent=_parse_optional_int(_setting("SERIALIZATION_INDENT")),
            sort_keys=_setting("SERIALIZATION_SORT_KEYS"),
        ),
    )

    # ---------------- Data Paths ----------------
    seed_edges_path: Optional[str] = _setting("SEED_EDGES_PATH")
