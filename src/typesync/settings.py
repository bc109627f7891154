import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DOCUMENT = "app/javascript/types/models.d.ts"


@dataclass(frozen=True)
class Settings:
    document: Path
    models_module: str | None
    log_level: str


def get_settings() -> Settings:
    return Settings(
        document=Path(os.getenv("TYPESYNC_DOCUMENT", DEFAULT_DOCUMENT)),
        models_module=os.getenv("TYPESYNC_MODELS") or None,
        log_level=os.getenv("TYPESYNC_LOG_LEVEL", "WARNING").upper(),
    )
