from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import ENV_CATALOG_PATH, ENV_STRICT_IMPORTS

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class IonConfig:
    catalog_path: Optional[Path] = None
    strict_imports: bool = False

    @classmethod
    def from_env(cls) -> "IonConfig":
        raw_path = (os.getenv(ENV_CATALOG_PATH) or "").strip()
        strict = (os.getenv(ENV_STRICT_IMPORTS, "0") or "0").strip().lower() in _TRUTHY
        return cls(catalog_path=Path(raw_path) if raw_path else None, strict_imports=strict)


__all__ = ["IonConfig"]
