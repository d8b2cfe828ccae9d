import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    WORDS_PATH: Path = field(init=False)

    WORKERS: int = 0
    UNIQUE: bool = False
    DEBUG: bool = False

    NTFY_TOPIC: str = ""
    NTFY_URL: str = "https://ntfy.sh"

    def __post_init__(self):
        self.WORDS_PATH = self.BASE_DIR / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                setattr(self, fld, _coerce(current, env_val))


# Fields that may be changed after startup (CLI flags), with their types.
EDITABLE_FIELDS: dict[str, type] = {
    "WORDS_PATH": Path,
    "WORKERS": int,
    "UNIQUE": bool,
    "DEBUG": bool,
    "NTFY_TOPIC": str,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: "Settings") -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: "Settings", **values) -> dict[str, str]:
    """Apply editable overrides. Returns {field: error} for rejected ones; valid fields still apply."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()
