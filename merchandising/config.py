"""Engine configuration and environment setup."""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from merchandising.domains.sales.filters import MAX_DAYS
from merchandising.errors import ConfigError

type ConfigDict = dict[str, str | int | bool | list[str]]

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@dataclass(frozen=True)
class EngineConfig:
    default_days: int
    top_n: int
    data_dir: Path
    output_dir: Path
    log_level: str


def load_engine_config(env: str = "production") -> EngineConfig:
    match env:
        case "production":
            config = EngineConfig(
                default_days=30,
                top_n=5,
                data_dir=Path("/data/merchandising/raw"),
                output_dir=Path("/data/merchandising/output"),
                log_level="INFO",
            )
        case "staging":
            config = EngineConfig(
                default_days=30,
                top_n=5,
                data_dir=Path("/data/merchandising-staging/raw"),
                output_dir=Path("/data/merchandising-staging/output"),
                log_level="INFO",
            )
        case "development":
            config = EngineConfig(
                default_days=30,
                top_n=5,
                data_dir=Path("data"),
                output_dir=Path("output"),
                log_level="DEBUG",
            )
        case other:
            raise ConfigError(f"Unknown environment: {other}")

    return apply_overrides(config, get_env_config())


def apply_overrides(config: EngineConfig, overrides: ConfigDict) -> EngineConfig:
    """Layer `[tool.merchandising]` values over a profile."""
    changes = {}
    for key, value in overrides.items():
        match key:
            case "default_days" | "top_n":
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    raise ConfigError(f"{key} must be a positive integer, got {value!r}")
                if key == "default_days" and value > MAX_DAYS:
                    raise ConfigError(f"default_days must be at most {MAX_DAYS}, got {value}")
                changes[key] = value
            case "data_dir" | "output_dir":
                changes[key] = Path(str(value))
            case "log_level":
                changes[key] = str(value).upper()
            case _:
                # unrelated keys (e.g. tool metadata) are ignored
                continue
    return replace(config, **changes)


def get_env_config(pyproject: Path = PYPROJECT) -> ConfigDict:
    """Read engine overrides from pyproject.toml."""
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("merchandising", {})
