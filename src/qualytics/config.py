"""Configuration loading and management for Qualytics.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.qualytics.toml)
    3. Project config (./qualytics.toml)
    4. Explicit config file
    5. Environment variables (QUALYTICS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
CyclePolicy = Literal["zero", "raise"]

_VERBOSITIES = ("quiet", "normal", "verbose")
_CYCLE_POLICIES = ("zero", "raise")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        workers: Threads for per-function metrics (None = sequential)
        inheritance_cycle_policy: On a cyclic type graph, "zero" reports
            depth 0 with a warning, "raise" propagates InheritanceCycleError
        include_functions: Emit per-function rows/records in output
        verbosity: Logging verbosity level
        decimals: Decimal places for floats in table output
        log_file: Also append log records to this file
    """

    workers: Optional[int] = None
    inheritance_cycle_policy: CyclePolicy = "zero"
    include_functions: bool = True
    verbosity: Verbosity = "normal"
    decimals: int = 2
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.inheritance_cycle_policy not in _CYCLE_POLICIES:
            raise InvalidConfigError(
                "inheritance_cycle_policy",
                self.inheritance_cycle_policy,
                f"must be one of {', '.join(_CYCLE_POLICIES)}",
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )
        if not 0 <= self.decimals <= 10:
            raise InvalidConfigError("decimals", self.decimals, "must be between 0 and 10")


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".qualytics.toml"
    if global_config.exists():
        merged.update(_load_section(global_config))

    project_config = Path.cwd() / "qualytics.toml"
    if project_config.exists():
        merged.update(_load_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_section(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_section(path: Path) -> dict:
    """Read a TOML file; settings may sit at top level or under [qualytics]."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
    section = data.get("qualytics", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid [qualytics] section in '{path}'")
    return section


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from QUALYTICS_* environment variables.

    Supported environment variables:
        QUALYTICS_WORKERS: int
        QUALYTICS_INHERITANCE_CYCLE_POLICY: zero/raise
        QUALYTICS_INCLUDE_FUNCTIONS: bool (true/false/1/0)
        QUALYTICS_VERBOSITY: quiet/normal/verbose
        QUALYTICS_DECIMALS: int
        QUALYTICS_LOG_FILE: path
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"QUALYTICS_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
