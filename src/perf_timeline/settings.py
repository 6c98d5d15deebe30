"""
Timeline Settings

Single source of truth for tunable timeline behavior.

Settings are:
- App-wide (not session-specific)
- Persisted as JSON in the user config directory
- Overridable from the environment (PERF_TIMELINE_* variables, a .env
  file is honored via python-dotenv)
- Type-safe via dataclass schema

Usage:
    settings = TimelineSettingsManager().settings

    # Read settings
    settings.max_scale

    # Validate before use
    result = settings.validate()
    if not result:
        for error in result.errors:
            Log.error(error)
"""
import json
import os
from dataclasses import dataclass, asdict, fields, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .constants import (
    MIN_SCALE, MAX_SCALE, ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR, CLICK_THRESHOLD_PX,
    LABEL_MIN_WIDTH, IDEAL_TICK_COUNT, MAX_TICK_COUNT, DEFAULT_END_TIME,
    REPLAY_POLL_INTERVAL_MS,
)
from .utils.message import Log, LEVEL_MAP
from .utils.paths import get_settings_path

ENV_PREFIX = "PERF_TIMELINE_"


# =============================================================================
# Validation
# =============================================================================

@dataclass
class ValidationResult:
    """
    Result of validating settings.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def __bool__(self) -> bool:
        return self.valid


# =============================================================================
# Settings Schema (Dataclass)
# =============================================================================

@dataclass
class TimelineSettings:
    """
    Timeline settings schema.

    Add new settings here - they are saved/loaded and overridable from the
    environment automatically. All fields need defaults so older settings
    files keep loading.
    """

    # Zoom
    min_scale: float = MIN_SCALE  # Pixels per ms
    max_scale: float = MAX_SCALE
    zoom_in_factor: float = ZOOM_IN_FACTOR
    zoom_out_factor: float = ZOOM_OUT_FACTOR
    default_end_time: float = DEFAULT_END_TIME  # Natural default window in ms

    # Pointer
    click_threshold_px: float = CLICK_THRESHOLD_PX

    # Drawing
    label_min_width: float = LABEL_MIN_WIDTH
    ideal_tick_count: int = IDEAL_TICK_COUNT
    max_tick_count: int = MAX_TICK_COUNT

    # Replay coupling
    replay_poll_interval_ms: int = REPLAY_POLL_INTERVAL_MS
    replay_time_offset_ms: float = 0.0

    # Logging
    log_level: str = "INFO"

    def validate(self) -> ValidationResult:
        """Check ranges and relationships between fields."""
        result = ValidationResult()
        if self.min_scale <= 0:
            result.add_error(f"min_scale: must be > 0 (got {self.min_scale})")
        if self.max_scale < self.min_scale:
            result.add_error(f"max_scale: must be >= min_scale (got {self.max_scale} < {self.min_scale})")
        if self.zoom_in_factor <= 1:
            result.add_error(f"zoom_in_factor: must be > 1 (got {self.zoom_in_factor})")
        if not 0 < self.zoom_out_factor < 1:
            result.add_error(f"zoom_out_factor: must be between 0 and 1 (got {self.zoom_out_factor})")
        if self.default_end_time <= 0:
            result.add_error(f"default_end_time: must be > 0 (got {self.default_end_time})")
        if self.click_threshold_px < 0:
            result.add_error(f"click_threshold_px: must be >= 0 (got {self.click_threshold_px})")
        if self.label_min_width < 0:
            result.add_error(f"label_min_width: must be >= 0 (got {self.label_min_width})")
        if self.ideal_tick_count < 1:
            result.add_error(f"ideal_tick_count: must be >= 1 (got {self.ideal_tick_count})")
        if self.max_tick_count < self.ideal_tick_count:
            result.add_error(
                f"max_tick_count: must be >= ideal_tick_count "
                f"(got {self.max_tick_count} < {self.ideal_tick_count})"
            )
        if self.replay_poll_interval_ms < 1:
            result.add_error(f"replay_poll_interval_ms: must be >= 1 (got {self.replay_poll_interval_ms})")
        if self.log_level.upper() not in LEVEL_MAP:
            result.add_error(f"log_level: must be one of {sorted(LEVEL_MAP)} (got {self.log_level!r})")
        return result

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimelineSettings':
        """
        Create from dictionary. Unknown keys are ignored and missing keys
        take their defaults, so files from other versions still load.

        Raises:
            ValueError: If a value cannot be converted to the field type
        """
        known = {f.name: f for f in fields(cls)}
        values = {}
        for key, raw in data.items():
            if key not in known:
                continue
            values[key] = _coerce(known[key].type, raw, key)
        return cls(**values)

    def with_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> 'TimelineSettings':
        """
        Return a copy with PERF_TIMELINE_<FIELD> environment values applied.

        Example: PERF_TIMELINE_MAX_SCALE=20
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(self):
            env_key = f"{ENV_PREFIX}{f.name.upper()}"
            if env_key in environ:
                overrides[f.name] = _coerce(f.type, environ[env_key], env_key)
        return replace(self, **overrides) if overrides else self


def _coerce(type_hint, raw: Any, name: str) -> Any:
    """Convert a JSON/env value to the declared field type."""
    type_name = type_hint if isinstance(type_hint, str) else getattr(type_hint, '__name__', str(type_hint))
    try:
        if type_name == 'float':
            return float(raw)
        if type_name == 'int':
            return int(float(raw))
        if type_name == 'bool':
            if isinstance(raw, str):
                return raw.strip().lower() in ('1', 'true', 'yes', 'on')
            return bool(raw)
        return str(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name}: cannot convert {raw!r} to {type_name}") from e


# =============================================================================
# Settings Manager
# =============================================================================

class TimelineSettingsManager:
    """
    Loads, validates and saves TimelineSettings.

    Load order (later wins):
        1. Dataclass defaults
        2. JSON settings file
        3. Environment (after load_dotenv())
    """

    def __init__(self, path: Optional[Path] = None, use_env: bool = True):
        self._path = Path(path) if path is not None else None
        self._use_env = use_env
        self._settings = TimelineSettings()
        self.load()

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = get_settings_path()
        return self._path

    @property
    def settings(self) -> TimelineSettings:
        return self._settings

    def load(self) -> TimelineSettings:
        """
        Load settings from file and environment.

        An unreadable or invalid file is logged and replaced by defaults.
        """
        settings = TimelineSettings()
        try:
            if self.path.exists():
                with open(self.path, 'r', encoding='utf-8') as file:
                    settings = TimelineSettings.from_dict(json.load(file))
                Log.debug(f"TimelineSettingsManager: Loaded settings from {self.path}")
        except (OSError, ValueError) as e:
            Log.error(f"TimelineSettingsManager: Failed to load settings from {self.path}: {e}")
            settings = TimelineSettings()

        if self._use_env:
            load_dotenv()
            settings = settings.with_env_overrides()

        result = settings.validate()
        if not result:
            for error in result.errors:
                Log.error(f"TimelineSettingsManager: {error}")
            Log.warning("TimelineSettingsManager: Invalid settings, using defaults")
            settings = TimelineSettings()

        self._settings = settings
        Log.set_level(settings.log_level)
        return settings

    def update(self, **changes) -> TimelineSettings:
        """
        Apply changes and persist them.

        Raises:
            ValueError: If the resulting settings are invalid or a key is unknown
        """
        known = {f.name for f in fields(TimelineSettings)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        candidate = replace(self._settings, **changes)
        result = candidate.validate()
        if not result:
            raise ValueError("; ".join(result.errors))
        self._settings = candidate
        self.save()
        return candidate

    def save(self) -> None:
        """Write settings to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as file:
            json.dump(self._settings.to_dict(), file, indent=4)
        Log.debug(f"TimelineSettingsManager: Saved settings to {self.path}")
