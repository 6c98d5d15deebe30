"""
Path management for perf_timeline

Handles platform-specific user directories following standard conventions:
- macOS: ~/Library/Application Support/PerfTimeline/
- Linux: ~/.local/share/perf-timeline/ (data), ~/.config/perf-timeline/ (config)
- Windows: %APPDATA%/PerfTimeline/

Every directory can be redirected with PERF_TIMELINE_HOME, which tests use
to keep settings and logs out of the real home directory.
"""
import os
import sys
from pathlib import Path


APP_NAME = "PerfTimeline"
APP_SLUG = "perf-timeline"
HOME_ENV_VAR = "PERF_TIMELINE_HOME"


def _override_dir() -> Path | None:
    override = os.getenv(HOME_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path
    return None


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.

    Returns:
        Path to user data directory where logs and other user files are stored.
    """
    override = _override_dir()
    if override is not None:
        return override

    system = sys.platform

    if system == "darwin":  # macOS
        base = Path.home() / "Library" / "Application Support"
        user_data_dir = base / APP_NAME
    elif system == "win32":  # Windows
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        user_data_dir = base / APP_NAME
    else:  # Linux and other Unix-like
        user_data_dir = Path.home() / ".local" / "share" / APP_SLUG

    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Returns:
        Path to user config directory (same as user_data_dir on macOS/Windows,
        but separate on Linux: ~/.config/perf-timeline/)
    """
    override = _override_dir()
    if override is not None:
        return override

    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path.home() / ".config" / APP_SLUG
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """
    Get directory for application logs.

    Returns:
        Path to logs directory (stored in user data directory).
    """
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """
    Get path to settings file.

    Returns:
        Path to timeline_settings.json in user config directory.
    """
    return get_user_config_dir() / "timeline_settings.json"
