"""
Shared utilities: logging facade and user directory paths.
"""

from .message import Log, init_logger
from .paths import get_user_config_dir, get_logs_dir, get_settings_path

__all__ = [
    'Log',
    'init_logger',
    'get_user_config_dir',
    'get_logs_dir',
    'get_settings_path',
]
