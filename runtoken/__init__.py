"""runtoken — local shared-secret token auth."""

__version__ = "0.1.0"

from .auth import AuthToken, generate_token, timing_safe_equal
from .config import ENV_XDG_RUNTIME_DIR, RuntimeDirError, get_token_file_path

__all__ = [
    "AuthToken",
    "ENV_XDG_RUNTIME_DIR",
    "RuntimeDirError",
    "generate_token",
    "get_token_file_path",
    "timing_safe_equal",
]
