"""Static configuration for gitie.

Holds file names, environment variable names, defaults and size bounds,
plus the immutable ResolvedConfig built once per invocation by
gitie.global_config.resolve_config().
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

APP_NAME = "gitie"

# Executable that every VCS operation is delegated to
GIT_BINARY = "git"

# ============================================================
# FILE LOCATIONS
# ============================================================

# User scope: $HOME/.config/gitie/
USER_CONFIG_SUBDIR = Path(".config") / APP_NAME
# Project scope: <cwd>/.gitie/
PROJECT_CONFIG_DIR_NAME = f".{APP_NAME}"

CONFIG_FILE_NAME = "config.yaml"
PROMPT_FILE_NAME = "commit-prompt"

# Bundled templates shipped inside the package
ASSETS_DIR = Path(__file__).parent / "assets"
BUNDLED_CONFIG_TEMPLATE = ASSETS_DIR / "config.example.yaml"
BUNDLED_PROMPT_TEMPLATE = ASSETS_DIR / PROMPT_FILE_NAME

# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_ASSETS_CONFIG = "GITIE_ASSETS_CONFIG"
ENV_ASSETS_PROMPT = "GITIE_ASSETS_PROMPT"
ENV_API_KEY = "GITIE_API_KEY"
ENV_LOG_LEVEL = "GITIE_LOG"

# ============================================================
# DEFAULTS
# ============================================================

# Templates ship with this value meaning "no key configured"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_IF_NEEDED"

DEFAULT_TEMPERATURE = 0.7
DEFAULT_REQUEST_TIMEOUT = 120.0

# Commit messages are generated cooler and shorter than explanations
COMMIT_MAX_TEMPERATURE = 0.5
COMMIT_MAX_TOKENS = 200

# Captured git calls (help text, diffs) must finish within this many seconds
CAPTURE_TIMEOUT_SECONDS = 120

# ============================================================
# PAYLOAD BOUNDS
# ============================================================

MAX_PAYLOAD_CHARS = 8000
TRUNCATION_MARGIN = 100
TRUNCATION_MARKER = f"\n... [truncated: input exceeded {MAX_PAYLOAD_CHARS} characters]"


class ResolvedConfig(BaseModel):
    """Effective configuration for one invocation.

    Attributes:
        api_url: Chat-completions endpoint.
        model_name: Model identifier sent with every request.
        temperature: Sampling temperature for free-form calls.
        api_key: Bearer token, or None when no key is configured.
        system_prompt: Contents of the commit prompt document.
        request_timeout: Seconds to wait for the AI backend.
    """

    model_config = ConfigDict(frozen=True)

    api_url: str
    model_name: str
    temperature: float = DEFAULT_TEMPERATURE
    api_key: Optional[str] = None
    system_prompt: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
