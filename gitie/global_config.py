"""Layered configuration resolver for gitie.

Two documents are resolved independently, each from the first source that
exists in this order:

1. User scope:    ~/.config/gitie/config.yaml    ~/.config/gitie/commit-prompt
2. Project scope: <cwd>/.gitie/config.yaml       <cwd>/.gitie/commit-prompt
3. Bundled:       gitie/assets/config.example.yaml, gitie/assets/commit-prompt
                  (overridable with GITIE_ASSETS_CONFIG / GITIE_ASSETS_PROMPT)

When a lower-precedence source is used its content is copied into the user
scope so later runs find it there. A source that exists but cannot be read
or parsed is an error; the resolver only falls back past sources that are
absent.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from gitie.config import (
    API_KEY_PLACEHOLDER,
    BUNDLED_CONFIG_TEMPLATE,
    BUNDLED_PROMPT_TEMPLATE,
    CONFIG_FILE_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
    ENV_API_KEY,
    ENV_ASSETS_CONFIG,
    ENV_ASSETS_PROMPT,
    PROJECT_CONFIG_DIR_NAME,
    PROMPT_FILE_NAME,
    USER_CONFIG_SUBDIR,
    ResolvedConfig,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigReadError(ConfigError):
    """Raised when a configuration or prompt file exists but cannot be read."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file '{path}': {reason}")


class ConfigParseError(ConfigError):
    """Raised when a configuration file does not match the expected schema."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse configuration file '{path}': {reason}")


class ConfigFieldMissingError(ConfigError):
    """Raised when a required field is absent or blank after resolution."""

    def __init__(self, field: str, path: Path):
        self.field = field
        self.path = path
        super().__init__(
            f"Required field 'ai.{field}' is missing or empty in '{path}'."
        )


class ConfigNotFoundError(ConfigError):
    """Raised when no configuration source exists at any precedence level."""

    def __init__(self, searched: list[Path]):
        self.searched = searched
        locations = "\n".join(f"  - {p}" for p in searched)
        super().__init__(f"No configuration file found. Looked in:\n{locations}")


class PromptMissingError(ConfigError):
    """Raised when no commit prompt document exists at any precedence level."""

    def __init__(self, searched: list[Path]):
        self.searched = searched
        locations = "\n".join(f"  - {p}" for p in searched)
        super().__init__(f"Commit prompt file is missing. Looked in:\n{locations}")


class ConfigWriteError(ConfigError):
    """Raised when copying a source into the user scope fails."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write file '{path}': {reason}")


class AISection(BaseModel):
    """The `ai:` section of the configuration document."""

    model_config = ConfigDict(extra="ignore")

    api_url: Optional[str] = None
    model_name: Optional[str] = None
    temperature: Optional[float] = None
    api_key: Optional[str] = None
    request_timeout: Optional[float] = None


class ConfigDocument(BaseModel):
    """Top-level schema of a configuration document."""

    model_config = ConfigDict(extra="ignore")

    ai: Optional[AISection] = None


def get_global_config_dir() -> Path:
    """Get the user-scope configuration directory.

    Returns:
        Path to ~/.config/gitie/ (HOME is read at call time).
    """
    return Path.home() / USER_CONFIG_SUBDIR


def get_config_file_path() -> Path:
    """Return path to the user-scope config.yaml."""
    return get_global_config_dir() / CONFIG_FILE_NAME


def get_prompt_file_path() -> Path:
    """Return path to the user-scope commit-prompt."""
    return get_global_config_dir() / PROMPT_FILE_NAME


def get_project_config_dir() -> Path:
    """Return the project-local configuration directory (<cwd>/.gitie)."""
    return Path.cwd() / PROJECT_CONFIG_DIR_NAME


def get_bundled_config_path() -> Path:
    """Return the bundled config template, honouring GITIE_ASSETS_CONFIG."""
    override = os.getenv(ENV_ASSETS_CONFIG)
    return Path(override) if override else BUNDLED_CONFIG_TEMPLATE


def get_bundled_prompt_path() -> Path:
    """Return the bundled prompt template, honouring GITIE_ASSETS_PROMPT."""
    override = os.getenv(ENV_ASSETS_PROMPT)
    return Path(override) if override else BUNDLED_PROMPT_TEMPLATE


def config_search_path() -> list[Path]:
    """Config document sources, highest precedence first."""
    return [
        get_config_file_path(),
        get_project_config_dir() / CONFIG_FILE_NAME,
        get_bundled_config_path(),
    ]


def prompt_search_path() -> list[Path]:
    """Prompt document sources, highest precedence first."""
    return [
        get_prompt_file_path(),
        get_project_config_dir() / PROMPT_FILE_NAME,
        get_bundled_prompt_path(),
    ]


def _first_existing(paths: list[Path]) -> Optional[Path]:
    for path in paths:
        if path.exists():
            return path
    return None


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e)


def _is_same_file(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False


def copy_up(content: str, source: Path, target: Path) -> None:
    """Materialize a lower-precedence source in the user scope.

    Args:
        content: The text already read from the source.
        source: Where the content came from (for logging).
        target: The user-scope destination.

    Raises:
        ConfigWriteError: If the directory or file cannot be written.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(target, e)
    logger.info("Copied %s to %s", source, target)


def parse_config_document(text: str, path: Path) -> ConfigDocument:
    """Parse and validate configuration text.

    Args:
        text: Raw YAML text.
        path: Source path (for error messages).

    Returns:
        The validated ConfigDocument. An empty document is valid.

    Raises:
        ConfigParseError: On YAML syntax errors or schema mismatches.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, e)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be a mapping")

    try:
        return ConfigDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(path, e)


def load_config_document() -> tuple[ConfigDocument, Path]:
    """Load the highest-precedence configuration document.

    Returns:
        The parsed document and the path it was read from.

    Raises:
        ConfigNotFoundError: If no source exists.
        ConfigReadError: If the chosen source cannot be read.
        ConfigParseError: If the chosen source is malformed.
        ConfigWriteError: If copy-up fails.
    """
    searched = config_search_path()
    source = _first_existing(searched)
    if source is None:
        raise ConfigNotFoundError(searched)

    text = _read_text(source)
    document = parse_config_document(text, source)
    logger.debug("Loaded configuration from %s", source)

    user_path = searched[0]
    if not _is_same_file(source, user_path):
        copy_up(text, source, user_path)

    return document, source


def load_system_prompt() -> str:
    """Load the commit prompt document.

    Returns:
        The full text of the prompt file.

    Raises:
        PromptMissingError: If no source exists.
        ConfigReadError: If the chosen source cannot be read.
        ConfigWriteError: If copy-up fails.
    """
    searched = prompt_search_path()
    source = _first_existing(searched)
    if source is None:
        raise PromptMissingError(searched)

    text = _read_text(source)
    logger.debug("Loaded commit prompt from %s", source)

    user_path = searched[0]
    if not _is_same_file(source, user_path):
        copy_up(text, source, user_path)

    return text


def normalize_api_key(value: Optional[str]) -> Optional[str]:
    """Map empty and placeholder keys to None."""
    if value is None:
        return None
    value = value.strip()
    if not value or value == API_KEY_PLACEHOLDER:
        return None
    return value


def _require(value: Optional[str], field: str, source: Path) -> str:
    value = (value or "").strip()
    if not value:
        raise ConfigFieldMissingError(field, source)
    return value


def resolve_config() -> ResolvedConfig:
    """Resolve the effective configuration for this invocation.

    The config document is resolved before the prompt document, so a
    missing prompt still leaves the config copied into the user scope.

    Returns:
        An immutable ResolvedConfig.

    Raises:
        ConfigError: Any of the configuration error kinds.
    """
    document, source = load_config_document()
    ai = document.ai or AISection()

    api_url = _require(ai.api_url, "api_url", source)
    model_name = _require(ai.model_name, "model_name", source)
    temperature = ai.temperature if ai.temperature is not None else DEFAULT_TEMPERATURE
    request_timeout = (
        ai.request_timeout if ai.request_timeout is not None else DEFAULT_REQUEST_TIMEOUT
    )

    # Environment key wins over the file, as with provider keys elsewhere
    api_key = normalize_api_key(os.getenv(ENV_API_KEY)) or normalize_api_key(ai.api_key)
    if api_key is None:
        logger.debug("No API key configured; requests will be sent unauthenticated")

    system_prompt = load_system_prompt()

    return ResolvedConfig(
        api_url=api_url,
        model_name=model_name,
        temperature=temperature,
        api_key=api_key,
        system_prompt=system_prompt,
        request_timeout=request_timeout,
    )
