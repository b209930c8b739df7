"""Run configuration for an import.

:class:`ImportConfig` is built from CLI arguments, optionally layered over a
JSON config file loaded with :func:`load_config`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from issuetree.exceptions import ConfigError

DEFAULT_INPUT_PATH = Path("hierarchy.json")
DEFAULT_PROJECT_NUMBER = 1


class ThrottleConfig(BaseModel):
    """Fixed pauses (in seconds) inserted after rate-sensitive calls.

    These only keep GitHub's secondary rate limits at bay; nothing depends
    on them for ordering.
    """

    issue_create: float = Field(default=0.5, ge=0)
    label_create: float = Field(default=0.1, ge=0)
    sub_issue_link: float = Field(default=0.3, ge=0)
    tasklist_edit: float = Field(default=0.3, ge=0)

    model_config = {"frozen": True}


class ImportConfig(BaseModel):
    """Top-level configuration for an ``issuetree`` run.

    Attributes:
        owner: Repository / project owner login.
        repo: Repository name (without owner).
        project_number: GitHub Projects (v2) number the issues are added to.
        input_path: Path to the hierarchy JSON document.
        dry_run: When *True*, no mutating call reaches GitHub.
        auto_create_labels: Create labels used by the hierarchy that do not exist yet.
        throttle: Delays between rate-sensitive calls.
        verbose: When *True*, emit debug logging (every ``gh`` invocation).
    """

    owner: str
    repo: str
    project_number: int = Field(default=DEFAULT_PROJECT_NUMBER, ge=1)
    input_path: Path = DEFAULT_INPUT_PATH
    dry_run: bool = True
    auto_create_labels: bool = True
    throttle: ThrottleConfig = Field(default_factory=ThrottleConfig)
    verbose: bool = False

    model_config = {"frozen": True}

    @field_validator("owner", "repo")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value:
            raise ValueError("must be a non-empty name without '/'")
        return value

    @property
    def target(self) -> str:
        """``OWNER/REPO`` form used by ``gh -R``."""
        return f"{self.owner}/{self.repo}"


def split_target(target: str) -> tuple[str, str]:
    """Split ``OWNER/REPO`` into its parts.

    Raises:
        ConfigError: If *target* is not exactly two non-empty segments.
    """
    parts = target.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigError(f"invalid repository {target!r}: use OWNER/REPO")
    return parts[0], parts[1]


def load_config(path: str | Path, overrides: dict[str, Any] | None = None) -> ImportConfig:
    """Load an :class:`ImportConfig` from a JSON file.

    A relative ``input_path`` is resolved against the config file's directory.
    Keys in *overrides* replace file values before validation.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or fails validation.
    """
    config_path = Path(path).expanduser().resolve()
    try:
        raw: Any = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {config_path}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"config file must contain a JSON object: {config_path}")

    if "input_path" in raw:
        input_path = Path(raw["input_path"])
        if not input_path.is_absolute():
            raw["input_path"] = str((config_path.parent / input_path).resolve())

    return build_config({**raw, **(overrides or {})})


def build_config(values: dict[str, Any]) -> ImportConfig:
    """Validate *values* into an :class:`ImportConfig`, mapping errors to :class:`ConfigError`."""
    try:
        return ImportConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
