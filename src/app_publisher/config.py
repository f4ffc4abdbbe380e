"""Configuration loading and defaults."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger("app_publisher.config")

DEFAULT_MODEL = "gemini/gemini-2.5-flash-image"
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"


def default_config_path() -> Path:
    return Path.home() / ".app-publisher" / "config.json"


def default_output_dir() -> Path:
    return Path.home() / "app-publisher-assets"


@dataclass
class Timeouts:
    """External-process timeouts in seconds."""

    publish: int = 300
    flow: int = 180
    screenshot: int = 30
    installer: int = 120
    probe: int = 10


@dataclass
class Settings:
    """Process-wide settings: Gemini API key and default image model.

    Environment variables override stored values. Only explicit
    configuration calls write to disk.
    """

    gemini_api_key: str = ""
    gemini_model: str = ""
    path: Path = field(default_factory=default_config_path, compare=False)
    timeouts: Timeouts = field(default_factory=Timeouts, compare=False)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from config.json, falling back to defaults."""
        if path is None:
            path = default_config_path()
        if not path.exists():
            return cls(path=path)

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", path, e)
            return cls(path=path)
        if not isinstance(raw, dict):
            return cls(path=path)

        return cls(
            gemini_api_key=str(raw.get("geminiApiKey") or ""),
            gemini_model=str(raw.get("geminiModel") or ""),
            path=path,
        )

    def save(self) -> None:
        data = {}
        if self.gemini_api_key:
            data["geminiApiKey"] = self.gemini_api_key
        if self.gemini_model:
            data["geminiModel"] = self.gemini_model
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    # ── Accessors ───────────────────────────────────────────────────────

    @property
    def api_key(self) -> str:
        return os.environ.get(API_KEY_ENV) or self.gemini_api_key

    @property
    def model(self) -> str:
        return os.environ.get(MODEL_ENV) or self.gemini_model or DEFAULT_MODEL

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def config_source(self) -> str:
        """Where the API key comes from: ``env``, ``config`` or ``none``."""
        if os.environ.get(API_KEY_ENV):
            return "env"
        if self.gemini_api_key:
            return "config"
        return "none"

    def set_api_key(self, key: str) -> None:
        self.gemini_api_key = key
        self.save()

    def set_model(self, model: str) -> None:
        self.gemini_model = model
        self.save()


def mask_key(key: str) -> str:
    if len(key) <= 12:
        return "*" * len(key)
    return f"{key[:8]}...{key[-4:]}"
