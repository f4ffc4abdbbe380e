"""Typed views over package.json and app.json.

Both files are optional and may be malformed. Loading never raises: a file
that is missing, unreadable or not a JSON object yields an empty view whose
accessors return defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

log = logging.getLogger("app_publisher.extractors")


def _read_json_object(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.debug("Ignoring unreadable %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.debug("Ignoring %s: top level is not an object", path)
        return {}
    return data


def _str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    return value.strip() if isinstance(value, str) else ""


def _obj(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class PackageManifest:
    """Fields of interest from package.json."""

    name: str = ""
    version: str = ""
    description: str = ""
    dependencies: frozenset[str] = frozenset()

    @classmethod
    def load(cls, project_dir: Path) -> PackageManifest:
        raw = _read_json_object(project_dir / "package.json")
        deps: set[str] = set()
        for key in ("dependencies", "devDependencies"):
            deps.update(name for name in _obj(raw, key) if isinstance(name, str))
        return cls(
            name=_str(raw, "name"),
            version=_str(raw, "version"),
            description=_str(raw, "description"),
            dependencies=frozenset(deps),
        )

    def has_dependency(self, name: str) -> bool:
        return name in self.dependencies


@dataclass(frozen=True)
class AppConfig:
    """Fields of interest from app.json.

    Expo projects nest everything under an ``expo`` key; bare React Native
    projects keep ``name`` / ``displayName`` at the top level.
    """

    platform_name: str = ""
    generic_name: str = ""
    version: str = ""
    description: str = ""
    ios_bundle_id: str = ""
    android_package: str = ""
    team_id: str = ""
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def load(cls, project_dir: Path) -> AppConfig:
        raw = _read_json_object(project_dir / "app.json")
        expo = _obj(raw, "expo")
        ios = _obj(expo, "ios") or _obj(raw, "ios")
        android = _obj(expo, "android") or _obj(raw, "android")

        permissions: set[str] = set()
        for key in _obj(ios, "infoPlist"):
            if isinstance(key, str) and key.endswith("UsageDescription"):
                permissions.add(key)
        android_perms = android.get("permissions")
        if isinstance(android_perms, list):
            permissions.update(p for p in android_perms if isinstance(p, str) and p)

        return cls(
            platform_name=_str(expo, "name"),
            generic_name=_str(raw, "displayName") or _str(raw, "name"),
            version=_str(expo, "version"),
            description=_str(expo, "description"),
            ios_bundle_id=_str(ios, "bundleIdentifier"),
            android_package=_str(android, "package"),
            team_id=_str(ios, "appleTeamId") or _str(ios, "teamId"),
            permissions=frozenset(permissions),
        )
