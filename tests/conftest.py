"""Shared fixtures for app-publisher tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from app_publisher.config import Settings
from app_publisher.models import Capabilities, Framework, ProjectInfo

README = """\
# Habit Tracker

Small app for building routines.

## Features

- Track daily habits with streaks
- **Reminders** at the time you choose
- Built with TypeScript
- `src/App.tsx` entry point
- ok

## Development

- Run the local dev server easily
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config and output directories out of the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    return home


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(path=tmp_path / "config" / "config.json")


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory writing a project directory from a mapping of relative path to content."""

    def _make(files: dict[str, str | dict], name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, dict):
                content = json.dumps(content)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def expo_project(make_project) -> Path:
    """An Expo app with ads, analytics and in-app purchases."""
    return make_project(
        {
            "package.json": {
                "name": "habit-tracker",
                "version": "2.0.0",
                "description": "Track your habits",
                "dependencies": {
                    "expo": "~51.0.0",
                    "react-native": "0.74.0",
                    "react-native-google-mobile-ads": "^13.0.0",
                    "@react-native-firebase/analytics": "^20.0.0",
                    "react-native-purchases": "^7.0.0",
                },
            },
            "app.json": {
                "expo": {
                    "name": "Habit Tracker",
                    "version": "2.1.0",
                    "description": "Build better habits, one day at a time.",
                    "ios": {
                        "bundleIdentifier": "com.acme.habits",
                        "appleTeamId": "ABCDE12345",
                        "infoPlist": {
                            "NSCameraUsageDescription": "Scan habit cards",
                            "ITSAppUsesNonExemptEncryption": False,
                        },
                    },
                    "android": {
                        "package": "com.acme.habits.android",
                        "permissions": ["CAMERA"],
                    },
                }
            },
            "README.md": README,
        },
        name="habit-tracker",
    )


@pytest.fixture
def sample_info() -> ProjectInfo:
    """A fully populated ProjectInfo for writer and formatter tests."""
    return ProjectInfo(
        app_name="Habit Tracker",
        bundle_id="com.acme.habits",
        version="2.1.0",
        description="Build better habits, one day at a time.",
        features=("Track daily habits with streaks", "Reminders at the time you choose"),
        framework=Framework.EXPO,
        permissions=frozenset({"NSCameraUsageDescription", "CAMERA"}),
        capabilities=Capabilities(has_ads=True, has_analytics=True, has_in_app_purchase=True),
        team_id="ABCDE12345",
    )
