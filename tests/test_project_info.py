"""Tests for project scanning: manifests, docs, feature bullets and framework."""

from __future__ import annotations

from pathlib import Path

import pytest

from app_publisher.extractors.manifest import AppConfig, PackageManifest
from app_publisher.extractors.project_info import (
    MAX_FEATURES,
    detect_framework,
    extract_features,
    is_feature_candidate,
    read_docs,
    scan_project,
)
from app_publisher.models import Framework


class TestScanProject:
    def test_expo_project(self, expo_project: Path):
        info = scan_project(expo_project)
        assert info.app_name == "Habit Tracker"
        assert info.bundle_id == "com.acme.habits"
        assert info.version == "2.1.0"
        assert info.description == "Build better habits, one day at a time."
        assert info.framework is Framework.EXPO
        assert info.team_id == "ABCDE12345"
        assert info.permissions == frozenset({"NSCameraUsageDescription", "CAMERA"})
        caps = info.capabilities
        assert caps.has_ads and caps.has_analytics and caps.has_in_app_purchase
        assert not caps.has_user_auth
        assert not caps.has_gambling

    def test_features_from_features_section_only(self, expo_project: Path):
        info = scan_project(expo_project)
        assert info.features == ("Track daily habits with streaks", "Reminders at the time you choose")

    def test_empty_directory_uses_defaults(self, make_project):
        root = make_project({}, name="My Cool App")
        info = scan_project(root)
        assert info.app_name == "My Cool App"
        assert info.bundle_id == "com.example.mycoolapp"
        assert info.version == "1.0.0"
        assert info.description == ""
        assert info.features == ()
        assert info.framework is Framework.NATIVE
        assert not any(info.capabilities.flags().values())
        assert info.team_id is None

    def test_malformed_json_treated_as_absent(self, make_project):
        root = make_project(
            {"package.json": "{not json", "app.json": "[1, 2, 3]"}, name="broken"
        )
        info = scan_project(root)
        assert info.app_name == "broken"
        assert info.version == "1.0.0"

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Project directory not found"):
            scan_project(tmp_path / "nope")

    def test_package_json_fallbacks(self, make_project):
        root = make_project(
            {"package.json": {"name": "plain-app", "version": "0.3.0", "description": "A plain app"}}
        )
        info = scan_project(root)
        assert info.app_name == "plain-app"
        assert info.version == "0.3.0"
        assert info.description == "A plain app"
        assert info.bundle_id == "com.example.plainapp"

    def test_android_package_used_without_ios_bundle(self, make_project):
        root = make_project({"app.json": {"expo": {"name": "X", "android": {"package": "com.x.app"}}}})
        assert scan_project(root).bundle_id == "com.x.app"

    def test_bare_react_native_display_name(self, make_project):
        root = make_project(
            {
                "app.json": {"name": "BareApp", "displayName": "Bare App"},
                "package.json": {"name": "bare-app", "dependencies": {"react-native": "0.74.0"}},
            }
        )
        info = scan_project(root)
        assert info.app_name == "Bare App"
        assert info.framework is Framework.REACT_NATIVE


class TestManifest:
    def test_dev_dependencies_included(self, make_project):
        root = make_project(
            {"package.json": {"dependencies": {"a": "1"}, "devDependencies": {"b": "1"}}}
        )
        manifest = PackageManifest.load(root)
        assert manifest.has_dependency("a")
        assert manifest.has_dependency("b")

    def test_missing_files_give_empty_views(self, tmp_path: Path):
        assert PackageManifest.load(tmp_path) == PackageManifest()
        assert AppConfig.load(tmp_path) == AppConfig()

    def test_non_string_values_ignored(self, make_project):
        root = make_project({"package.json": {"name": 42, "version": ["1"]}})
        manifest = PackageManifest.load(root)
        assert manifest.name == ""
        assert manifest.version == ""


class TestReadDocs:
    def test_concatenates_readme_instructions_and_docs(self, make_project):
        root = make_project(
            {
                "readme.md": "readme text",
                "CLAUDE.md": "instructions text",
                "docs/guide.md": "guide text",
                "docs/nested/more.md": "nested text",
                "docs/notes.txt": "ignored text",
            }
        )
        docs = read_docs(root)
        assert docs.index("readme text") < docs.index("instructions text") < docs.index("guide text")
        assert "nested text" in docs
        assert "ignored text" not in docs

    def test_no_docs(self, tmp_path: Path):
        assert read_docs(tmp_path) == ""


class TestExtractFeatures:
    def test_stops_at_next_heading(self):
        docs = "## Features\n- Offline journal entries\n## Setup\n- Install everything first\n"
        assert extract_features(docs) == ["Offline journal entries"]

    def test_localized_heading(self):
        docs = "## 주요 기능\n- 매일 습관을 기록하세요\n"
        assert extract_features(docs) == ["매일 습관을 기록하세요"]

    def test_top_level_bullets_without_heading(self):
        docs = "# App\n- Offline journal entries\n  - nested detail line\n* Share entries with friends\n"
        assert extract_features(docs) == ["Offline journal entries", "Share entries with friends"]

    def test_bold_markers_removed(self):
        assert extract_features("## Features\n- **Dark mode** everywhere\n") == ["Dark mode everywhere"]

    def test_capped(self):
        docs = "## Features\n" + "".join(f"- Useful feature number {i}\n" for i in range(40))
        features = extract_features(docs)
        assert len(features) == MAX_FEATURES
        assert features[0] == "Useful feature number 0"

    def test_prose_under_heading_ignored(self):
        docs = "## Features\nJust prose here.\n\n- Not under the heading? It is.\n## Other\n"
        assert extract_features(docs) == ["Not under the heading? It is."]

    def test_comment_in_fenced_block_does_not_end_section(self):
        docs = (
            "## Features\n- Track daily habits easily\n"
            "```bash\n# install the app locally\nmake run\n```\n"
            "- Share progress with friends\n## Setup\n- Install everything first\n"
        )
        assert extract_features(docs) == ["Track daily habits easily", "Share progress with friends"]

    def test_fenced_bullets_ignored_without_heading(self):
        docs = "# App\n- Offline journal entries\n~~~yaml\n- launchApp everything now\n~~~\n"
        assert extract_features(docs) == ["Offline journal entries"]


class TestFeatureCandidate:
    @pytest.mark.parametrize(
        "text",
        [
            "short",
            "x" * 200,
            "Written in TypeScript",
            "Uses Redux for everything",
            "`npm start` runs it",
            "\"quoted\" configuration",
            "Entry point is App.tsx",
            "Framework: Expo",
            "State management: zustand",
        ],
    )
    def test_rejected(self, text: str):
        assert not is_feature_candidate(text)

    @pytest.mark.parametrize(
        "text",
        ["Track daily habits", "Sync across devices", "Export your data to CSV"],
    )
    def test_accepted(self, text: str):
        assert is_feature_candidate(text)


class TestDetectFramework:
    def test_expo_router_counts_as_expo(self, tmp_path: Path):
        assert detect_framework(tmp_path, frozenset({"expo-router"})) is Framework.EXPO

    def test_flutter_from_pubspec(self, tmp_path: Path):
        (tmp_path / "pubspec.yaml").write_text("name: app\n")
        assert detect_framework(tmp_path, frozenset()) is Framework.FLUTTER

    def test_native_default(self, tmp_path: Path):
        assert detect_framework(tmp_path, frozenset()) is Framework.NATIVE

    def test_expo_beats_react_native(self, tmp_path: Path):
        deps = frozenset({"expo", "react-native"})
        assert detect_framework(tmp_path, deps) is Framework.EXPO
