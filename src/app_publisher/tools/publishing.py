"""Fastlane, store listing and metadata tools."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from claude_agent_sdk import tool

from app_publisher.config import Settings
from app_publisher.models import FastlaneConfig
from app_publisher.pipeline import (
    generate_publishing_guide,
    generate_store_listing,
    parse_languages,
    parse_platform,
    write_store_metadata,
)
from app_publisher.services import fastlane
from app_publisher.tools.common import _err, _ok, boolean, object_schema, string

log = logging.getLogger("app_publisher.tools")

_LANGUAGE = string(
    "Output language (default: all four)", enum=["en", "ko", "ja", "zh", "all"]
)


def format_setup_summary(config: FastlaneConfig, created: list[str]) -> str:
    lines = [
        "=== Fastlane Setup Complete ===",
        "",
        f"Project: {config.project_dir}",
        f"App: {config.app_name} ({config.app_identifier})",
        "",
        "Created files:",
    ]
    lines += [f"  - {path}" for path in created]
    lines += [
        "",
        "Next steps:",
        "  1. Fill in metadata files in fastlane/metadata/ (or run populate_store_metadata)",
        "  2. Run 'fastlane ios release' to publish to App Store",
        "  3. Run 'fastlane android release' to publish to Google Play",
    ]
    if not fastlane.is_installed():
        lines += ["", f"Warning: {fastlane.NOT_INSTALLED}"]
    return "\n".join(lines)


def create_publishing_tools(settings: Settings) -> list:
    """Create fastlane and listing tools."""
    timeout = settings.timeouts.publish

    @tool(
        "setup_fastlane",
        "Generate fastlane configuration files (Fastfile, Appfile, metadata "
        "structure) for automated iOS/Android app publishing.",
        object_schema(
            {
                "projectDir": string("App project root"),
                "appIdentifier": string("iOS bundle identifier"),
                "appName": string("App display name"),
            },
            {
                "teamId": string("Apple Developer team id"),
                "itunesConnectTeamId": string("App Store Connect team id"),
                "jsonKeyFile": string("Google Play service account JSON key path"),
                "packageName": string("Android package name"),
            },
        ),
    )
    async def setup_fastlane(args: dict[str, Any]) -> dict[str, Any]:
        config = FastlaneConfig(
            project_dir=args["projectDir"],
            app_identifier=args["appIdentifier"],
            app_name=args["appName"],
            team_id=args.get("teamId"),
            itunes_connect_team_id=args.get("itunesConnectTeamId"),
            json_key_file=args.get("jsonKeyFile"),
            package_name=args.get("packageName"),
        )
        try:
            created = fastlane.setup_fastlane(config)
        except OSError as e:
            return _err(f"Could not write fastlane files: {e}")
        return _ok(format_setup_summary(config, created))

    @tool(
        "publish_ios",
        "Upload the iOS build and metadata to App Store Connect with 'fastlane ios "
        "release'. Requires setup_fastlane first.",
        object_schema(
            {"projectDir": string("App project root containing fastlane/")},
            {
                "ipaPath": string("Path to the .ipa to upload"),
                "submitForReview": boolean("Submit for App Review after upload"),
            },
        ),
    )
    async def publish_ios(args: dict[str, Any]) -> dict[str, Any]:
        cmd = fastlane.ios_release_command(args.get("ipaPath"), bool(args.get("submitForReview")))
        try:
            output = await asyncio.to_thread(fastlane.run_fastlane, args["projectDir"], cmd, timeout)
        except RuntimeError as e:
            return _err(str(e))
        return _ok(output)

    @tool(
        "publish_android",
        "Upload the Android bundle to Google Play with fastlane. Track 'internal' "
        "uses the internal testing lane; anything else releases to production.",
        object_schema(
            {"projectDir": string("App project root containing fastlane/")},
            {
                "aabPath": string("Path to the .aab to upload"),
                "track": string("Release track", enum=["internal", "production"]),
            },
        ),
    )
    async def publish_android(args: dict[str, Any]) -> dict[str, Any]:
        cmd = fastlane.android_release_command(args.get("aabPath"), args.get("track"))
        try:
            output = await asyncio.to_thread(fastlane.run_fastlane, args["projectDir"], cmd, timeout)
        except RuntimeError as e:
            return _err(str(e))
        return _ok(output)

    @tool(
        "generate_store_listing",
        "Draft App Store / Google Play listing text (name, subtitle, descriptions, "
        "keywords, category, age rating) from the project's package.json, app.json "
        "and docs. Every field shows its length against the store limit.",
        object_schema(
            {"projectDir": string("App project root")},
            {
                "platform": string("Target store (default: both)", enum=["ios", "android", "both"]),
                "language": _LANGUAGE,
            },
        ),
    )
    async def store_listing(args: dict[str, Any]) -> dict[str, Any]:
        try:
            platform = parse_platform(args.get("platform"))
            languages = parse_languages(args.get("language"))
        except ValueError as e:
            return _err(str(e))
        report = generate_store_listing(args["projectDir"], platform, languages)
        if not Path(args["projectDir"]).expanduser().is_dir():
            return {**_ok(report, truncate=False), "is_error": True}
        return _ok(report, truncate=False)

    @tool(
        "get_publishing_guide",
        "Draft the support page, privacy policy, App Review notes, Google Play "
        "content rating answers and App Store age rating answers for the project.",
        object_schema({"projectDir": string("App project root")}, {"language": _LANGUAGE}),
    )
    async def publishing_guide(args: dict[str, Any]) -> dict[str, Any]:
        try:
            languages = parse_languages(args.get("language"))
        except ValueError as e:
            return _err(str(e))
        guide = generate_publishing_guide(args["projectDir"], languages)
        if not Path(args["projectDir"]).expanduser().is_dir():
            return {**_ok(guide, truncate=False), "is_error": True}
        return _ok(guide, truncate=False)

    @tool(
        "populate_store_metadata",
        "Write generated listing text into fastlane/metadata for deliver and "
        "supply. Existing non-empty files are kept unless overwrite is true.",
        object_schema(
            {"projectDir": string("App project root")},
            {"language": _LANGUAGE, "overwrite": boolean("Replace files that already have content")},
        ),
    )
    async def populate_store_metadata(args: dict[str, Any]) -> dict[str, Any]:
        try:
            languages = parse_languages(args.get("language"))
            result = write_store_metadata(
                args["projectDir"], languages, overwrite=bool(args.get("overwrite"))
            )
        except (ValueError, FileNotFoundError) as e:
            return _err(str(e))
        except OSError as e:
            return _err(f"Could not write metadata: {e}")

        lines = [
            "=== Store Metadata Populated ===",
            "",
            f"Written: {len(result.written)} files",
            f"Kept (already filled): {len(result.skipped)} files",
        ]
        if result.written:
            lines += ["", "Written:"] + [f"  - {p}" for p in result.written]
        if result.skipped:
            lines += ["", "Kept:"] + [f"  - {p}" for p in result.skipped]
        lines += ["", "Review every file before running 'fastlane ios metadata' or 'fastlane android metadata'."]
        return _ok("\n".join(lines))

    return [
        setup_fastlane,
        publish_ios,
        publish_android,
        store_listing,
        publishing_guide,
        populate_store_metadata,
    ]
