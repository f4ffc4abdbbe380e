"""Fastlane scaffolding and release commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from app_publisher.models import FastlaneConfig

log = logging.getLogger("app_publisher.fastlane")

NOT_INSTALLED = "fastlane is not installed. Install with: brew install fastlane"
NO_FASTLANE_DIR = "fastlane directory not found. Run setup_fastlane first."

METADATA_LOCALES = ("en-US", "ko")
METADATA_FILES = (
    "name.txt",
    "subtitle.txt",
    "description.txt",
    "keywords.txt",
    "promotional_text.txt",
    "release_notes.txt",
    "privacy_url.txt",
    "support_url.txt",
    "marketing_url.txt",
)

FASTFILE = """\
default_platform(:ios)

platform :ios do
  desc "Upload to App Store"
  lane :release do
    deliver(
      submit_for_review: false,
      automatic_release: false,
      force: true,
      skip_metadata: false,
      skip_screenshots: true
    )
  end

  desc "Upload metadata only"
  lane :metadata do
    deliver(
      skip_binary_upload: true,
      skip_screenshots: true,
      force: true
    )
  end

  desc "Upload screenshots only"
  lane :screenshots do
    deliver(
      skip_binary_upload: true,
      skip_metadata: true,
      force: true
    )
  end
end

platform :android do
  desc "Upload to Google Play"
  lane :release do
    supply(
      track: "production",
      skip_upload_metadata: false,
      skip_upload_images: true,
      skip_upload_screenshots: true
    )
  end

  desc "Upload to internal testing track"
  lane :internal do
    supply(
      track: "internal",
      skip_upload_metadata: true,
      skip_upload_images: true,
      skip_upload_screenshots: true
    )
  end

  desc "Upload metadata only"
  lane :metadata do
    supply(
      skip_upload_apk: true,
      skip_upload_aab: true,
      skip_upload_images: true,
      skip_upload_screenshots: true
    )
  end
end
"""


def is_installed() -> bool:
    return shutil.which("fastlane") is not None


def appfile(config: FastlaneConfig) -> str:
    lines = [f'app_identifier("{config.app_identifier}")']
    if config.team_id:
        lines.append(f'team_id("{config.team_id}")')
    if config.itunes_connect_team_id:
        lines.append(f'itunes_connect_team_id("{config.itunes_connect_team_id}")')
    if config.json_key_file:
        lines.append(f'json_key_file("{config.json_key_file}")')
    if config.package_name:
        lines.append(f'package_name("{config.package_name}")')
    return "\n".join(lines) + "\n"


def setup_fastlane(config: FastlaneConfig) -> list[str]:
    """Write Appfile, Fastfile and an empty metadata skeleton.

    Existing metadata files are left alone. Returns project-relative paths.
    """
    fastlane_dir = Path(config.project_dir).expanduser() / "fastlane"
    fastlane_dir.mkdir(parents=True, exist_ok=True)

    (fastlane_dir / "Appfile").write_text(appfile(config), encoding="utf-8")
    (fastlane_dir / "Fastfile").write_text(FASTFILE, encoding="utf-8")

    for locale in METADATA_LOCALES:
        locale_dir = fastlane_dir / "metadata" / locale
        locale_dir.mkdir(parents=True, exist_ok=True)
        for name in METADATA_FILES:
            path = locale_dir / name
            if not path.exists():
                path.write_text("", encoding="utf-8")

    log.info("Fastlane scaffold written to %s", fastlane_dir)
    return ["fastlane/Appfile", "fastlane/Fastfile", "fastlane/metadata/"]


def ios_release_command(ipa_path: str | None = None, submit_for_review: bool = False) -> list[str]:
    cmd = ["fastlane", "ios", "release"]
    if ipa_path:
        cmd.append(f"ipa:{ipa_path}")
    if submit_for_review:
        cmd.append("submit_for_review:true")
    return cmd


def android_release_command(aab_path: str | None = None, track: str | None = None) -> list[str]:
    lane = "internal" if track == "internal" else "release"
    cmd = ["fastlane", "android", lane]
    if aab_path:
        cmd.append(f"aab:{aab_path}")
    return cmd


def run_fastlane(project_dir: str | Path, cmd: list[str], timeout: int = 300) -> str:
    """Run a fastlane lane inside ``project_dir`` and return its output.

    Raises RuntimeError when fastlane is missing, the project has no
    ``fastlane/`` directory, the lane fails, or the timeout is hit.
    """
    if not is_installed():
        raise RuntimeError(NOT_INSTALLED)
    project = Path(project_dir).expanduser()
    if not (project / "fastlane").is_dir():
        raise RuntimeError(NO_FASTLANE_DIR)

    log.info("Running %s in %s", " ".join(cmd), project)
    try:
        result = subprocess.run(
            cmd,
            cwd=project,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise RuntimeError(f"fastlane timed out after {timeout}s") from None

    if result.returncode != 0:
        raise RuntimeError(result.stderr.strip() or result.stdout.strip() or "fastlane failed")
    return result.stdout
