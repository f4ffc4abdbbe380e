"""Maestro UI-test runner: install, device discovery, screenshots, flows."""

from __future__ import annotations

import json
import logging
import os
import re
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any

import httpx
import yaml

from app_publisher.config import Timeouts
from app_publisher.models import BootedDevices, FlowRunResult, FlowStep, InstallResult

log = logging.getLogger("app_publisher.maestro")

INSTALLER_URL = "https://get.maestro.mobile.dev"
MIN_JAVA_MAJOR = 17
BREW_JAVA_HOME = "/usr/local/opt/openjdk@17/libexec/openjdk.jdk/Contents/Home"
BREW_JAVA_BIN = "/usr/local/opt/openjdk@17/bin"

_JAVA_VERSION_RE = re.compile(r'version\s+"?(\d+[\d._]*)"?')

FLOW_ACTIONS = (
    "launchApp",
    "stopApp",
    "clearState",
    "tapOn",
    "tapOnPoint",
    "longPressOn",
    "doubleTapOn",
    "inputText",
    "eraseText",
    "swipe",
    "scroll",
    "scrollUntilVisible",
    "back",
    "home",
    "pressKey",
    "hideKeyboard",
    "takeScreenshot",
    "assertVisible",
    "assertNotVisible",
    "waitForAnimationToEnd",
    "wait",
    "openLink",
    "copyTextFrom",
    "pasteText",
    "runScript",
)


def timestamp_ms() -> int:
    return int(time.time() * 1000)


# ── Flow generation ─────────────────────────────────────────────────────────


def step_to_command(step: FlowStep) -> Any:
    """Translate a FlowStep into one Maestro command (a str or a one-key dict).

    Raises ValueError for an unknown action.
    """
    action, value = step.action, step.value

    if action in ("launchApp", "stopApp", "clearState"):
        return {action: {"appId": value}} if value else action
    if action in ("tapOn", "longPressOn", "doubleTapOn", "inputText", "assertNotVisible",
                  "openLink", "copyTextFrom", "runScript"):
        return {action: value}
    if action == "tapOnPoint":
        return {"tapOn": {"point": value}}
    if action == "eraseText":
        return {"eraseText": int(value) if value else 50}
    if action == "swipe":
        return {"swipe": {"direction": step.direction or "UP"}}
    if action == "scrollUntilVisible":
        return {"scrollUntilVisible": {"element": value}}
    if action in ("back", "home"):
        return {"pressKey": action}
    if action == "pressKey":
        return {"pressKey": value}
    if action in ("scroll", "hideKeyboard", "pasteText"):
        return action
    if action == "takeScreenshot":
        return {"takeScreenshot": value or f"screenshot_{timestamp_ms()}"}
    if action == "assertVisible":
        if step.timeout:
            return {"assertVisible": {"text": value, "timeout": step.timeout}}
        return {"assertVisible": value}
    if action in ("waitForAnimationToEnd", "wait"):
        if step.timeout:
            return {"waitForAnimationToEnd": {"timeout": step.timeout}}
        return "waitForAnimationToEnd"

    raise ValueError(f"Unknown flow action: {action}")


def flow_yaml(app_id: str, steps: list[FlowStep]) -> str:
    """Render a two-document Maestro flow: config header, then commands."""
    commands = [step_to_command(step) for step in steps]
    header = yaml.safe_dump({"appId": app_id}, sort_keys=False, allow_unicode=True)
    body = yaml.safe_dump(commands, sort_keys=False, allow_unicode=True) if commands else ""
    return f"{header}---\n{body}"


def collect_screenshots(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    found = [p for p in directory.rglob("*") if p.is_file() and p.suffix.lower() in (".png", ".jpg")]
    return sorted(str(p) for p in found)


# ── Service ─────────────────────────────────────────────────────────────────


class MaestroService:
    """Thin wrapper around the maestro, java, xcrun and adb command lines."""

    def __init__(self, timeouts: Timeouts | None = None):
        self.timeouts = timeouts or Timeouts()

    @property
    def binary(self) -> str:
        home_bin = Path.home() / ".maestro" / "bin" / "maestro"
        return str(home_bin) if home_bin.exists() else "maestro"

    def _java_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env.setdefault("JAVA_HOME", BREW_JAVA_HOME)
        maestro_bin = Path.home() / ".maestro" / "bin"
        env["PATH"] = os.pathsep.join([str(maestro_bin), BREW_JAVA_BIN, env.get("PATH", "")])
        return env

    def get_version(self) -> str | None:
        """Maestro version string, or None when maestro is not runnable."""
        try:
            result = subprocess.run(
                [self.binary, "--version"],
                capture_output=True,
                text=True,
                timeout=self.timeouts.probe,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or "unknown"

    def is_installed(self) -> bool:
        return self.get_version() is not None

    def check_java(self) -> tuple[bool, str]:
        """(meets minimum version, version string)."""
        try:
            result = subprocess.run(
                ["java", "-version"],
                capture_output=True,
                text=True,
                timeout=self.timeouts.probe,
                env=self._java_env(),
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False, "not found"

        # java prints its version banner on stderr
        m = _JAVA_VERSION_RE.search(result.stderr + result.stdout)
        if not m:
            return False, "unknown"
        version = m.group(1)
        major = int(re.split(r"[._]", version)[0])
        return major >= MIN_JAVA_MAJOR, version

    def install(self) -> InstallResult:
        java_ok, java_version = self.check_java()
        if not java_ok:
            return InstallResult(
                success=False,
                message=(
                    f"Java {MIN_JAVA_MAJOR}+ is required but found: {java_version}.\n"
                    "Install with: brew install openjdk@17\n"
                    f'Then set JAVA_HOME="{BREW_JAVA_HOME}"'
                ),
                java_version=java_version,
            )

        version = self.get_version()
        if version:
            return InstallResult(True, f"Maestro is already installed: {version}", version, java_version)

        try:
            script = self._fetch_installer()
            result = subprocess.run(
                ["bash"],
                input=script,
                capture_output=True,
                text=True,
                timeout=self.timeouts.installer,
                env=self._java_env(),
            )
        except (httpx.HTTPError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            log.warning("Maestro install failed: %s", e)
            return InstallResult(False, f"Installation failed: {e}", java_version=java_version)

        if result.returncode != 0:
            return InstallResult(
                False,
                f"Installation failed: {result.stderr.strip() or 'Unknown error'}",
                java_version=java_version,
            )

        version = self.get_version()
        if version:
            log.info("Installed maestro %s", version)
            return InstallResult(True, f"Maestro installed successfully: {version}", version, java_version)
        return InstallResult(
            False,
            "Maestro installer ran but maestro command is not available. "
            "Check PATH includes ~/.maestro/bin",
            java_version=java_version,
        )

    def _fetch_installer(self) -> str:
        response = httpx.get(INSTALLER_URL, follow_redirects=True, timeout=30)
        response.raise_for_status()
        return response.text

    def ensure_installed(self) -> str | None:
        """None when maestro is ready, otherwise the installer's error message."""
        if self.is_installed():
            return None
        result = self.install()
        return None if result.success else result.message

    def booted_devices(self) -> BootedDevices:
        devices = BootedDevices()

        try:
            result = subprocess.run(
                ["xcrun", "simctl", "list", "devices", "booted", "-j"],
                capture_output=True,
                text=True,
                timeout=self.timeouts.probe,
            )
            if result.returncode == 0:
                data = json.loads(result.stdout)
                for runtime in data.get("devices", {}).values():
                    for device in runtime:
                        if device.get("state") == "Booted":
                            name = device.get("name", "Unknown device")
                            devices.ios.append(f"{name} ({device.get('udid', '?')})")
        except (FileNotFoundError, subprocess.TimeoutExpired, json.JSONDecodeError):
            pass

        try:
            result = subprocess.run(
                ["adb", "devices"],
                capture_output=True,
                text=True,
                timeout=self.timeouts.probe,
            )
            for line in result.stdout.splitlines()[1:]:
                parts = line.strip().split("\t")
                if len(parts) >= 2 and parts[1] == "device":
                    devices.android.append(parts[0])
        except (FileNotFoundError, subprocess.TimeoutExpired):
            pass

        return devices

    def take_screenshot(self, output_dir: Path, filename: str | None = None) -> Path:
        """Capture the booted device's screen. Raises RuntimeError on failure."""
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / f"{filename or f'screenshot_{timestamp_ms()}'}.png"
        try:
            result = subprocess.run(
                [self.binary, "screenshot", str(path)],
                capture_output=True,
                text=True,
                timeout=self.timeouts.screenshot,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise RuntimeError(f"Screenshot failed: {e}") from e
        if result.returncode != 0:
            raise RuntimeError(f"Screenshot failed: {result.stderr.strip() or 'Unknown error'}")
        return path

    def run_flow(self, flow: str, output_dir: Path) -> FlowRunResult:
        """Run a flow definition; screenshots in ``output_dir`` are collected either way."""
        output_dir.mkdir(parents=True, exist_ok=True)
        flow_dir = Path(tempfile.gettempdir()) / "maestro-flows"
        flow_dir.mkdir(parents=True, exist_ok=True)
        flow_file = flow_dir / f"flow_{timestamp_ms()}.yaml"
        flow_file.write_text(flow, encoding="utf-8")

        env = dict(os.environ, MAESTRO_DRIVER_STARTUP_TIMEOUT="60000")
        log.info("Running maestro flow %s", flow_file)
        try:
            result = subprocess.run(
                [self.binary, "test", str(flow_file), "--output", str(output_dir)],
                capture_output=True,
                text=True,
                timeout=self.timeouts.flow,
                env=env,
            )
            success = result.returncode == 0
            output = result.stdout if success else (result.stdout or result.stderr or "Unknown error")
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            success, output = False, str(e)
        finally:
            flow_file.unlink(missing_ok=True)

        return FlowRunResult(success=success, output=output, screenshots=collect_screenshots(output_dir))
