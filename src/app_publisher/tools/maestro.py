"""Maestro UI-test and store screenshot tools."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from claude_agent_sdk import tool

from app_publisher.config import Settings, default_output_dir
from app_publisher.models import BootedDevices, FlowRunResult, FlowStep
from app_publisher.pipeline import parse_platform
from app_publisher.services.imagegen import ImageGenerator
from app_publisher.services.maestro import (
    FLOW_ACTIONS,
    INSTALLER_URL,
    MaestroService,
    flow_yaml,
    timestamp_ms,
)
from app_publisher.services.store_screenshot import create_store_screenshots, screenshot_sizes
from app_publisher.tools.common import _err, _image_file, _ok, object_schema, string, string_list

log = logging.getLogger("app_publisher.tools")

NO_DEVICE = (
    "No running simulator or emulator found.\n"
    "Start an iOS Simulator or Android Emulator first."
)

_STEP_SCHEMA = {
    "type": "array",
    "description": "Flow steps in order",
    "items": {
        "type": "object",
        "properties": {
            "action": {"type": "string", "enum": list(FLOW_ACTIONS)},
            "value": {"type": "string"},
            "direction": {"type": "string", "enum": ["UP", "DOWN", "LEFT", "RIGHT"]},
            "timeout": {"type": "integer"},
        },
        "required": ["action"],
    },
}


def maestro_dir() -> Path:
    return default_output_dir() / "maestro"


def format_devices(devices: BootedDevices) -> list[str]:
    lines = [f"Running iOS Simulators: {len(devices.ios)}"]
    lines += [f"  - {d}" for d in devices.ios]
    lines.append(f"Running Android Emulators: {len(devices.android)}")
    lines += [f"  - {d}" for d in devices.android]
    if not devices.any:
        lines += [
            "",
            "No running devices. Start one:",
            "  iOS: open -a Simulator",
            "  Android: emulator -avd <name>",
        ]
    return lines


def format_flow_result(result: FlowRunResult, output_dir: Path, header: list[str], flow: str | None) -> str:
    lines = ["=== Maestro Flow Result ===", "", f"Status: {'PASSED' if result.success else 'FAILED'}"]
    lines += header
    lines += [f"Screenshots: {len(result.screenshots)}", f"Output Directory: {output_dir}", ""]
    if flow is not None:
        lines += ["--- Generated Flow YAML ---", flow]
    if not result.success:
        lines += ["--- Error Output ---", result.output]
    if result.screenshots:
        lines += ["--- Screenshots ---"] + [f"  - {s}" for s in result.screenshots]
    return "\n".join(lines)


def _screenshot_images(paths: list[str]) -> list[dict[str, Any]]:
    return [img for img in (_image_file(p) for p in paths) if img is not None]


def create_maestro_tools(settings: Settings, service: MaestroService | None = None) -> list:
    """Create Maestro tools. ``service`` can be injected for tests."""
    maestro = service or MaestroService(settings.timeouts)
    generator = ImageGenerator(settings)

    def _ready() -> str | None:
        """Error message when maestro or a device is unavailable."""
        install_error = maestro.ensure_installed()
        if install_error:
            return f"Maestro not available.\n{install_error}\n\nRun 'setup_maestro' tool to install."
        if not maestro.booted_devices().any:
            return NO_DEVICE
        return None

    @tool(
        "setup_maestro",
        "Install the Maestro UI-testing CLI (requires Java 17+) and list running "
        "simulators and emulators.",
        object_schema(),
    )
    async def setup_maestro(args: dict[str, Any]) -> dict[str, Any]:
        result = await asyncio.to_thread(maestro.install)
        lines = [
            "=== Maestro Setup ===",
            "",
            f"Status: {'Success' if result.success else 'Failed'}",
            f"Message: {result.message}",
        ]
        if result.version:
            lines.append(f"Version: {result.version}")
        if result.java_version:
            lines.append(f"Java: {result.java_version}")
        if not result.success:
            return {**_ok("\n".join(lines)), "is_error": True}
        lines.append("")
        lines += format_devices(maestro.booted_devices())
        return _ok("\n".join(lines))

    @tool(
        "maestro_status",
        "Show whether Maestro and Java 17+ are installed and which devices are running.",
        object_schema(),
    )
    async def maestro_status(args: dict[str, Any]) -> dict[str, Any]:
        version = maestro.get_version()
        java_ok, java_version = maestro.check_java()
        lines = [
            "=== Maestro Status ===",
            "",
            f"Installed: {'Yes' if version else 'No'}",
            f"Version: {version or 'Not installed'}",
            f"Java: {java_version} ({'OK (17+)' if java_ok else 'NEEDS UPGRADE to 17+'})",
            "",
        ]
        lines += format_devices(maestro.booted_devices())
        if not version:
            lines += [
                "",
                "Maestro not installed. Use 'setup_maestro' tool to install automatically.",
                f'Or manually: curl -Ls "{INSTALLER_URL}" | bash',
            ]
        if not java_ok:
            lines += ["", "Java 17+ required. Install: brew install openjdk@17"]
        lines += ["", f"Output Directory: {maestro_dir()}"]
        return _ok("\n".join(lines))

    @tool(
        "maestro_screenshot",
        "Take a screenshot of the running simulator or emulator.",
        object_schema(
            optional={
                "outputDir": string("Directory to save into"),
                "filename": string("File name without extension"),
            }
        ),
    )
    async def maestro_screenshot(args: dict[str, Any]) -> dict[str, Any]:
        error = _ready()
        if error:
            return _err(error)
        output_dir = Path(args.get("outputDir") or maestro_dir()).expanduser()
        try:
            path = maestro.take_screenshot(output_dir, args.get("filename"))
        except RuntimeError as e:
            return _err(str(e))
        return _ok(f"Screenshot saved: {path}", _screenshot_images([str(path)]))

    @tool(
        "maestro_run_flow",
        "Build a Maestro flow from structured steps, run it on the running device, "
        "and return pass/fail plus any screenshots taken.",
        object_schema(
            {"appId": string("Bundle id / package name of the app under test"), "steps": _STEP_SCHEMA},
            {"outputDir": string("Directory for test output and screenshots")},
        ),
    )
    async def maestro_run_flow(args: dict[str, Any]) -> dict[str, Any]:
        try:
            steps = [
                FlowStep(
                    action=s["action"],
                    value=s.get("value"),
                    direction=s.get("direction"),
                    timeout=s.get("timeout"),
                )
                for s in args["steps"]
            ]
            flow = flow_yaml(args["appId"], steps)
        except (KeyError, TypeError, ValueError) as e:
            return _err(f"Invalid flow steps: {e}")

        error = _ready()
        if error:
            return _err(error)

        output_dir = Path(args.get("outputDir") or maestro_dir() / f"flow_{timestamp_ms()}").expanduser()
        result = await asyncio.to_thread(maestro.run_flow, flow, output_dir)
        header = [f"App ID: {args['appId']}", f"Steps: {len(steps)}"]
        text = format_flow_result(result, output_dir, header, flow)
        return _ok(text, _screenshot_images(result.screenshots))

    @tool(
        "maestro_run_yaml",
        "Run a raw Maestro flow YAML on the running device.",
        object_schema(
            {"yaml": string("Complete Maestro flow definition")},
            {"outputDir": string("Directory for test output and screenshots")},
        ),
    )
    async def maestro_run_yaml(args: dict[str, Any]) -> dict[str, Any]:
        error = _ready()
        if error:
            return _err(error)
        output_dir = Path(args.get("outputDir") or maestro_dir() / f"flow_{timestamp_ms()}").expanduser()
        result = await asyncio.to_thread(maestro.run_flow, args["yaml"], output_dir)
        text = format_flow_result(result, output_dir, [], None)
        return _ok(text, _screenshot_images(result.screenshots))

    @tool(
        "maestro_store_screenshot",
        "Turn an app screenshot into store marketing screenshots: AI adds the "
        "headline and a phone frame, then the image is resized to each store size. "
        "Without screenshotPath a fresh screenshot is taken from the running device.",
        object_schema(
            {"headline": string("Marketing headline shown above the screenshot")},
            {
                "screenshotPath": string("Existing screenshot to use"),
                "platform": string("Store sizes to export (default: both)", enum=["ios", "android", "both"]),
                "backgroundColor": string("Background color, e.g. #FFFFFF"),
                "textColor": string("Headline color, e.g. #000000"),
                "devices": string_list("Only these sizes, by name (iPhone_6.7) or label"),
                "model": string("Image model id"),
                "outputDir": string("Directory to save into"),
            },
        ),
    )
    async def maestro_store_screenshot(args: dict[str, Any]) -> dict[str, Any]:
        try:
            platform = parse_platform(args.get("platform"))
        except ValueError as e:
            return _err(str(e))

        screenshot = args.get("screenshotPath")
        if not screenshot:
            error = _ready()
            if error:
                return _err(f"No screenshotPath provided. {error}")
            try:
                screenshot = str(maestro.take_screenshot(maestro_dir()))
            except RuntimeError as e:
                return _err(f"{e}.\nProvide screenshotPath manually instead.")

        source = Path(screenshot).expanduser()
        if not source.is_file():
            return _err(f"Screenshot file not found: {source}")

        output_dir = Path(args.get("outputDir") or maestro_dir() / f"store_{timestamp_ms()}").expanduser()
        try:
            results, base_image = await create_store_screenshots(
                generator,
                source,
                args["headline"],
                output_dir,
                platform=platform,
                background_color=args.get("backgroundColor"),
                text_color=args.get("textColor"),
                devices=args.get("devices"),
                model=args.get("model"),
            )
        except (RuntimeError, FileNotFoundError) as e:
            return _err(str(e))
        except Exception as e:
            log.exception("Store screenshot generation failed")
            return _err(f"Store screenshot generation failed: {e}")

        lines = [
            "=== Store Screenshot Generation ===",
            "",
            f'Headline: "{args["headline"]}"',
            f"Platform: {platform.value}",
            f"Source: {source}",
            f"Generated: {len(results)} store screenshots",
            f"Output: {output_dir}",
            "",
            "--- Generated Files ---",
        ]
        lines += [f"  [{r.platform}] {r.device}: {r.width}x{r.height} -> {r.path}" for r in results]
        lines += ["", f"--- Available Sizes ({platform.value}) ---"]
        lines += [
            f"  {s.device} ({s.name}): {s.width}x{s.height} {'[required]' if s.required else '[optional]'}"
            for s in screenshot_sizes(platform)
        ]
        return _ok("\n".join(lines), _screenshot_images([base_image]))

    return [
        setup_maestro,
        maestro_status,
        maestro_screenshot,
        maestro_run_flow,
        maestro_run_yaml,
        maestro_store_screenshot,
    ]
