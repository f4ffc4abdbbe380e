"""Scan an app project directory into a ProjectInfo snapshot."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from app_publisher.analyzers.capabilities import classify_capabilities
from app_publisher.extractors.manifest import AppConfig, PackageManifest
from app_publisher.models import Framework, ProjectInfo
from app_publisher.utils.text import slugify

log = logging.getLogger("app_publisher.extractors")

MAX_FEATURES = 30

# ── Documentation ────────────────────────────────────────────────────────────

INSTRUCTIONS_FILE = "CLAUDE.md"
DOCS_DIR = "docs"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Ignoring unreadable %s: %s", path, e)
        return ""


def _find_readme(project_dir: Path) -> Path | None:
    candidates = sorted(p for p in project_dir.iterdir() if p.is_file())
    for path in candidates:
        if path.name.lower() == "readme.md":
            return path
    return None


def read_docs(project_dir: Path) -> str:
    """Concatenate README, the instructions file and docs/**/*.md."""
    paths: list[Path] = []
    readme = _find_readme(project_dir)
    if readme is not None:
        paths.append(readme)
    instructions = project_dir / INSTRUCTIONS_FILE
    if instructions.is_file():
        paths.append(instructions)
    docs_dir = project_dir / DOCS_DIR
    if docs_dir.is_dir():
        paths.extend(sorted(p for p in docs_dir.rglob("*.md") if p.is_file()))

    chunks = [_read_text(p) for p in paths]
    return "\n\n".join(c for c in chunks if c)


# ── Feature bullets ──────────────────────────────────────────────────────────

_HEADING_RE = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*#*\s*$")
_FEATURE_TITLE_RE = re.compile(
    r"(?:(?:key|main|core)\s+)?features?"
    r"|주요\s*기능|기능|주요\s*특징"
    r"|主な機能|機能|特徴"
    r"|主要功能|功能|特性",
    re.IGNORECASE,
)
_TITLE_DECORATION_RE = re.compile(r"^[^\w]+|[^\w]+$")

_BULLET_RE = re.compile(r"^\s*[-*+]\s+(?P<text>.+)$")
_TOP_LEVEL_BULLET_RE = re.compile(r"^[-*+]\s+(?P<text>.+)$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")

_BOLD_RE = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")

_CODE_PREFIXES = ('"', "'", "`")
_FILE_EXTENSION_RE = re.compile(
    r"\.(?:tsx?|jsx?|mjs|json|md|ya?ml|swift|kt|java|dart|py|gradle|plist|xml|sh|lock|env)\b",
    re.IGNORECASE,
)
_LABELED_LINE_RE = re.compile(
    r"^(?:framework|routing|router|navigation|state(?:\s+management)?|styling|styles?"
    r"|language|database|db|backend|testing|tests?|build|bundler|platform|stack|tooling)\s*:",
    re.IGNORECASE,
)

_TOOLING_TERMS = (
    "typescript",
    "javascript",
    "eslint",
    "prettier",
    "webpack",
    "babel",
    "metro bundler",
    "jest",
    "vitest",
    "storybook",
    "npm ",
    "npx ",
    "yarn",
    "pnpm",
    "node_modules",
    "redux",
    "zustand",
    "mobx",
    "recoil",
    "tanstack",
    "react query",
    "expo router",
    "expo-router",
    "react navigation",
    "monorepo",
    "ci/cd",
    "github actions",
    "docker",
    "dependency",
    "dependencies",
    "architecture",
    "component",
    "hook",
    "middleware",
    "refactor",
    "lint",
    "unit test",
    "e2e",
    "state management",
    "boilerplate",
    "folder structure",
)


def _is_features_heading(line: str) -> bool:
    m = _HEADING_RE.match(line)
    if not m:
        return False
    title = _TITLE_DECORATION_RE.sub("", m.group("title").strip())
    return bool(_FEATURE_TITLE_RE.fullmatch(title))


def _outside_fences(lines: list[str]) -> list[str]:
    """Drop fenced code blocks, fence markers included."""
    kept = []
    fenced = False
    for line in lines:
        if _FENCE_RE.match(line):
            fenced = not fenced
            continue
        if not fenced:
            kept.append(line)
    return kept


def _features_section_bullets(lines: list[str]) -> list[str] | None:
    """Bullets under the first Features heading, or None when there is no such heading."""
    for i, line in enumerate(lines):
        if not _is_features_heading(line):
            continue
        bullets = []
        for inner in lines[i + 1 :]:
            if _HEADING_RE.match(inner):
                break
            m = _BULLET_RE.match(inner)
            if m:
                bullets.append(m.group("text"))
        return bullets
    return None


def _clean_bullet(raw: str) -> str:
    return _BOLD_RE.sub(lambda m: m.group(1) or m.group(2), raw).strip()


def is_feature_candidate(text: str) -> bool:
    """Reject short/long lines, tooling jargon, code references and labeled lines."""
    if len(text) <= 5 or len(text) >= 200:
        return False
    lower = text.lower()
    if any(term in lower for term in _TOOLING_TERMS):
        return False
    if text.startswith(_CODE_PREFIXES) or _FILE_EXTENSION_RE.search(text):
        return False
    if _LABELED_LINE_RE.match(text):
        return False
    return True


def extract_features(docs: str, limit: int = MAX_FEATURES) -> list[str]:
    """Pull user-facing feature bullets out of markdown docs.

    Bullets under a "Features" heading are preferred; without one, every
    top-level bullet in the docs is considered.
    """
    lines = _outside_fences(docs.splitlines())
    raw = _features_section_bullets(lines)
    if raw is None:
        raw = [m.group("text") for line in lines if (m := _TOP_LEVEL_BULLET_RE.match(line))]

    features: list[str] = []
    for item in raw:
        text = _clean_bullet(item)
        if not is_feature_candidate(text):
            continue
        features.append(text)
        if len(features) >= limit:
            break
    return features


# ── Framework ────────────────────────────────────────────────────────────────


def detect_framework(project_dir: Path, dependencies: frozenset[str]) -> Framework:
    if "expo" in dependencies or "expo-router" in dependencies:
        return Framework.EXPO
    if "react-native" in dependencies:
        return Framework.REACT_NATIVE
    if (project_dir / "pubspec.yaml").is_file():
        return Framework.FLUTTER
    return Framework.NATIVE


# ── Entry point ──────────────────────────────────────────────────────────────


def scan_project(project_dir: str | Path) -> ProjectInfo:
    """Build a ProjectInfo from the static files in ``project_dir``.

    Raises FileNotFoundError if the directory does not exist. Missing or
    malformed project files are treated as absent.
    """
    root = Path(project_dir).expanduser()
    if not root.is_dir():
        raise FileNotFoundError(f"Project directory not found: {project_dir}")
    root = root.resolve()

    manifest = PackageManifest.load(root)
    config = AppConfig.load(root)
    docs = read_docs(root)

    app_name = config.platform_name or config.generic_name or manifest.name or root.name
    bundle_id = (
        config.ios_bundle_id
        or config.android_package
        or f"com.example.{slugify(app_name) or 'app'}"
    )
    capabilities = classify_capabilities(manifest.dependencies, docs)
    features = extract_features(docs)
    framework = detect_framework(root, manifest.dependencies)

    log.debug(
        "Scanned %s: name=%r framework=%s features=%d deps=%d",
        root, app_name, framework.value, len(features), len(manifest.dependencies),
    )

    return ProjectInfo(
        app_name=app_name,
        bundle_id=bundle_id,
        version=config.version or manifest.version or "1.0.0",
        description=config.description or manifest.description,
        features=tuple(features),
        framework=framework,
        permissions=config.permissions,
        capabilities=capabilities,
        team_id=config.team_id or None,
        dependencies=manifest.dependencies,
    )
