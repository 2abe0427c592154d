"""Run identifiers and environment probes for the audit trail."""

import importlib.metadata
import platform
import secrets
import sys
from datetime import UTC, datetime

__all__ = [
    "generate_run_id",
    "get_package_version",
    "get_python_version",
    "get_platform_info",
    "get_dependency_versions",
]


def generate_run_id() -> str:
    """Generate a unique run identifier: ``<ISO8601 timestamp>__<8 hex chars>``."""
    timestamp = datetime.now(UTC).isoformat().replace("+00:00", "Z")
    return f"{timestamp}__{secrets.token_hex(4)}"


def get_package_version() -> str:
    """Installed provdedupe version, or "unknown" when running from source."""
    try:
        return importlib.metadata.version("provdedupe")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_python_version() -> str:
    return sys.version.split()[0]


def get_platform_info() -> str:
    """Platform string such as "Linux-6.8.0-x86_64"."""
    return f"{platform.system()}-{platform.release()}-{platform.machine()}"


def get_dependency_versions(packages: list[str]) -> dict[str, str]:
    """Map each package name to its installed version ("unknown" if absent)."""
    versions: dict[str, str] = {}
    for package in packages:
        try:
            versions[package] = importlib.metadata.version(package)
        except importlib.metadata.PackageNotFoundError:
            versions[package] = "unknown"
    return versions
