"""Check that the installed runtime matches the repository's pinned version.

Exit codes are consumed by hook runners:

- 0: major versions match, or no pin file is configured
- 1: pin file is empty or malformed
- 2: installed major version differs from the pinned one
"""

import platform
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .executor import CommandExecutor
from .logging_config import get_logger

logger = get_logger("release_tools.version_guard")

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_MISMATCH = 2


class Runtime(str, Enum):
    """Runtimes whose version can be checked."""

    NODE = "node"
    PYTHON = "python"

    def install_hint(self, version: str) -> str:
        if self == Runtime.PYTHON:
            return f"pyenv install {version} && pyenv local {version}"
        return f"nvm install {version} && nvm use {version}"


class GuardMessage(BaseModel):
    """One line of version check output."""

    level: Literal["info", "error"]
    text: str


class GuardResult(BaseModel):
    """Outcome of a version check."""

    exit_code: int = Field(description="Process exit status: 0, 1 or 2")
    expected: str | None = Field(default=None, description="Pinned version as written")
    installed: str | None = Field(default=None, description="Normalized installed version")
    messages: list[GuardMessage] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.exit_code == EXIT_OK

    def _add(self, level: Literal["info", "error"], text: str) -> "GuardResult":
        self.messages.append(GuardMessage(level=level, text=text))
        return self


def normalize(version: str | None) -> str:
    """Strip whitespace and one leading non-numeric marker such as ``v``."""
    if not version:
        return ""
    version = version.strip()
    if version and not version[0].isdigit():
        version = version[1:]
    return version


def get_major(version: str | None) -> str:
    """Return the component before the first dot."""
    if not version:
        return ""
    return version.split(".", 1)[0]


def read_pin(pin_file: Path) -> str | None:
    """Read the pin file, or None when it does not exist."""
    try:
        return pin_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def installed_version(runtime: Runtime, executor: CommandExecutor, node_bin: str = "node") -> str:
    """Ask the runtime for its version. Empty string when it can't be run."""
    if runtime == Runtime.PYTHON:
        return platform.python_version()

    result = executor.run([node_bin, "--version"])
    if not result.success:
        logger.warning(f"Could not get {node_bin} version: {result.output.strip()}")
        return ""
    return result.stdout.strip()


def compare_versions(
    expected_raw: str | None,
    installed_raw: str,
    pin_name: str = ".node-version",
    runtime: Runtime = Runtime.NODE,
) -> GuardResult:
    """
    Compare the pinned and installed major versions.

    Majors are compared as strings after normalization, so ``9`` and
    ``09`` differ.

    Args:
        expected_raw: Pin file content, None when the file is absent
        installed_raw: Version reported by the runtime (e.g. ``v18.12.1``)
        pin_name: Pin file name used in messages
        runtime: Runtime being checked

    Returns:
        GuardResult with exit code and messages
    """
    name = runtime.value

    if expected_raw is None:
        return GuardResult(exit_code=EXIT_OK)._add(
            "info",
            f"{pin_name} file not found in repo root; skipping {name}-version check.",
        )

    expected = expected_raw.strip()
    expected_major = get_major(normalize(expected_raw))
    if not expected_major:
        return GuardResult(exit_code=EXIT_MALFORMED, expected=expected)._add(
            "error",
            f"Could not parse {pin_name}; file is empty or malformed.",
        )

    installed = normalize(installed_raw)
    installed_major = get_major(installed)

    if installed_major == expected_major:
        return GuardResult(exit_code=EXIT_OK, expected=expected, installed=installed)._add(
            "info",
            f"OK: installed {name} {installed} matches {pin_name} {expected} (major {expected_major})",
        )

    result = GuardResult(exit_code=EXIT_MISMATCH, expected=expected, installed=installed)
    result._add("error", f"Mismatch: installed {name} {installed or 'unknown'} != {pin_name} {expected}")
    result._add("error", f"Please install/use {name} {expected} (e.g. {runtime.install_hint(expected)})")
    return result


def check_version(
    pin_file: Path,
    runtime: Runtime,
    executor: CommandExecutor,
    node_bin: str = "node",
) -> GuardResult:
    """Run the full version check against ``pin_file``."""
    expected_raw = read_pin(pin_file)
    if expected_raw is None or not get_major(normalize(expected_raw)):
        # No need to query the runtime
        return compare_versions(expected_raw, "", pin_file.name, runtime)

    installed_raw = installed_version(runtime, executor, node_bin)
    result = compare_versions(expected_raw, installed_raw, pin_file.name, runtime)
    logger.debug(f"Version check exit code {result.exit_code}")
    return result
