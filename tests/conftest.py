"""
Shared pytest fixtures for the release tools tests.

External commands never run in tests: ``fake_executor`` records every
command and answers with canned results.
"""
import json
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Ensure project root is in path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from release_tools.executor import CommandExecutor, CommandResult


ENV_VARS = [
    "HAS_PUBLISH",
    "HAS_INSTALL_APK",
    "HAS_INSTALL",
    "ALLOWED_DEVICES",
    "APK_PATH",
    "REMOTE_DIR",
    "MANIFEST_PATH",
    "PIN_FILE",
    "ADB_BIN",
    "NPM_BIN",
    "NODE_BIN",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "LOG_DIR",
]

ADB_DEVICES_OUTPUT = """List of devices attached
emulator-5554          device product:sdk_a model:Pixel_6 device:emu64a transport_id:1
R58M123ABC             device product:gts7lwifixx model:SM_T870 device:gts7lwifi transport_id:2
0123456789ABCDEF       unauthorized usb:1-1 transport_id:3

"""


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Remove release tool variables from the environment.

    Also clears the settings cache so each test reads fresh settings.
    """
    from release_tools.config import get_settings

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def manifest_file(temp_dir: Path) -> Path:
    """A package.json with appName and version."""
    path = temp_dir / "package.json"
    path.write_text(
        json.dumps({"name": "my-app", "appName": "MyApp", "version": "1.2.3"}),
        encoding="utf-8",
    )
    return path


# =============================================================================
# Executor Fixtures
# =============================================================================

class FakeExecutor(CommandExecutor):
    """
    Executor that records commands instead of running them.

    ``responses`` maps a command prefix (tuple) to a CommandResult; the
    longest matching prefix wins. Unmatched commands succeed with no output.
    ``on_run`` is called with each command before it is answered.
    """

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None):
        self.responses = responses or {}
        self.commands: list[list[str]] = []
        self.on_run = None

    def run(self, command: list[str], capture: bool = True) -> CommandResult:
        self.commands.append(list(command))
        if self.on_run:
            self.on_run(command)

        matches = [
            prefix for prefix in self.responses
            if tuple(command[: len(prefix)]) == prefix
        ]
        if matches:
            return self.responses[max(matches, key=len)]
        return CommandResult(stdout="", stderr="", return_code=0)

    def fail_on(self, *prefix: str, return_code: int = 1, stderr: str = "error") -> None:
        self.responses[prefix] = CommandResult(stdout="", stderr=stderr, return_code=return_code)


@pytest.fixture
def fake_executor() -> FakeExecutor:
    """Executor that answers ``adb devices -l`` with two ready devices."""
    return FakeExecutor(
        {
            ("adb", "devices", "-l"): CommandResult(
                stdout=ADB_DEVICES_OUTPUT, stderr="", return_code=0
            ),
        }
    )


@pytest.fixture
def settings_factory(manifest_file: Path, temp_dir: Path):
    """
    Factory fixture for Settings pointing at temporary files.
    """
    from release_tools.config import Settings

    def _create(**overrides):
        values = {
            "manifest_path": manifest_file,
            "pin_file": temp_dir / ".node-version",
        }
        values.update(overrides)
        return Settings(**values)

    return _create
