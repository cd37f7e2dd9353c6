"""Version bump and per-device push/install of the release APK."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ..config import Settings
from ..executor import CommandExecutor
from ..logging_config import get_logger
from .artifact import ArtifactDescriptor, build_descriptor, read_manifest
from .devices import discover_devices, filter_devices

logger = get_logger("release_tools.release.installer")


@dataclass
class ReleaseReport:
    """What a release run did."""

    artifact: ArtifactDescriptor
    bumped: bool = False
    devices: list[str] = field(default_factory=list)
    pushed: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)


def bump_version(executor: CommandExecutor, npm_bin: str = "npm") -> None:
    """Increment the patch version in package.json via npm."""
    logger.info("Bumping patch version")
    executor.check([npm_bin, "version", "patch"], capture=False)


def push_artifact(
    executor: CommandExecutor,
    device_id: str,
    local_path: Path,
    remote_path: str,
    adb_bin: str = "adb",
) -> None:
    """Copy the APK to a device's storage."""
    logger.info(f"Pushing {local_path} to {device_id}:{remote_path}")
    executor.check(
        [adb_bin, "-s", device_id, "push", str(local_path), remote_path],
        capture=False,
    )


def install_artifact(
    executor: CommandExecutor,
    device_id: str,
    local_path: Path,
    adb_bin: str = "adb",
) -> None:
    """Install the APK on a device."""
    logger.info(f"Installing {local_path} on {device_id}")
    executor.check(
        [adb_bin, "-s", device_id, "install", str(local_path)],
        capture=False,
    )


def remote_artifact_path(remote_dir: str, artifact: ArtifactDescriptor) -> str:
    """Destination of a pushed APK on the device."""
    return str(PurePosixPath(remote_dir) / f"{artifact.artifact_name}.apk")


def run_release(
    settings: Settings,
    executor: CommandExecutor,
    timestamp: int | None = None,
) -> ReleaseReport:
    """
    Run the release flow configured by ``settings``.

    Devices are handled one at a time in discovery order. The first failing
    command raises CommandFailedError and no later device is attempted.

    Args:
        settings: Flags and paths for this run
        executor: Runs npm and adb
        timestamp: Build time override in ms (defaults to now)

    Returns:
        ReleaseReport of what was done
    """
    if settings.has_publish:
        bump_version(executor, settings.npm_bin)

    # Read after the bump so the name carries the new version
    manifest = read_manifest(settings.manifest_path)
    artifact = build_descriptor(manifest, timestamp)
    report = ReleaseReport(artifact=artifact, bumped=settings.has_publish)
    logger.info(f"Release artifact: {artifact.artifact_name}")

    if not settings.wants_devices:
        logger.info("No install flags set; skipping device discovery")
        return report

    all_devices = discover_devices(executor, settings.adb_bin)
    report.devices = filter_devices(all_devices, settings.allowed_device_set)
    logger.info(f"Target devices: {report.devices}")

    if settings.has_install_apk:
        remote_path = remote_artifact_path(settings.remote_dir, artifact)
        for device_id in report.devices:
            push_artifact(executor, device_id, settings.apk_path, remote_path, settings.adb_bin)
            report.pushed.append(device_id)

    if settings.has_install:
        for device_id in report.devices:
            install_artifact(executor, device_id, settings.apk_path, settings.adb_bin)
            report.installed.append(device_id)

    return report
