"""
Release builder and device installer.

Names the release artifact, optionally bumps the patch version, and pushes
or installs the release APK on connected Android devices via adb.
"""

from .artifact import (
    ArtifactDescriptor,
    PackageManifest,
    build_descriptor,
    compute_artifact_name,
    read_manifest,
)
from .devices import discover_devices, filter_devices, parse_device_list, resolve_allow_list
from .installer import (
    ReleaseReport,
    bump_version,
    install_artifact,
    push_artifact,
    run_release,
)

__all__ = [
    "ArtifactDescriptor",
    "PackageManifest",
    "ReleaseReport",
    "build_descriptor",
    "bump_version",
    "compute_artifact_name",
    "discover_devices",
    "filter_devices",
    "install_artifact",
    "parse_device_list",
    "push_artifact",
    "read_manifest",
    "resolve_allow_list",
    "run_release",
]
