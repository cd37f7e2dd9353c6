"""Package manifest and release artifact naming."""

import json
import time
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ManifestError
from ..logging_config import get_logger

logger = get_logger("release_tools.release.artifact")


class PackageManifest(BaseModel):
    """The fields of package.json the release flow needs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    app_name: str = Field(alias="appName", min_length=1)
    version: str = Field(min_length=1)


class ArtifactDescriptor(BaseModel):
    """Name, version and build time of one release artifact."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    timestamp: int = Field(ge=0, description="Milliseconds since epoch")

    @property
    def artifact_name(self) -> str:
        return compute_artifact_name(self.name, self.version, self.timestamp)


def compute_artifact_name(app_name: str, version: str, timestamp: int) -> str:
    """Format the file name stem of a release artifact."""
    return f"{app_name}-{version}-{timestamp}"


def now_millis() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


def read_manifest(path: Path) -> PackageManifest:
    """
    Read the package manifest from disk.

    Always reads the file; callers that bump the version must call this
    after the bump to see the new value.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(f"Package manifest not found: {path}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Package manifest is not valid JSON: {path} ({e})")

    if not isinstance(data, dict):
        raise ManifestError(f"Package manifest must be a JSON object: {path}")

    try:
        manifest = PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Package manifest is missing appName or version: {path}\n{e}")

    logger.debug(f"Read manifest {path}: {manifest.app_name} {manifest.version}")
    return manifest


def build_descriptor(manifest: PackageManifest, timestamp: int | None = None) -> ArtifactDescriptor:
    """Build the artifact descriptor for this invocation."""
    return ArtifactDescriptor(
        name=manifest.app_name,
        version=manifest.version,
        timestamp=now_millis() if timestamp is None else timestamp,
    )
