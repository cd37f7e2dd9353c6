"""Device discovery and allow-list filtering.

Device identifiers come from ``adb devices -l``. Each device line carries a
status marker followed by the identifier, for example::

    List of devices attached
    emulator-5554  device product:sdk_gphone64 model:sdk_gphone64 transport_id:1

yields ``product:sdk_gphone64``. Common identifier shapes:

- USB devices: ``usb:337969152X``
- Product devices: ``product:pixel6``
- Emulators: ``emulator:5554``
"""

from typing import Iterable, Sequence

from ..executor import CommandExecutor
from ..logging_config import get_logger

logger = get_logger("release_tools.release.devices")

STATUS_MARKER = "device "


def resolve_allow_list(env_value: str | None) -> frozenset[str] | None:
    """
    Parse a comma-separated allow-list.

    Tokens are trimmed and empty tokens dropped, so trailing or doubled
    commas never add an empty identifier.

    Returns:
        The set of allowed identifiers, or None to use all devices
    """
    if not env_value:
        return None

    tokens = (token.strip() for token in env_value.split(","))
    return frozenset(token for token in tokens if token)


def parse_device_list(output: str) -> list[str]:
    """Extract device identifiers from ``adb devices -l`` output."""
    devices = []
    for line in output.split("\n")[1:]:
        _, marker, rest = line.partition(STATUS_MARKER)
        if not marker:
            continue
        device_id = rest.split(" ")[0]
        if device_id:
            devices.append(device_id)
    return devices


def discover_devices(executor: CommandExecutor, adb_bin: str = "adb") -> list[str]:
    """List connected devices via adb. Raises CommandFailedError if adb fails."""
    result = executor.check([adb_bin, "devices", "-l"])
    devices = parse_device_list(result.stdout)
    logger.info(f"Discovered {len(devices)} device(s): {devices}")
    return devices


def filter_devices(
    devices: Sequence[str],
    allowed: Iterable[str] | None,
) -> list[str]:
    """
    Keep only allowed devices.

    Order and duplicates of ``devices`` are preserved. With no allow-list
    every device is kept.
    """
    if allowed is None:
        return list(devices)
    allowed = frozenset(allowed)
    return [device_id for device_id in devices if device_id in allowed]
