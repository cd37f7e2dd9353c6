"""
Release tools.

Operational helpers for a mobile app repository:
- install: bump the version and push/install the release APK via adb
- check-version: verify the installed runtime matches the pinned version
"""

__version__ = "1.0.0"
