"""Release tool exceptions."""


class ReleaseToolsError(Exception):
    """Base exception for release tool errors."""
    pass


class CommandFailedError(ReleaseToolsError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str = ""):
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        message = f"Command failed with exit code {return_code}: {' '.join(command)}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class ManifestError(ReleaseToolsError):
    """Raised when the package manifest is missing or malformed."""
    pass
