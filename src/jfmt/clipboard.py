"""
System clipboard access through platform helper programs.
"""

import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from loguru import logger

from .types import ClipboardError, ClipboardUnsupportedError

# (read command, write command), in order of preference
LINUX_HELPERS = (
    (["xclip", "-selection", "clipboard", "-o"], ["xclip", "-selection", "clipboard"]),
    (["xsel", "--clipboard", "--output"], ["xsel", "--clipboard", "--input"]),
    (["wl-paste", "--no-newline"], ["wl-copy"]),
)


class Clipboard(ABC):
    """Clipboard capability."""

    @abstractmethod
    def read(self) -> bytes:
        """Return the clipboard contents."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Replace the clipboard contents with data."""


class CommandClipboard(Clipboard):
    """Clipboard backed by external helper commands."""

    def __init__(self, read_command: Sequence[str], write_command: Sequence[str]):
        self.read_command = list(read_command)
        self.write_command = list(write_command)

    def read(self) -> bytes:
        return self._run(self.read_command)

    def write(self, data: bytes) -> None:
        self._run(self.write_command, data)

    def _run(self, command: List[str], data: Optional[bytes] = None) -> bytes:
        logger.debug(f"Running clipboard helper: {' '.join(command)}")
        try:
            result = subprocess.run(command, input=data, capture_output=True, check=True)
        except FileNotFoundError as e:
            raise ClipboardError(f"clipboard helper not found: {command[0]}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ClipboardError(
                f"{command[0]} exited with status {e.returncode}" + (f": {stderr}" if stderr else "")
            ) from e
        except OSError as e:
            raise ClipboardError(f"could not run {command[0]}: {e}") from e
        return result.stdout


class UnsupportedClipboard(Clipboard):
    """Placeholder for platforms without a known clipboard helper."""

    def __init__(self, platform: str):
        self.platform = platform

    def read(self) -> bytes:
        raise ClipboardUnsupportedError(f"clipboard not supported on {self.platform}")

    def write(self, data: bytes) -> None:
        raise ClipboardUnsupportedError(f"clipboard not supported on {self.platform}")


def detect_clipboard(
    platform: Optional[str] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> Clipboard:
    """
    Pick the clipboard backend for a platform.

    Args:
        platform: ``sys.platform`` style name (defaults to the current one)
        which: Executable lookup, used to choose between Linux helpers

    Returns:
        Clipboard implementation
    """
    platform = platform or sys.platform

    if platform == "darwin":
        return CommandClipboard(["pbpaste"], ["pbcopy"])
    if platform == "win32":
        return CommandClipboard(
            ["powershell", "-command", "Get-Clipboard"],
            ["powershell", "-command", "Set-Clipboard"],
        )
    if platform.startswith("linux"):
        for read_command, write_command in LINUX_HELPERS:
            if which(read_command[0]) and which(write_command[0]):
                return CommandClipboard(read_command, write_command)
        # Nothing installed: default to xclip
        read_command, write_command = LINUX_HELPERS[0]
        return CommandClipboard(read_command, write_command)

    logger.debug(f"No clipboard helper known for platform {platform}")
    return UnsupportedClipboard(platform)
