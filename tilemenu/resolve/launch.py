"""
Launch Actions - What happens when an application tile is activated.

Both actions end the tilemenu process: ShellCommand replaces it with
`sh -c <command>`, DesktopLaunch hands the application to the desktop
launcher and then exits. invoke() only ever returns by raising LaunchFailed.
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, NoReturn, Union

from loguru import logger

from tilemenu.errors import LaunchFailed
from tilemenu.services.platform import AppRecord


@dataclass(frozen=True)
class ShellCommand:
    """Replace the current process with a shell running `command` verbatim."""
    command: str
    shell: str = "sh"

    def invoke(self) -> NoReturn:
        logger.info(f"Executing: {self.shell} -c {self.command!r}")
        try:
            os.execvp(self.shell, [self.shell, "-c", self.command])
        except OSError as e:
            raise LaunchFailed(f"failed to execute {self.shell}: {e}") from e
        # execvp only returns by raising
        raise LaunchFailed(f"failed to execute {self.shell}")


@dataclass(frozen=True)
class DesktopLaunch:
    """Ask the desktop launcher to start `record`, then exit."""
    record: AppRecord
    context_factory: Callable[[], Any]

    def invoke(self) -> NoReturn:
        context = self.context_factory()
        logger.info(f"Launching {self.record.name}")
        try:
            self.record.launch(context)
        except LaunchFailed:
            raise
        except Exception as e:
            raise LaunchFailed(f"failed to launch application: {e}") from e
        sys.exit(0)


LaunchAction = Union[ShellCommand, DesktopLaunch]
