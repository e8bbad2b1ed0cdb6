"""Invoke the Claude CLI so it refreshes its stored OAuth tokens."""

import subprocess
from collections.abc import Sequence

from ccbridge.auth.exceptions import FailureKind
from ccbridge.core.logging import get_logger


logger = get_logger(__name__)


class RefreshInvoker:
    """Runs the refresh command with inherited stdio and a bounded timeout.

    Success only means the process could be started. Exit codes, output and
    timeouts are logged but do not change the result, so a refresh that
    silently fails still reports success.
    """

    def __init__(self, command: Sequence[str], timeout: float = 30.0):
        """Initialize the invoker.

        Args:
            command: Executable and arguments to run
            timeout: Seconds before the process is killed
        """
        self.command = list(command)
        self.timeout = timeout

    def invoke(self) -> bool:
        """Run the refresh command.

        Returns:
            False if the command could not be started, True otherwise
        """
        logger.info("Executing claude command to refresh credentials...")

        try:
            result = subprocess.run(self.command, timeout=self.timeout, check=False)
        except subprocess.TimeoutExpired:
            logger.warning(
                "refresh_command_timed_out",
                command=self.command,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(
                f"Error setting up claude command: {e}",
                failure=FailureKind.INVOCATION_ERROR.value,
                command=self.command,
            )
            return False
        else:
            if result.returncode != 0:
                logger.warning(
                    "refresh_command_nonzero_exit",
                    command=self.command,
                    returncode=result.returncode,
                )

        logger.info("Claude command executed successfully")
        return True
