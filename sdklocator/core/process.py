"""
sdklocator/core/process.py

Runs the diagnostic command (``dotnet --info``) and captures its output.
"""

import os
import subprocess
import threading
import logging
from pathlib import Path
from typing import IO, Dict, List, Optional, Union

from sdklocator.config.parser import DiscoveryConfig
from sdklocator.core.exceptions import ToolUnavailableError

logger = logging.getLogger(__name__)


def _read_lines(stream: IO[str], sink: List[str]) -> None:
    """Append every non-blank line of ``stream`` to ``sink``."""
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip():
            sink.append(line)


class ProcessRunner:
    """
    Launch the diagnostic tool and return its standard output as text.

    The UI language variable is forced to a fixed locale so the output can be
    matched by English patterns regardless of the host settings. Standard
    output is read on a background thread while the caller blocks on process
    exit; standard error is drained the same way and only logged.
    """

    def __init__(self, config: Optional[DiscoveryConfig] = None):
        """
        Initialize runner.

        Args:
            config: Discovery configuration (defaults used if None)
        """
        self.config = config or DiscoveryConfig()

    @property
    def command_line(self) -> List[str]:
        return [self.config.command, *self.config.arguments]

    def build_environment(self) -> Dict[str, str]:
        """
        Build the child process environment.

        Returns:
            Copy of the current environment with the locale variable forced
        """
        env = dict(os.environ)
        env[self.config.locale_variable] = self.config.locale
        return env

    def run(self, working_directory: Union[str, Path]) -> Optional[str]:
        """
        Run the tool in ``working_directory`` and capture standard output.

        Blank lines are dropped and the remaining lines are joined with
        ``\\n``. There is no timeout: a hung tool blocks this call. A run that
        exits non-zero without printing anything counts as unavailable; output
        from a non-zero run is still returned. Both are decided after exit,
        so the result does not depend on how fast the tool fails.

        Args:
            working_directory: Directory the tool runs in

        Returns:
            Captured output, or None if the tool is unavailable
        """
        try:
            process = self._start(working_directory)
        except ToolUnavailableError as e:
            logger.debug(f"{e}; treating as no SDKs installed")
            return None

        lines: List[str] = []
        errors: List[str] = []
        readers = [
            threading.Thread(
                target=_read_lines, args=(process.stdout, lines), daemon=True
            ),
            threading.Thread(
                target=_read_lines, args=(process.stderr, errors), daemon=True
            ),
        ]
        for reader in readers:
            reader.start()

        returncode = process.wait()

        for reader in readers:
            reader.join()
        process.stdout.close()
        process.stderr.close()

        logger.debug(
            f"{' '.join(self.command_line)} exited with code {returncode}, "
            f"captured {len(lines)} lines"
        )
        if errors:
            logger.debug(f"{self.config.command} stderr: {' | '.join(errors)}")

        if returncode != 0 and not lines:
            logger.debug(
                f"{self.config.command} failed with code {returncode} and no output"
            )
            return None

        return "\n".join(lines)

    def _start(self, working_directory: Union[str, Path]) -> subprocess.Popen:
        """
        Start the tool process.

        Raises:
            ToolUnavailableError: If the process could not be started
        """
        creationflags = 0
        if os.name == "nt":
            creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)

        logger.debug(f"Running {' '.join(self.command_line)} in {working_directory}")

        try:
            return subprocess.Popen(
                self.command_line,
                cwd=str(working_directory),
                env=self.build_environment(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                shell=False,
                creationflags=creationflags,
            )
        except (OSError, ValueError) as e:
            raise ToolUnavailableError(self.config.command, str(e)) from e


def run_tool(
    working_directory: Union[str, Path], config: Optional[DiscoveryConfig] = None
) -> Optional[str]:
    """
    Convenience wrapper around ``ProcessRunner.run``.

    Args:
        working_directory: Directory the tool runs in
        config: Discovery configuration (defaults used if None)

    Returns:
        Captured output, or None if the tool is unavailable
    """
    return ProcessRunner(config).run(working_directory)
