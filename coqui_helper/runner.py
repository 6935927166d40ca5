"""
Subprocess execution with retries.

The tts command is run with stdout and stderr merged into a single captured
output. A failed run (non-zero exit) is retried up to a maximum number of
attempts. An optional threading.Event cancels the run: the process is
terminated and no further attempts are made.
"""

import subprocess
import sys
import threading

# How often a running process is checked for cancellation (seconds)
POLL_INTERVAL = 0.1


class CommandFailedError(RuntimeError):
    """The tts command exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, output: str):
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"TTS command failed with exit code {returncode}:\n{output}"
        )


class SynthesisCancelled(RuntimeError):
    """The run was cancelled before the tts command finished."""


def _terminate(process: subprocess.Popen, shutdown_timeout: float) -> None:
    """Stop a process gracefully, then forcefully if it does not exit in time."""
    if process.poll() is not None:
        return

    process.terminate()
    try:
        process.wait(timeout=shutdown_timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()


def run_command(
    cmd: list[str],
    cancel_event: threading.Event | None = None,
    shutdown_timeout: float = 5.0,
) -> str:
    """Run a command once and return its combined output.

    Args:
        cmd: Command and arguments
        cancel_event: When set, the running process is terminated
        shutdown_timeout: Seconds to wait after terminating before killing

    Returns:
        Combined stdout/stderr of the command

    Raises:
        CommandFailedError: If the command exits with a non-zero status
        SynthesisCancelled: If cancel_event is set before the command finishes
        RuntimeError: If the command cannot be found
    """
    if cancel_event is not None and cancel_event.is_set():
        raise SynthesisCancelled("TTS run cancelled before start")

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except FileNotFoundError as e:
        raise RuntimeError(f"TTS command not found: {cmd[0]}") from e

    with process:
        if cancel_event is None:
            output, _ = process.communicate()
        else:
            while True:
                try:
                    output, _ = process.communicate(timeout=POLL_INTERVAL)
                    break
                except subprocess.TimeoutExpired:
                    if cancel_event.is_set():
                        _terminate(process, shutdown_timeout)
                        raise SynthesisCancelled("TTS run cancelled") from None

    if process.returncode != 0:
        raise CommandFailedError(cmd, process.returncode, output or "")
    return output or ""


def run_with_retries(
    cmd: list[str],
    max_retries: int,
    cancel_event: threading.Event | None = None,
    verbose: bool = False,
    shutdown_timeout: float = 5.0,
) -> str:
    """Run a command, retrying on non-zero exit.

    Every failed attempt is reported on stderr with its attempt number.

    Args:
        cmd: Command and arguments
        max_retries: Maximum number of attempts (at least 1)
        cancel_event: When set, the running attempt is terminated and no
            further attempts are made
        verbose: Print each attempt and the command output
        shutdown_timeout: Seconds to wait after terminating before killing

    Returns:
        Combined output of the first successful attempt

    Raises:
        ValueError: If max_retries is less than 1
        CommandFailedError: The error of the last attempt once all attempts fail
        SynthesisCancelled: If the run was cancelled
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    last_error: CommandFailedError | None = None
    for attempt in range(1, max_retries + 1):
        if verbose:
            print(f"Running command (attempt {attempt}/{max_retries}): {' '.join(cmd)}")

        try:
            output = run_command(cmd, cancel_event, shutdown_timeout)
        except CommandFailedError as e:
            last_error = e
            print(f"TTS command failed with output: {e.output}", file=sys.stderr)
            print(f"TTS failed (attempt {attempt}/{max_retries})", file=sys.stderr)
            continue

        if verbose and output:
            print(f"  Command output: {output}")
        return output

    assert last_error is not None
    raise last_error
