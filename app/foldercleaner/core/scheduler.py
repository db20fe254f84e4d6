"""Recurring execution of cleanup routines.

Each routine runs in its own thread: one pass, then a wait of the
routine's interval, repeated until a stop is requested. The wait is the
only point where a stop request is observed, so a pass is never
interrupted halfway.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from foldercleaner.core.routine import PassReport, Routine

logger = logging.getLogger(__name__)

PassCallback = Callable[[Routine, PassReport], None]
ErrorCallback = Callable[[Routine, OSError], None]

# Longest single Event.wait, in seconds
MAX_WAIT_SLICE = 86400.0


class RoutineHandle:
    """Handle to a routine running in its own thread.

    Attributes:
        routine: The routine executed by the thread.
    """

    def __init__(
        self, routine: Routine, thread: threading.Thread, stop_event: threading.Event
    ) -> None:
        self.routine = routine
        self._thread = thread
        self._stop_event = stop_event

    def stop(self) -> None:
        """Request the loop to exit after the current pass."""
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the thread to exit.

        Without a prior ``stop`` the loop never exits, so joining without
        a timeout blocks for the lifetime of the process.
        """
        self._thread.join(timeout)

    def is_alive(self) -> bool:
        """Check if the routine thread is still running."""
        return self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        """Check if a stop has been requested."""
        return self._stop_event.is_set()


def spawn(
    routine: Routine,
    *,
    on_pass: PassCallback | None = None,
    on_error: ErrorCallback | None = None,
    stop_event: threading.Event | None = None,
) -> RoutineHandle:
    """Start a thread that runs a routine repeatedly.

    Args:
        routine: Routine to execute. The thread is its only user.
        on_pass: Called with the report of every completed pass.
        on_error: Called when a pass fails because the directory cannot be listed.
        stop_event: Event that ends the loop when set. A new one is created if None.

    Returns:
        RoutineHandle for stopping and joining the thread.
    """
    event = stop_event if stop_event is not None else threading.Event()
    thread = threading.Thread(
        target=_run_loop,
        args=(routine, event, on_pass, on_error),
        name=f"routine:{routine.directory}",
        daemon=True,
    )
    thread.start()
    logger.info(
        "Started routine for %s (pattern %s, every %s)",
        routine.directory,
        routine.pattern.describe(),
        routine.interval,
    )
    return RoutineHandle(routine, thread, event)


def _run_loop(
    routine: Routine,
    stop_event: threading.Event,
    on_pass: PassCallback | None,
    on_error: ErrorCallback | None,
) -> None:
    """Run passes until the stop event is set."""
    interval = routine.interval.total_seconds()

    while not stop_event.is_set():
        _run_once(routine, on_pass, on_error)
        if _wait_for_stop(stop_event, interval):
            break

    logger.info("Stopped routine for %s", routine.directory)


def _wait_for_stop(stop_event: threading.Event, seconds: float) -> bool:
    """Wait up to ``seconds`` for the stop event, returning True if it was set.

    Long intervals are waited in slices of at most MAX_WAIT_SLICE seconds,
    since Event.wait rejects timeouts the platform clock cannot represent.
    """
    remaining = seconds
    while remaining > 0:
        timeout = min(remaining, MAX_WAIT_SLICE)
        if stop_event.wait(timeout):
            return True
        remaining -= timeout
    return stop_event.is_set()


def _run_once(
    routine: Routine,
    on_pass: PassCallback | None,
    on_error: ErrorCallback | None,
) -> None:
    """Run a single pass and hand its outcome to the callbacks.

    Callback errors are logged and never end the loop.
    """
    try:
        report = routine.run()
    except OSError as e:
        logger.error("Cannot list %s: %s", routine.directory, e)
        if on_error is not None:
            try:
                on_error(routine, e)
            except Exception:
                logger.exception("Error callback failed for %s", routine.directory)
        return

    if report.removed:
        logger.info("Removed %d entries from %s", len(report.removed), routine.directory)

    if on_pass is not None:
        try:
            on_pass(routine, report)
        except Exception:
            logger.exception("Pass callback failed for %s", routine.directory)


class Scheduler:
    """Runs a set of routines, one thread each.

    Routines never share state; the scheduler only keeps their handles
    so they can be stopped and joined together.
    """

    def __init__(
        self,
        on_pass: PassCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Initialize the Scheduler.

        Args:
            on_pass: Callback passed to every spawned routine.
            on_error: Callback passed to every spawned routine.
        """
        self._on_pass = on_pass
        self._on_error = on_error
        self._handles: list[RoutineHandle] = []

    @property
    def handles(self) -> list[RoutineHandle]:
        """Handles of all spawned routines, in spawn order."""
        return list(self._handles)

    def spawn(self, routine: Routine) -> RoutineHandle:
        """Start running a routine in a new thread."""
        handle = spawn(routine, on_pass=self._on_pass, on_error=self._on_error)
        self._handles.append(handle)
        return handle

    def stop(self) -> None:
        """Request every routine to stop after its current pass."""
        for handle in self._handles:
            handle.stop()

    def join(self, timeout: float | None = None) -> None:
        """Wait for every routine thread to exit.

        Args:
            timeout: Maximum seconds to wait per routine. None waits indefinitely.
        """
        for handle in self._handles:
            handle.join(timeout)

    def wait(self, poll_interval: float = 1.0) -> None:
        """Block until every routine has stopped or the process is interrupted.

        On KeyboardInterrupt all routines are stopped and joined before
        returning.

        Args:
            poll_interval: Seconds between liveness checks.
        """
        try:
            while any(handle.is_alive() for handle in self._handles):
                for handle in self._handles:
                    handle.join(poll_interval)
        except KeyboardInterrupt:
            logger.info("Interrupted, stopping %d routine(s)", len(self._handles))
            self.stop()
            self.join()
