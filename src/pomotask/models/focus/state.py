"""Pomodoro session state and the focus/break state machine.

``PomodoroTimer`` owns one :class:`PomodoroSession` and cycles it between
FOCUS and BREAK. Ticks come from an injected :class:`TickSource`; the timer
keeps a single tick handle and cancels it before installing another, so a
session can never be driven by two tick sources at once.

When a phase runs out the machine flips to the other phase and stops ticking.
It never returns to IDLE on its own: the caller decides whether to start the
next phase, which it can learn about from :meth:`PomodoroTimer.subscribe_completion`
or by watching ``remaining_time`` reach zero in published snapshots.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pomotask.models.focus.ticker import TickHandle, TickSource
from pomotask.utils.dates import Clock, system_clock

DEFAULT_FOCUS_DURATION = 25 * 60
DEFAULT_BREAK_DURATION = 5 * 60
TICK_INTERVAL = 1.0


class PomodoroState(str, Enum):
    IDLE = "IDLE"
    FOCUS = "FOCUS"
    BREAK = "BREAK"
    PAUSED = "PAUSED"


class ResumePolicy(str, Enum):
    """Which phase ``resume()`` re-enters."""

    FOCUS = "focus"  # always FOCUS, even when a break was paused
    PREVIOUS = "previous"  # the phase that was paused


def new_session_id(now: datetime) -> str:
    return f"session_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:8]}"


@dataclass
class PomodoroSession:
    """Mutable state of one Pomodoro session. Durations and counters in seconds."""

    id: str
    state: PomodoroState = PomodoroState.IDLE
    focus_duration: int = DEFAULT_FOCUS_DURATION
    break_duration: int = DEFAULT_BREAK_DURATION
    elapsed_time: int = 0
    total_focus_time: int = 0
    started_at: datetime | None = None
    paused_at: datetime | None = None
    paused_phase: PomodoroState | None = None

    @property
    def max_time(self) -> int:
        """Focus length while in FOCUS, the break length in every other state.

        While PAUSED this is the break length even when focus was paused;
        resuming restores the focus length together with the FOCUS state.
        """
        if self.state == PomodoroState.FOCUS:
            return self.focus_duration
        return self.break_duration

    @property
    def remaining_time(self) -> int:
        return max(0, self.max_time - self.elapsed_time)

    @property
    def progress(self) -> float:
        """Percent of the current phase elapsed, 0-100."""
        if self.max_time <= 0:
            return 0.0
        return min(100.0, self.elapsed_time / self.max_time * 100)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session plus its derived values."""

    id: str
    state: PomodoroState
    focus_duration: int
    break_duration: int
    elapsed_time: int
    total_focus_time: int
    started_at: datetime | None
    paused_at: datetime | None
    remaining_time: int
    progress: float
    is_running: bool


@dataclass(frozen=True)
class PhaseCompleted:
    """Published once each time a FOCUS or BREAK phase runs to zero."""

    phase: PomodoroState
    duration_seconds: int
    completed_at: datetime
    snapshot: SessionSnapshot


SnapshotListener = Callable[[SessionSnapshot], None]
CompletionListener = Callable[[PhaseCompleted], None]


class PomodoroTimer:
    """Focus/break state machine driven by one-second ticks."""

    def __init__(
        self,
        tick_source: TickSource,
        *,
        focus_duration: int = DEFAULT_FOCUS_DURATION,
        break_duration: int = DEFAULT_BREAK_DURATION,
        resume_policy: ResumePolicy = ResumePolicy.FOCUS,
        clock: Clock = system_clock,
    ):
        if focus_duration <= 0 or break_duration <= 0:
            raise ValueError("Durations must be positive")

        self._tick_source = tick_source
        self._clock = clock
        self.resume_policy = resume_policy
        self._focus_duration = focus_duration
        self._break_duration = break_duration

        self._tick_handle: TickHandle | None = None
        self._listeners: list[SnapshotListener] = []
        self._completion_listeners: list[CompletionListener] = []

        self.session = self._fresh_session()

    # ----- Observation -----

    @property
    def state(self) -> PomodoroState:
        return self.session.state

    @property
    def is_running(self) -> bool:
        return self._tick_handle is not None

    @property
    def remaining_time(self) -> int:
        return self.session.remaining_time

    @property
    def progress(self) -> float:
        return self.session.progress

    def snapshot(self) -> SessionSnapshot:
        s = self.session
        return SessionSnapshot(
            id=s.id,
            state=s.state,
            focus_duration=s.focus_duration,
            break_duration=s.break_duration,
            elapsed_time=s.elapsed_time,
            total_focus_time=s.total_focus_time,
            started_at=s.started_at,
            paused_at=s.paused_at,
            remaining_time=s.remaining_time,
            progress=s.progress,
            is_running=self.is_running,
        )

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call *listener* with a snapshot after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._remove(self._listeners, listener)

    def subscribe_completion(self, listener: CompletionListener) -> Callable[[], None]:
        """Call *listener* once per naturally completed phase."""
        self._completion_listeners.append(listener)
        return lambda: self._remove(self._completion_listeners, listener)

    @staticmethod
    def _remove(listeners: list, listener) -> None:
        if listener in listeners:
            listeners.remove(listener)

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ----- Commands -----

    def start_focus(self) -> None:
        """Enter FOCUS from any state with a zeroed phase counter."""
        self._enter_phase(PomodoroState.FOCUS)

    def start_break(self) -> None:
        """Enter BREAK from any state with a zeroed phase counter."""
        self._enter_phase(PomodoroState.BREAK)

    def pause(self) -> None:
        """FOCUS/BREAK -> PAUSED, keeping elapsed and total focus time."""
        if self.session.state not in (PomodoroState.FOCUS, PomodoroState.BREAK):
            return
        self._cancel_tick()
        self.session.paused_phase = self.session.state
        self.session.state = PomodoroState.PAUSED
        self.session.paused_at = self._clock()
        self._publish()

    def resume(self) -> None:
        """PAUSED -> FOCUS (or the paused phase, per resume policy); elapsed time continues."""
        if self.session.state != PomodoroState.PAUSED:
            return
        if self.resume_policy == ResumePolicy.PREVIOUS and self.session.paused_phase:
            target = self.session.paused_phase
        else:
            target = PomodoroState.FOCUS
        self.session.state = target
        self.session.paused_at = None
        self.session.paused_phase = None
        self._begin_ticking()
        self._publish()

    def stop(self) -> None:
        """Any state -> IDLE. Total focus time is kept."""
        self._cancel_tick()
        s = self.session
        s.state = PomodoroState.IDLE
        s.elapsed_time = 0
        s.started_at = None
        s.paused_at = None
        s.paused_phase = None
        self._publish()

    def reset(self) -> None:
        """Any state -> IDLE with a new session id and every counter zeroed."""
        self._cancel_tick()
        self.session = self._fresh_session()
        self._publish()

    def tick(self) -> None:
        """Advance the current phase by one second."""
        s = self.session
        if s.state not in (PomodoroState.FOCUS, PomodoroState.BREAK):
            return

        phase = s.state
        max_time = s.max_time
        s.elapsed_time += 1

        if s.elapsed_time >= max_time:
            s.elapsed_time = max_time
            self._cancel_tick()
            s.state = (
                PomodoroState.BREAK if phase == PomodoroState.FOCUS else PomodoroState.FOCUS
            )
            self._publish()
            self._complete(phase, max_time)
            return

        if phase == PomodoroState.FOCUS:
            s.total_focus_time += 1
        self._publish()

    # ----- Internals -----

    def _fresh_session(self) -> PomodoroSession:
        return PomodoroSession(
            id=new_session_id(self._clock()),
            focus_duration=self._focus_duration,
            break_duration=self._break_duration,
        )

    def _enter_phase(self, phase: PomodoroState) -> None:
        s = self.session
        s.state = phase
        s.elapsed_time = 0
        s.started_at = self._clock()
        s.paused_at = None
        s.paused_phase = None
        self._begin_ticking()
        self._publish()

    def _begin_ticking(self) -> None:
        self._cancel_tick()
        self._tick_handle = self._tick_source.start(TICK_INTERVAL, self.tick)

    def _cancel_tick(self) -> None:
        handle, self._tick_handle = self._tick_handle, None
        if handle is not None:
            handle.cancel()

    def _complete(self, phase: PomodoroState, duration: int) -> None:
        event = PhaseCompleted(
            phase=phase,
            duration_seconds=duration,
            completed_at=self._clock(),
            snapshot=self.snapshot(),
        )
        for listener in list(self._completion_listeners):
            listener(event)
