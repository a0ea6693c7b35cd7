# ABOUTME: Tagged states of the single-flight token refresh cycle
# ABOUTME: Models Idle, Refreshing(handle) and Settled(token) as distinct immutable types

import asyncio
from dataclasses import dataclass
from enum import Enum


class RefreshPhase(str, Enum):
    """
    Enum for refresh cycle phases.
    """

    IDLE = "idle"
    REFRESHING = "refreshing"
    SETTLED = "settled"


@dataclass(frozen=True)
class Idle:
    """No refresh in flight; the next request starts a new cycle."""

    phase: RefreshPhase = RefreshPhase.IDLE


@dataclass(frozen=True)
class Refreshing:
    """A refresh is in flight. Every requester awaits `handle`."""

    handle: "asyncio.Task[str | None]"
    phase: RefreshPhase = RefreshPhase.REFRESHING


@dataclass(frozen=True)
class Settled:
    """The cycle finished with a new access token, or None on failure."""

    token: str | None
    phase: RefreshPhase = RefreshPhase.SETTLED


RefreshState = Idle | Refreshing | Settled
