# ABOUTME: Unit tests for refresh cycle state types and refresh results
# ABOUTME: Tests phase tagging, immutability and RefreshResult constructors

import asyncio
import dataclasses

import pytest

from storefront_auth.models.auth import (
    Idle,
    Refreshing,
    RefreshPhase,
    RefreshResult,
    RefreshState,
    Settled,
)


class TestRefreshState:
    """Test cases for the tagged refresh states."""

    @pytest.mark.unit
    def test_each_state_carries_its_phase(self):
        assert Idle().phase is RefreshPhase.IDLE
        assert Settled(token=None).phase is RefreshPhase.SETTLED

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_refreshing_holds_the_in_flight_handle(self):
        async def cycle():
            return "token"

        handle = asyncio.create_task(cycle())
        state = Refreshing(handle)

        assert state.phase is RefreshPhase.REFRESHING
        assert await state.handle == "token"

    @pytest.mark.unit
    def test_states_belong_to_the_union(self):
        for state in (Idle(), Settled(token="abc"), Settled(token=None)):
            assert isinstance(state, RefreshState)

    @pytest.mark.unit
    def test_states_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Settled(token="a").token = "b"

    @pytest.mark.unit
    def test_phase_values(self):
        assert [phase.value for phase in RefreshPhase] == ["idle", "refreshing", "settled"]


class TestRefreshResult:
    """Test cases for RefreshResult."""

    @pytest.mark.unit
    def test_succeeded(self):
        result = RefreshResult.succeeded("new-access", "new-refresh")

        assert result.success is True
        assert result.access_token == "new-access"
        assert result.refresh_token == "new-refresh"
        assert result.reason is None

    @pytest.mark.unit
    def test_failed(self):
        result = RefreshResult.failed("revoked")

        assert result.success is False
        assert result.access_token is None
        assert result.reason == "revoked"
