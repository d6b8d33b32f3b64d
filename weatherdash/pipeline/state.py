"""Dashboard state machine: an immutable value and pure transitions.

Phases run idle -> loading -> ready | failed, and go back to loading on
every search or unit change. Each refresh carries a request token; a
resolution whose token is not the latest issued leaves the state unchanged.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from weatherdash.models.common import GENERIC_ERROR_MESSAGE, Theme, UnitSystem
from weatherdash.models.weather import DashboardViewModel


class Phase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DashboardState:
    phase: Phase = Phase.IDLE
    view_model: DashboardViewModel | None = None
    error: str | None = None
    units: UnitSystem = UnitSystem.METRIC
    theme: Theme = Theme.LIGHT
    city_query: str = ""
    request_token: int = 0

    @property
    def loading(self) -> bool:
        return self.phase == Phase.LOADING


def begin_loading(state: DashboardState, token: int) -> DashboardState:
    """Enter loading. Only the error is cleared; stale data stays visible."""
    if token <= state.request_token:
        raise ValueError(
            f"request token {token} is not newer than {state.request_token}"
        )
    return replace(state, phase=Phase.LOADING, error=None, request_token=token)


def is_current(state: DashboardState, token: int) -> bool:
    return token == state.request_token


def resolve_ready(
    state: DashboardState, token: int, view_model: DashboardViewModel
) -> DashboardState:
    if not is_current(state, token):
        return state
    return replace(state, phase=Phase.READY, view_model=view_model, error=None)


def resolve_failed(
    state: DashboardState, token: int, message: str = GENERIC_ERROR_MESSAGE
) -> DashboardState:
    """Fail the refresh. The previously shown view model is left in place."""
    if not is_current(state, token):
        return state
    return replace(state, phase=Phase.FAILED, error=message)


def with_units(state: DashboardState, units: UnitSystem) -> DashboardState:
    return replace(state, units=units)


def with_city_query(state: DashboardState, city: str) -> DashboardState:
    return replace(state, city_query=city)


def toggle_theme(state: DashboardState) -> DashboardState:
    theme = Theme.DARK if state.theme == Theme.LIGHT else Theme.LIGHT
    return replace(state, theme=theme)
