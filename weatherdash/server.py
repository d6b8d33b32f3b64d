"""Weather dashboard HTTP API: serves the dashboard state and controls."""

import asyncio
import html

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from weatherdash import __version__
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.common import UnitSystem
from weatherdash.pipeline.controller import DashboardController
from weatherdash.pipeline.state import Phase
from weatherdash.reporting.formatters import format_dashboard_text, state_dict


class SearchRequest(BaseModel):
    city: str


class UnitsRequest(BaseModel):
    units: UnitSystem


def get_controller(request: Request) -> DashboardController:
    return request.app.state.controller


async def _ensure_initialized(
    controller: DashboardController, lock: asyncio.Lock
) -> None:
    """Run the first-load geolocate-and-fetch exactly once."""
    async with lock:
        if controller.state.phase == Phase.IDLE:
            await controller.initialize()


def create_app(
    config: DashboardConfig | None = None,
    controller: DashboardController | None = None,
) -> FastAPI:
    if controller is None:
        controller = DashboardController.from_config(config or DashboardConfig())

    app = FastAPI(title="Weather Dashboard", version=__version__)
    app.state.controller = controller
    init_lock = asyncio.Lock()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Data endpoints ──────────────────────────────────────────

    @app.get("/api/state")
    async def get_state(ctl: DashboardController = Depends(get_controller)):
        """Current dashboard state. The first call geolocates and fetches."""
        await _ensure_initialized(ctl, init_lock)
        return state_dict(ctl.state)

    @app.get("/api/health")
    def get_health(ctl: DashboardController = Depends(get_controller)):
        """Quick health check."""
        query = ctl.last_query
        return {
            "ok": True,
            "phase": ctl.state.phase.value,
            "last_query": str(query) if query else None,
            "weatherapi_key_set": bool(ctl.config.weatherapi.api_key),
            "openweather_key_set": bool(ctl.config.openweather.api_key),
        }

    # ── Control endpoints ───────────────────────────────────────

    @app.post("/api/search")
    async def search(
        body: SearchRequest, ctl: DashboardController = Depends(get_controller)
    ):
        if not body.city.strip():
            raise HTTPException(422, "City must not be empty")
        state = await ctl.search(body.city)
        return state_dict(state)

    @app.post("/api/units")
    async def change_units(
        body: UnitsRequest, ctl: DashboardController = Depends(get_controller)
    ):
        state = await ctl.change_units(body.units)
        return state_dict(state)

    @app.post("/api/theme")
    def toggle_theme(ctl: DashboardController = Depends(get_controller)):
        state = ctl.toggle_theme()
        return {"theme": state.theme.value}

    # ── Serve dashboard ─────────────────────────────────────────

    @app.get("/")
    async def serve_dashboard(ctl: DashboardController = Depends(get_controller)):
        await _ensure_initialized(ctl, init_lock)
        body = html.escape(format_dashboard_text(ctl.state))
        theme = ctl.state.theme.value
        return HTMLResponse(
            f'<html><body class="{theme}"><pre>{body}</pre></body></html>'
        )

    return app
