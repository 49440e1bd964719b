"""Mini README: FastAPI service exposing the departure board.

Structure:
    * create_application - application factory wiring routes and state.

Routes:
    * GET  /airports            - batch ICAO lookup (``?icaos=LLBG,EGLL``).
    * GET  /airports/search     - ICAO prefix / name search (``?q=heath``).
    * POST /departures/{icao}   - board for a raw departures feed posted as JSON.
    * GET  /route               - great-circle segments for an airport pair.
    * POST /atc                 - staffed positions from a VATSIM snapshot.
    * GET/PUT /preferences      - saved aircraft and airports.

Fetching feeds from third-party APIs and polling them is left to the client;
the service only transforms what it is given.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from ..airports import AirportDirectory, clean_icao, get_airport_directory
from ..atc import positions_by_airport
from ..board import DepartureBoard
from ..configuration import get_settings
from ..display import TimeMode
from ..logging_utils import get_logger
from ..preferences import PreferenceStore, UserPreferences

LOGGER = get_logger(__name__)


def create_application(
    airports: Optional[AirportDirectory] = None,
    store: Optional[PreferenceStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    app = FastAPI(title="Flight Dispatcher", version="0.1.0")
    directory = airports if airports is not None else get_airport_directory()
    preference_store = store if store is not None else PreferenceStore(settings.resolved_preferences_file)

    @app.get("/airports")
    async def lookup_airports(icaos: str = Query("")) -> JSONResponse:
        """Resolve a comma separated list of ICAO codes."""

        try:
            records = directory.lookup_many(icaos.split(","))
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {code: record.as_dict() if record else None for code, record in records.items()}
        )

    @app.get("/airports/search")
    async def search_airports(q: str = Query("")) -> JSONResponse:
        results = directory.search(q)
        LOGGER.debug("Search %r returned %s airports", q, len(results))
        return JSONResponse(
            [
                {"icao": hit.icao, "name": hit.name, "city": hit.city, "country": hit.country}
                for hit in results
            ]
        )

    @app.post("/departures/{icao}")
    async def departures(
        icao: str,
        feed: Any = Body(...),
        mode: TimeMode = Query(TimeMode.LOCAL),
        hour12: bool = Query(True),
    ) -> JSONResponse:
        """Return the international departures board for a posted feed."""

        code = clean_icao(icao)
        if not code:
            raise HTTPException(
                status_code=400, detail="Invalid ICAO. Please enter 4 letters, e.g. LLBG."
            )
        preferences = preference_store.remember_airport(code)
        board = DepartureBoard(directory, preferences, segments=settings.route_segments)
        snapshot = board.build(code, feed, mode=mode, hour12=hour12)
        LOGGER.info("Board for %s has %s international departures", code, len(snapshot.lines))
        return JSONResponse(snapshot.as_dict())

    @app.get("/route")
    async def route(origin: str = Query(...), destination: str = Query(...)) -> JSONResponse:
        """Return antimeridian-safe polyline segments between two airports."""

        board = DepartureBoard(directory, segments=settings.route_segments)
        segments = board.route_path(origin, destination)
        if segments is None:
            raise HTTPException(status_code=404, detail="Unknown origin or destination airport")
        return JSONResponse(
            {
                "origin": origin.strip().upper(),
                "destination": destination.strip().upper(),
                "segments": [[list(point) for point in segment] for segment in segments],
            }
        )

    @app.post("/atc")
    async def atc(snapshot: Any = Body(...)) -> JSONResponse:
        return JSONResponse(positions_by_airport(snapshot))

    @app.get("/preferences")
    async def read_preferences() -> JSONResponse:
        return JSONResponse(preference_store.load().model_dump())

    @app.put("/preferences")
    async def write_preferences(preferences: UserPreferences) -> JSONResponse:
        saved = preference_store.save(preferences)
        LOGGER.info("Preferences updated; %s aircraft saved", len(saved.aircraft))
        return JSONResponse(saved.model_dump())

    return app
