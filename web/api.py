from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from core.calculator import calculate_estimate
from core.export import export_inputs, parse_export
from core.models import EstimateResult, EstimatorInput
from core.phases import PhaseShare, phase_shares
from core.presets import Preset, get_preset, load_presets
from core.report import USAGE_NOTE, print_view, summary_lines
from core.rules import SLIDER_LIMITS, clamp_input

logger = logging.getLogger(__name__)

app = FastAPI(title="Construction Duration Estimator API", version="1.0.0")

# Якщо UI буде на іншому порту/домені — CORS тобі зекономить нерви
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # "input" може бути NaN/Infinity, які JSON не вміє записати
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


class EstimateResponse(BaseModel):
    inputs: dict[str, Any]
    result: EstimateResult
    phases: list[PhaseShare] = []
    summary: list[str] = []


class ExportText(BaseModel):
    text: str


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/defaults")
def defaults() -> dict[str, Any]:
    return EstimatorInput().export_dict()


@app.get("/limits")
def limits() -> dict[str, dict[str, float]]:
    return {k: {"min": lo, "max": hi, "step": step} for k, (lo, hi, step) in SLIDER_LIMITS.items()}


@app.get("/presets")
def presets() -> dict[str, Preset]:
    return load_presets()


@app.get("/presets/{preset_id}")
def preset(preset_id: str) -> Preset:
    try:
        return get_preset(preset_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/estimate", response_model=EstimateResponse)
def estimate(req: EstimatorInput = Body(...)) -> EstimateResponse:
    """
    Основний endpoint: приймає EstimatorInput (ключі aFloor/... або area_per_floor/...).
    hours/day, days/week і overlap затискаються до розрахунку.
    """
    req = clamp_input(req)
    try:
        result = calculate_estimate(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not result.output.duration_defined:
        logger.info("estimate requested with zero labour capacity")

    return EstimateResponse(
        inputs=req.export_dict(),
        result=result,
        phases=phase_shares(result.phases) if result.phases else [],
        summary=summary_lines(req, result),
    )


@app.post("/export", response_model=ExportText)
def export(req: EstimatorInput = Body(...)) -> ExportText:
    return ExportText(text=export_inputs(clamp_input(req)))


@app.post("/import")
def import_inputs(payload: ExportText) -> dict[str, Any]:
    try:
        return parse_export(payload.text).export_dict()
    except ValueError as e:
        logger.warning("rejected export text: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/print", response_class=PlainTextResponse)
def print_estimate(req: EstimatorInput = Body(...)) -> str:
    req = clamp_input(req)
    try:
        return print_view(req, calculate_estimate(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/usage")
def usage() -> dict[str, str]:
    return {"note": USAGE_NOTE}
