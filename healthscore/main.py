"""FastAPI application for business health analyses."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from healthscore.benchmarks.loader import load_benchmarks
from healthscore.benchmarks.schema import DEFAULT_BENCHMARKS, BenchmarkValues
from healthscore.config.settings import get_settings
from healthscore.engine.calculator import HealthCalculator
from healthscore.engine.serialization import result_to_dict, results_to_dicts
from healthscore.storage import AnalysisRepository, JsonFileStorage, StorageError
from healthscore.validation.validator import InputValidationError, validate_business_input

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Business Health Score API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = HealthCalculator()


class CreateAnalysisRequest(BaseModel):
    input: dict[str, Any]
    annual_revenue: Optional[float] = Field(default=None, ge=0)


@lru_cache()
def get_repository() -> AnalysisRepository:
    """Repository backed by JSON files under the configured data directory."""
    return AnalysisRepository(
        JsonFileStorage(settings.data_dir),
        history_limit=settings.history_limit,
    )


@lru_cache()
def get_base_benchmarks() -> BenchmarkValues:
    """Defaults plus the overrides from HEALTHSCORE_BENCHMARKS_FILE, if set."""
    return load_benchmarks(settings.benchmarks_file)


@app.exception_handler(InputValidationError)
async def input_validation_error_handler(request: Request, exc: InputValidationError):
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Operation failed"})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/benchmarks")
async def get_benchmarks(
    repo: AnalysisRepository = Depends(get_repository),
    base: BenchmarkValues = Depends(get_base_benchmarks),
):
    """Default benchmarks and the ones applied with the current user settings."""
    user_settings = await repo.load_settings()
    return {
        "defaults": DEFAULT_BENCHMARKS.model_dump(),
        "effective": user_settings.effective_benchmarks(base).model_dump(),
    }


@app.post("/api/analyses")
async def create_analysis(
    body: CreateAnalysisRequest,
    repo: AnalysisRepository = Depends(get_repository),
    base: BenchmarkValues = Depends(get_base_benchmarks),
):
    """Validate input, score it, and store the result as current + history."""
    input_data = validate_business_input(body.input)
    user_settings = await repo.load_settings()
    annual_revenue = (
        body.annual_revenue
        if body.annual_revenue is not None
        else settings.fallback_annual_revenue
    )
    result = engine.calculate(
        input_data,
        user_settings.effective_benchmarks(base),
        external_annual_revenue=annual_revenue,
    )
    await repo.save_analysis(result)
    return result_to_dict(result)


@app.get("/api/analyses")
async def list_analyses(repo: AnalysisRepository = Depends(get_repository)):
    """Analysis history, newest first."""
    return {"analyses": results_to_dicts(await repo.load_history())}


@app.delete("/api/analyses", status_code=204)
async def clear_analyses(repo: AnalysisRepository = Depends(get_repository)):
    await repo.clear_history()
    return Response(status_code=204)


@app.get("/api/analyses/current")
async def get_current_analysis(repo: AnalysisRepository = Depends(get_repository)):
    result = await repo.load_current_analysis()
    if result is None:
        raise HTTPException(status_code=404, detail="No analysis yet")
    return result_to_dict(result)


@app.get("/api/analyses/{analysis_id}")
async def get_analysis(analysis_id: str, repo: AnalysisRepository = Depends(get_repository)):
    result = await repo.get_from_history(analysis_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return result_to_dict(result)


@app.delete("/api/analyses/{analysis_id}", status_code=204)
async def delete_analysis(analysis_id: str, repo: AnalysisRepository = Depends(get_repository)):
    if not await repo.delete_from_history(analysis_id):
        raise HTTPException(status_code=404, detail="Analysis not found")
    return Response(status_code=204)


@app.get("/api/settings")
async def get_app_settings(repo: AnalysisRepository = Depends(get_repository)):
    user_settings = await repo.load_settings()
    return user_settings.model_dump(mode="json", by_alias=True)


@app.put("/api/settings")
async def update_app_settings(
    changes: dict[str, Any],
    repo: AnalysisRepository = Depends(get_repository),
):
    """Partial update; unknown or out-of-range values are rejected with 422."""
    updated = await repo.update_settings(changes)
    return updated.model_dump(mode="json", by_alias=True)


@app.post("/api/settings/reset")
async def reset_app_settings(repo: AnalysisRepository = Depends(get_repository)):
    defaults = await repo.reset_settings()
    return defaults.model_dump(mode="json", by_alias=True)


@app.get("/api/export")
async def export_all(repo: AnalysisRepository = Depends(get_repository)):
    return Response(content=await repo.export_data(), media_type="application/json")


@app.delete("/api/data", status_code=204)
async def delete_all_data(repo: AnalysisRepository = Depends(get_repository)):
    await repo.clear_all_data()
    return Response(status_code=204)


def run() -> None:
    """Serve the API with uvicorn (``healthscore-api`` console script)."""
    uvicorn.run(
        "healthscore.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
