"""GET/POST /api/analyze and POST /api/analyze/batch — meta pixel analysis."""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from metapixel.dependencies import get_analyzer
from metapixel.engine.analyzer import MetaFieldAnalyzer
from metapixel.engine.batch import analyze_items
from metapixel.engine.profiles import DESCRIPTION, TITLE
from metapixel.models.requests import BatchAnalyzeRequest, MetaFields
from metapixel.models.responses import AnalyzeResponse, BatchAnalyzeResponse, FieldAnalysis

router = APIRouter()
logger = logging.getLogger(__name__)

_MISSING_FIELDS = "Please provide either a title or description parameter"
_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def body_fields(request: Request) -> MetaFields:
    """Title/description from a JSON or form-encoded body. No body means no fields."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        data: Any = dict(form)
    else:
        raw = await request.body()
        if not raw.strip():
            return MetaFields()
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {e}"}]
            ) from e

    try:
        return MetaFields.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


def batch_items(payload: Annotated[Any, Body()]) -> list[Any]:
    """Accept either a bare array of items or ``{"items": [...]}``."""
    if isinstance(payload, list):
        return payload
    try:
        return BatchAnalyzeRequest.model_validate(payload).items
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


def _analyze_fields(fields: MetaFields, analyzer: MetaFieldAnalyzer) -> AnalyzeResponse | JSONResponse:
    if fields.title is None and fields.description is None:
        return JSONResponse(status_code=400, content={"error": _MISSING_FIELDS})

    response = AnalyzeResponse()
    if fields.title is not None:
        response.title = FieldAnalysis.from_result(analyzer.analyze_field(TITLE, fields.title))
    if fields.description is not None:
        response.description = FieldAnalysis.from_result(
            analyzer.analyze_field(DESCRIPTION, fields.description)
        )
    return response


@router.get("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
def analyze_query(
    fields: Annotated[MetaFields, Query()],
    analyzer: MetaFieldAnalyzer = Depends(get_analyzer),
) -> AnalyzeResponse | JSONResponse:
    return _analyze_fields(fields, analyzer)


@router.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
def analyze_body(
    fields: MetaFields = Depends(body_fields),
    analyzer: MetaFieldAnalyzer = Depends(get_analyzer),
) -> AnalyzeResponse | JSONResponse:
    return _analyze_fields(fields, analyzer)


@router.post(
    "/analyze/batch",
    response_model=BatchAnalyzeResponse,
    response_model_exclude_none=True,
)
async def analyze_batch(
    items: list[Any] = Depends(batch_items),
    analyzer: MetaFieldAnalyzer = Depends(get_analyzer),
) -> BatchAnalyzeResponse:
    start = time.perf_counter()
    results = await analyze_items(items, analyzer)
    elapsed = (time.perf_counter() - start) * 1000

    logger.debug("Batch of %d items analyzed in %.1fms", len(results), elapsed)

    return BatchAnalyzeResponse(
        results=results,
        count=len(results),
        completed_at=datetime.now(timezone.utc),
    )
