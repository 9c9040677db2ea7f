"""Batch analysis — many items concurrently, one failure never sinks the rest."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from metapixel.engine.analyzer import MetaFieldAnalyzer
from metapixel.engine.profiles import DESCRIPTION, TITLE
from metapixel.errors import MetaPixelError
from metapixel.models.requests import BatchItem
from metapixel.models.responses import BatchItemResult, FieldAnalysis

logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        msg = err["msg"].removeprefix("Value error, ")
        if msg not in messages:
            messages.append(msg)
    return "; ".join(messages)


def _echo_id(raw: Any) -> str | int | None:
    if isinstance(raw, dict):
        item_id = raw.get("id")
        if isinstance(item_id, (str, int)) and not isinstance(item_id, bool):
            return item_id
    return None


def analyze_item(raw: Any, analyzer: MetaFieldAnalyzer) -> BatchItemResult:
    """Validate and analyze one raw batch entry. Errors land in ``error``."""
    if not isinstance(raw, dict):
        return BatchItemResult(error="Item must be an object")

    try:
        item = BatchItem.model_validate(raw)
    except ValidationError as e:
        return BatchItemResult(id=_echo_id(raw), error=_validation_message(e))

    result = BatchItemResult(id=item.id)
    try:
        if item.title is not None:
            result.title = FieldAnalysis.from_result(analyzer.analyze_field(TITLE, item.title))
        if item.description is not None:
            result.description = FieldAnalysis.from_result(
                analyzer.analyze_field(DESCRIPTION, item.description)
            )
    except MetaPixelError as e:
        logger.warning("Batch item %r FAILED: %s", item.id, e)
        return BatchItemResult(id=item.id, error=str(e))
    return result


async def analyze_items(items: list[Any], analyzer: MetaFieldAnalyzer) -> list[BatchItemResult]:
    """Analyze every item on the default thread pool; results keep input order."""
    loop = asyncio.get_running_loop()
    futures = [loop.run_in_executor(None, analyze_item, raw, analyzer) for raw in items]
    outcomes = await asyncio.gather(*futures, return_exceptions=True)

    results: list[BatchItemResult] = []
    for raw, outcome in zip(items, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Batch item crashed: %s", outcome, exc_info=outcome)
            results.append(BatchItemResult(id=_echo_id(raw), error="Internal error analyzing item"))
        else:
            results.append(outcome)

    failed = sum(1 for r in results if r.error is not None)
    logger.info("Batch complete: %d items (%d failed)", len(results), failed)
    return results
