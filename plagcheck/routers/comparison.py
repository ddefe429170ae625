from functools import lru_cache
import logging

from fastapi import APIRouter, HTTPException

from plagcheck.config import MAX_INPUT_CHARS, COMPARE_CACHE_SIZE
from plagcheck.schemas.comparison_schemas import (
    CompareRequest, CompareResponse, ComparisonReport,
    TextStatsRequest, TextStats,
)
from plagcheck.utils.similarity_utils import compare
from plagcheck.utils.text_utils import word_count, char_count

router = APIRouter(tags=["comparison"])
logger = logging.getLogger(__name__)


@lru_cache(maxsize=COMPARE_CACHE_SIZE)
def cached_compare(source: str, target: str) -> ComparisonReport:
    return compare(source, target)


def _stats(text: str) -> TextStats:
    return TextStats(words=word_count(text), characters=char_count(text))


def _check_length(name: str, text: str) -> None:
    length = char_count(text)
    if length > MAX_INPUT_CHARS:
        logger.warning(f"⚠️  Rejected {name}: {length} chars exceeds limit of {MAX_INPUT_CHARS}")
        raise HTTPException(
            status_code=413,
            detail=f"{name} exceeds {MAX_INPUT_CHARS} characters (found {length}).",
        )


@router.post("/compare", response_model=CompareResponse)
def compare_texts(payload: CompareRequest):
    _check_length("source", payload.source)
    _check_length("target", payload.target)

    report = cached_compare(payload.source, payload.target)

    logger.info(
        f"🔍 Compared {report.total_sentences} target sentences: "
        f"{report.percentage}% similar, risk {report.risk.value}"
    )
    return CompareResponse(
        **report.model_dump(),
        source_stats=_stats(payload.source),
        target_stats=_stats(payload.target),
    )


@router.post("/text-stats", response_model=TextStats)
def text_stats(payload: TextStatsRequest):
    _check_length("text", payload.text)
    return _stats(payload.text)


@router.get("/health")
def health():
    return {"status": "ok"}
