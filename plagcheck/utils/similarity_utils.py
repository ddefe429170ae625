import logging
from typing import FrozenSet, Iterable, List

from plagcheck.config import (
    SAME_THRESHOLD,
    SIMILAR_THRESHOLD,
    PERFECT_MATCH_SCORE,
    HIGH_RISK_PERCENT,
    MEDIUM_RISK_PERCENT,
)
from plagcheck.schemas.comparison_schemas import (
    Category, RiskLevel, ClassifiedSentence, ComparisonReport
)
from plagcheck.utils.text_utils import segment, tokenize

logger = logging.getLogger(__name__)


def sentence_similarity(a: FrozenSet[str], b: FrozenSet[str]) -> float:
    """Dice coefficient of two token sets; 0.0 when both are empty."""
    denom = len(a) + len(b)
    if not denom:
        return 0.0
    return 2 * len(a & b) / denom


def _best_score(target_tokens: FrozenSet[str], source_tokens: Iterable[FrozenSet[str]]) -> float:
    best = 0.0
    for tokens in source_tokens:
        score = sentence_similarity(target_tokens, tokens)
        if score > best:
            best = score
        if best == PERFECT_MATCH_SCORE:
            break
    return best


def best_match(target: str, source_sentences: List[str]) -> float:
    """
    Highest Dice score between `target` and any of `source_sentences`.
    Scanning stops at the first perfect match.
    """
    return _best_score(tokenize(target), (tokenize(s) for s in source_sentences))


def classify(score: float) -> Category:
    if score >= SAME_THRESHOLD:
        return Category.SAME
    if score >= SIMILAR_THRESHOLD:
        return Category.SIMILAR
    return Category.UNIQUE


def risk_level(percentage: int) -> RiskLevel:
    if percentage >= HIGH_RISK_PERCENT:
        return RiskLevel.HIGH
    if percentage >= MEDIUM_RISK_PERCENT:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def similarity_percentage(matched: int, total: int) -> int:
    """round(100 * matched / total) with halves rounded up, in integers."""
    if total <= 0:
        return 0
    return (200 * matched + total) // (2 * total)


def compare(source: str, target: str) -> ComparisonReport:
    """
    Classify every sentence of `target` against the sentences of `source`
    and summarise the counts into a report.
    """
    source_sents = segment(source)
    target_sents = segment(target)
    logger.debug(f"Segmented {len(source_sents)} source / {len(target_sents)} target sentences")

    sentences: List[ClassifiedSentence] = []
    counts = {Category.SAME: 0, Category.SIMILAR: 0, Category.UNIQUE: 0}

    if source_sents:
        source_tokens = [tokenize(s) for s in source_sents]
        for sent in target_sents:
            score = _best_score(tokenize(sent), source_tokens)
            category = classify(score)
            counts[category] += 1
            sentences.append(ClassifiedSentence(
                text=sent,
                category=category,
                score=score,
                display_text=f"{sent}.",
            ))

    total = len(sentences)
    percentage = similarity_percentage(counts[Category.SAME] + counts[Category.SIMILAR], total)
    report = ComparisonReport(
        percentage=percentage,
        originality=max(0, 100 - percentage),
        same_sentences=counts[Category.SAME],
        similar_sentences=counts[Category.SIMILAR],
        unique_sentences=counts[Category.UNIQUE],
        risk=risk_level(percentage),
        sentences=tuple(sentences),
    )
    logger.debug(
        f"Result: {percentage}% similar (same={report.same_sentences}, "
        f"similar={report.similar_sentences}, unique={report.unique_sentences}, risk={report.risk.value})"
    )
    return report
