from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    SAME = "Same"
    SIMILAR = "Similar"
    UNIQUE = "Unique"


class RiskLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ClassifiedSentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    category: Category
    score: float        # best-match Dice score, 0–1
    display_text: str   # text + "." as rendered by the frontend


class ComparisonReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage: int     # 0–100
    originality: int    # 100 - percentage
    same_sentences: int
    similar_sentences: int
    unique_sentences: int
    risk: RiskLevel
    sentences: Tuple[ClassifiedSentence, ...] = ()

    @property
    def total_sentences(self) -> int:
        return self.same_sentences + self.similar_sentences + self.unique_sentences


# ---- Request / response ----

class CompareRequest(BaseModel):
    source: str
    target: str


class TextStatsRequest(BaseModel):
    text: str


class TextStats(BaseModel):
    words: int
    characters: int


class CompareResponse(ComparisonReport):
    source_stats: TextStats
    target_stats: TextStats
