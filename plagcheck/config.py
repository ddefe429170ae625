import os
from dotenv import load_dotenv

load_dotenv()

# ───── Similarity thresholds ─────
SAME_THRESHOLD = 0.8
SIMILAR_THRESHOLD = 0.5
PERFECT_MATCH_SCORE = 1.0

# ───── Risk breakpoints (percent) ─────
HIGH_RISK_PERCENT = 80
MEDIUM_RISK_PERCENT = 50

# ───── Service limits ─────
MAX_INPUT_CHARS = int(os.getenv("MAX_INPUT_CHARS", "20000"))
COMPARE_CACHE_SIZE = int(os.getenv("COMPARE_CACHE_SIZE", "128"))

# ───── CORS ─────
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
