# feedback_api/services/sentiment.py

POSITIVE_WORDS = ("great", "excellent", "wonderful", "amazing", "fantastic", "good", "clean", "friendly")
NEGATIVE_WORDS = ("bad", "terrible", "awful", "horrible", "dirty", "noisy", "poor", "disappointed")

BASELINE = 0.5
STEP = 0.1

def score_sentiment(text: str) -> float:
    """Keyword heuristic in [0, 1].

    Words match as substrings, so "good" also hits "goodbye". Each word
    counts once no matter how often it appears.
    """
    t = (text or "").lower()
    hits = sum(1 for w in POSITIVE_WORDS if w in t) - sum(1 for w in NEGATIVE_WORDS if w in t)
    score = BASELINE + STEP * hits
    return round(max(0.0, min(1.0, score)), 2)
