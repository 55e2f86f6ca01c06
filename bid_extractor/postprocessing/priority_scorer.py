"""
Priority Scoring — rule-based parametric bid scorer.

Computes a 0-100 priority score by combining:
- Deadline proximity (tiered on days until the bid date)
- GC reputation (major GC list, partial credit for any named GC)
- Project value keywords (project / scope / location text)
- Data completeness (populated record fields)
- Attachments

Weights are configurable; the defaults reproduce the extension's popup.
"""
from datetime import date
from typing import List, Optional

import numpy as np

from bid_extractor.config.constants import HIGH_VALUE_KEYWORDS, MAJOR_GCS, PLACEHOLDER_VALUES
from bid_extractor.postprocessing.bid_date import parse_bid_date

# Default weights (overridable per component)
DEFAULT_WEIGHTS: dict = {
    "deadline": {
        "max_points": 40,
        # (days_until, points); None = any later date
        "tiers": [
            (0, 40), (1, 38), (2, 35), (3, 32), (5, 28),
            (7, 25), (14, 15), (30, 10), (None, 5),
        ],
    },
    "gc_reputation": {"max_points": 20, "major_gc_points": 20, "known_gc_points": 10},
    "project_value": {"max_points": 20, "points_per_keyword": 5},
    "data_completeness": {
        "max_points": 10,
        "points_per_field": 1.5,
        "fields": ["project", "gc", "bidDate", "location", "scope", "contact", "email"],
    },
    "attachments": {"max_points": 10, "points_per_attachment": 2},
    "max_score": 100,
    "levels": {
        "high": {"min_score": 70, "label": "HIGH"},
        "medium": {"min_score": 40, "label": "MED"},
        "low": {"label": "LOW"},
    },
}


class BidPriorityScorer:
    """
    Parametric bid priority scorer with configurable weights.

    Level thresholds:
        >= 70  → high    (HIGH)
        >= 40  → medium  (MED)
        <  40  → low     (LOW)
    """

    def __init__(
        self,
        weights: Optional[dict] = None,
        major_gcs: Optional[List[str]] = None,
        keywords: Optional[List[str]] = None,
    ):
        self.weights = {**DEFAULT_WEIGHTS, **(weights or {})}
        self.major_gcs = major_gcs if major_gcs is not None else list(MAJOR_GCS)
        self.keywords = keywords if keywords is not None else list(HIGH_VALUE_KEYWORDS)

    def score(self, record: dict, today: Optional[date] = None) -> dict:
        """
        Compute priority score and level for a bid record.

        Args:
            record: Bid record dict (camelCase fields, see BidRecord).
            today: Reference date for the deadline component (default: today).

        Returns:
            {
                "score": float,
                "value": "high" | "medium" | "low",
                "label": str,
                "signals": List[str],
            }
        """
        signals: List[str] = []
        raw_score = 0.0

        # 1. Deadline proximity
        bid_date = parse_bid_date(record.get("bidDate", ""))
        if bid_date is not None:
            days_until = (bid_date - (today or date.today())).days
            points = self.deadline_points(days_until)
            raw_score += points
            signals.append(f"deadline:{days_until}d")

        # 2. GC reputation
        gc_points = self.gc_points(record.get("gc", ""))
        if gc_points:
            raw_score += gc_points
            signals.append("major_gc" if gc_points == self.weights["gc_reputation"]["major_gc_points"] else "known_gc")

        # 3. Project value indicators
        project_text = " ".join(
            record.get(key, "") or "" for key in ("project", "scope", "location")
        )
        value_points = self.value_points(project_text)
        if value_points:
            raw_score += value_points
            signals.append(f"value_keywords:{value_points:g}")

        # 4. Data completeness
        raw_score += self.completeness_points(record)

        # 5. Attachments
        attachment_points = self.attachment_points(len(record.get("attachments") or []))
        if attachment_points:
            raw_score += attachment_points
            signals.append("attachments")

        final_score = float(np.clip(raw_score, 0.0, self.weights["max_score"]))
        value, label = self.level(final_score)

        return {
            "score": final_score,
            "value": value,
            "label": label,
            "signals": signals,
        }

    def deadline_points(self, days_until: int) -> int:
        for tier_days, points in self.weights["deadline"]["tiers"]:
            if tier_days is None or days_until <= tier_days:
                return points
        return 5

    def gc_points(self, gc_name: str) -> int:
        config = self.weights["gc_reputation"]
        if not gc_name or gc_name in PLACEHOLDER_VALUES:
            return 0
        gc_lower = gc_name.lower()
        if any(gc.lower() in gc_lower for gc in self.major_gcs):
            return config["major_gc_points"]
        return config["known_gc_points"]

    def value_points(self, project_text: str) -> float:
        config = self.weights["project_value"]
        if not project_text.strip():
            return 0
        text_lower = project_text.lower()
        hits = sum(1 for keyword in self.keywords if keyword.lower() in text_lower)
        return min(hits * config["points_per_keyword"], config["max_points"])

    def completeness_points(self, record: dict) -> int:
        config = self.weights["data_completeness"]
        filled = sum(
            1 for name in config["fields"]
            if record.get(name) and record.get(name) not in PLACEHOLDER_VALUES
        )
        return min(int(filled * config["points_per_field"]), config["max_points"])

    def attachment_points(self, attachment_count: int) -> int:
        config = self.weights["attachments"]
        if attachment_count <= 0:
            return 0
        return min(attachment_count * config["points_per_attachment"], config["max_points"])

    def level(self, score: float) -> tuple:
        levels = self.weights["levels"]
        if score >= levels["high"]["min_score"]:
            return "high", levels["high"]["label"]
        if score >= levels["medium"]["min_score"]:
            return "medium", levels["medium"]["label"]
        return "low", levels["low"]["label"]


# Module-level default scorer instance
priority_scorer = BidPriorityScorer()
