from typing import List, Sequence, Tuple

PHQ9_ITEMS = 9
PHQ9_MAX_ITEM = 3

# (upper bound inclusive, label)
SEVERITY_BANDS: List[Tuple[int, str]] = [
    (4, "Minimal"),
    (9, "Mild"),
    (14, "Moderate"),
    (19, "Moderately Severe"),
]
SEVERITY_TOP = "Severe"

def phq9_severity(total: int) -> str:
    for upper, label in SEVERITY_BANDS:
        if total <= upper:
            return label
    return SEVERITY_TOP

def score_phq9(items: Sequence[int]) -> Tuple[int, str]:
    if len(items) != PHQ9_ITEMS:
        raise ValueError(f"PHQ-9 expects {PHQ9_ITEMS} item scores, got {len(items)}")
    if any(i < 0 or i > PHQ9_MAX_ITEM for i in items):
        raise ValueError("PHQ-9 item scores must be between 0 and 3")
    total = sum(int(i) for i in items)
    return total, phq9_severity(total)
