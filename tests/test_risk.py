import pytest

from kindred.engine.risk import MoodEntry, Phq9Result, UserSignal, compute_risk_scores
from kindred.engine.phq9 import phq9_severity, score_phq9


def moods(*scores):
    return [MoodEntry(mood_score=s) for s in scores]

def test_defaults():
    s = compute_risk_scores(UserSignal())
    # streak 0, no messages, no assessments; active today
    assert s.attrition_risk == 0.6
    assert s.relapse_risk == 0.1
    assert s.crisis_risk == 0.0
    assert s.engagement_score == 0.6
    assert s.factors == ["Low engagement streak"]
    assert compute_risk_scores().as_dict() == s.as_dict()

def test_attrition_example():
    s = compute_risk_scores(UserSignal(days_since_last_active=10, streak=1, total_messages=2, assessment_count=0))
    assert s.attrition_risk == 1.0
    assert "10 days since last login" in s.factors
    assert "Low engagement streak" in s.factors

def test_q9_with_empty_trend():
    s = compute_risk_scores(UserSignal(latest_phq9=Phq9Result(total_score=5, q9=2)))
    assert s.crisis_risk == 0.6

def test_crisis_risk_combines_q9_and_last_mood():
    s = compute_risk_scores(UserSignal(latest_phq9=Phq9Result(total_score=3, q9=1), mood_trend=moods(7, 6, 2)))
    assert s.crisis_risk == 0.6
    s = compute_risk_scores(UserSignal(latest_phq9=Phq9Result(total_score=3, q9=3), mood_trend=moods(1)))
    assert s.crisis_risk == 0.9

def test_missing_last_mood_counts_as_neutral():
    s = compute_risk_scores(UserSignal(mood_trend=moods(None)))
    assert s.crisis_risk == 0.0

@pytest.mark.parametrize("total,expected", [(9, 0.1), (10, 0.3), (15, 0.45), (20, 0.6), (27, 0.6)])
def test_relapse_uses_highest_phq9_band_only(total, expected):
    s = compute_risk_scores(UserSignal(latest_phq9=Phq9Result(total_score=total, q9=0)))
    assert s.relapse_risk == expected

def test_relapse_mood_average_needs_three_entries():
    assert compute_risk_scores(UserSignal(mood_trend=moods(1, 1))).relapse_risk == 0.1
    assert compute_risk_scores(UserSignal(mood_trend=moods(9, 3, 3, 3))).relapse_risk == 0.4
    assert compute_risk_scores(UserSignal(mood_trend=moods(1, 5, 5, 5))).relapse_risk == 0.2
    assert compute_risk_scores(UserSignal(mood_trend=moods(6, 6, 6))).relapse_risk == 0.1

def test_relapse_worst_case():
    s = compute_risk_scores(UserSignal(latest_phq9=Phq9Result(total_score=27, q9=3), mood_trend=moods(1, 1, 1)))
    assert s.relapse_risk == 0.9
    assert "High severity (PHQ-9)" in s.factors
    assert "Declining clinical trend" in s.factors

def test_engagement():
    s = compute_risk_scores(UserSignal(streak=7, total_messages=20, assessment_count=2, days_since_last_active=0))
    assert s.engagement_score == 1.0
    s = compute_risk_scores(UserSignal(streak=3, days_since_last_active=2))
    assert s.engagement_score == 0.7

def test_factor_order_and_independence():
    s = compute_risk_scores(UserSignal(
        days_since_last_active=4,
        streak=0,
        latest_phq9=Phq9Result(total_score=16, q9=0),
        mood_trend=moods(4, 5, 5),
    ))
    # average 4.67 < 5 adds a factor, though it only adds 0.1 to relapse
    assert s.factors == [
        "4 days since last login",
        "Low engagement streak",
        "High severity (PHQ-9)",
        "Declining clinical trend",
    ]
    assert s.relapse_risk == 0.55

@pytest.mark.parametrize("signal", [
    UserSignal(streak=-5, total_messages=-1, assessment_count=-3, days_since_last_active=-2),
    UserSignal(days_since_last_active=10_000, streak=10_000, total_messages=10_000, assessment_count=10_000),
    UserSignal(latest_phq9=Phq9Result(total_score=99, q9=9), mood_trend=moods(-4, -4, -4)),
    UserSignal(mood_trend=moods(100, 100, 100)),
])
def test_scores_are_bounded(signal):
    d = compute_risk_scores(signal).as_dict()
    for key in ("attritionRisk", "relapseRisk", "crisisRisk", "engagementScore"):
        assert 0.0 <= d[key] <= 1.0

def test_scoring_is_idempotent():
    signal = UserSignal(days_since_last_active=5, streak=2, latest_phq9=Phq9Result(total_score=12, q9=1), mood_trend=moods(3, 4, 2))
    assert compute_risk_scores(signal) == compute_risk_scores(signal)
    assert signal.mood_trend == moods(3, 4, 2)

def test_phq9_from_items():
    r = Phq9Result.from_items([1, 1, 1, 1, 1, 1, 1, 1, 2])
    assert r.total_score == 10
    assert r.q9 == 2

def test_missing_mood_scores_leave_trend_unknown():
    s = compute_risk_scores(UserSignal(streak=5, mood_trend=[MoodEntry(mood_score=None)] * 3))
    assert s.relapse_risk == 0.1
    assert s.crisis_risk == 0.0
    assert s.factors == []

def test_one_missing_score_in_window_skips_average():
    s = compute_risk_scores(UserSignal(streak=5, mood_trend=moods(1, 1, 1, None, 2)))
    assert s.relapse_risk == 0.1
    assert "Declining clinical trend" not in s.factors
    assert s.crisis_risk == 0.3

@pytest.mark.parametrize("total,label", [
    (0, "Minimal"), (4, "Minimal"), (5, "Mild"), (9, "Mild"), (10, "Moderate"), (14, "Moderate"),
    (15, "Moderately Severe"), (19, "Moderately Severe"), (20, "Severe"), (27, "Severe"),
])
def test_phq9_severity(total, label):
    assert phq9_severity(total) == label

def test_score_phq9_validates_items():
    assert score_phq9([3] * 9) == (27, "Severe")
    with pytest.raises(ValueError):
        score_phq9([1] * 8)
    with pytest.raises(ValueError):
        score_phq9([0] * 8 + [4])
