from __future__ import annotations

import pytest

from school_finance.aggregate.risk import (
    DONOR_CONCENTRATION_LADDER,
    SOURCE_DEPENDENCE_LADDER,
    compute_risk_radar,
    count_escalating_types,
    donor_concentration_ratio,
    escalation_score,
    is_escalating,
    ladder_score,
    source_dependence_ratio,
)
from school_finance.models import Donor, Totals


def _totals(subscriptions: float, donations: float) -> Totals:
    return Totals(
        student_count=0,
        subscriptions=subscriptions,
        donations=donations,
        salaries=0,
        general_expenses=0,
        expenses=0,
        income=subscriptions + donations,
        net_profit=subscriptions + donations,
    )


@pytest.mark.parametrize(
    "ratio,score",
    [(100.0, 90), (70.0, 90), (69.9, 70), (50.0, 70), (30.0, 40), (29.9, 10), (0.0, 10)],
)
def test_source_dependence_ladder(ratio: float, score: int) -> None:
    assert ladder_score(ratio, SOURCE_DEPENDENCE_LADDER) == score


@pytest.mark.parametrize(
    "ratio,score",
    [(95.2, 90), (80.0, 90), (79.9, 70), (60.0, 70), (40.0, 40), (39.9, 10)],
)
def test_donor_concentration_ladder(ratio: float, score: int) -> None:
    assert ladder_score(ratio, DONOR_CONCENTRATION_LADDER) == score


def test_source_dependence_ratio() -> None:
    assert source_dependence_ratio(75.0, 25.0) == 75.0
    assert source_dependence_ratio(0.0, 0.0) == 0.0


def test_donor_concentration_top_three_of_four() -> None:
    donors = [Donor(amount=a) for a in (5000, 50000, 20000, 30000)]
    ratio = donor_concentration_ratio(donors)
    assert ratio == pytest.approx(100000 / 105000 * 100)

    radar = compute_risk_radar(_totals(0.0, 105000.0), donors, {})
    assert radar.donor_concentration == 90


def test_donor_concentration_without_donations() -> None:
    assert donor_concentration_ratio([]) == 0.0
    assert donor_concentration_ratio([Donor(amount=0)]) == 0.0


def test_escalation_counted_once_per_type() -> None:
    series = [0, 0, 100, 120, 150, 0, 100, 120, 150, 200, 0, 0]
    assert is_escalating(series)
    assert count_escalating_types({"صيانة": series}) == 1


def test_escalation_needs_two_strict_rises_over_ten_percent() -> None:
    assert not is_escalating([100, 110, 121] + [0] * 9)  # exactly 10% is not enough
    assert not is_escalating([0, 100, 200] + [0] * 9)  # first month must be positive
    assert not is_escalating([100, 200, 210] + [0] * 9)
    assert is_escalating([0] * 9 + [100, 111, 123])


def test_escalation_score_steps() -> None:
    assert [escalation_score(n) for n in range(6)] == [0, 40, 75, 100, 100, 100]


def test_risk_radar_floor_values_for_empty_input() -> None:
    radar = compute_risk_radar(_totals(0.0, 0.0), [], {})
    assert radar.source_dependence == 10
    assert radar.invoice_escalation == 0
    assert radar.donor_concentration == 10
