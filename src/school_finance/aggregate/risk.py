"""Heuristic risk indices (0-100) computed from aggregated figures.

Each index is a step function of one diagnostic ratio and never decreases
as that ratio grows.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from school_finance.models import Donor, RiskRadar, Totals

# (minimum ratio %, score), checked top-down; below every bracket scores FLOOR_SCORE.
SOURCE_DEPENDENCE_LADDER = ((70.0, 90), (50.0, 70), (30.0, 40))
DONOR_CONCENTRATION_LADDER = ((80.0, 90), (60.0, 70), (40.0, 40))
FLOOR_SCORE = 10

# escalating expense types -> score
ESCALATION_SCORES = {3: 100, 2: 75, 1: 40}
ESCALATION_STEP = 1.1
TOP_DONORS = 3


def ladder_score(ratio: float, ladder: Sequence[tuple[float, int]], floor: int = FLOOR_SCORE) -> int:
    for threshold, score in ladder:
        if ratio >= threshold:
            return score
    return floor


def source_dependence_ratio(subscriptions: float, donations: float) -> float:
    """Share (%) of income coming from the larger of the two income sources."""
    income = subscriptions + donations
    if income <= 0:
        return 0.0
    return max(subscriptions, donations) / income * 100.0


def donor_concentration_ratio(donors: Sequence[Donor]) -> float:
    """Share (%) of all donations given by the three largest donations."""
    total = sum((d.amount for d in donors), 0.0)
    if not donors or total <= 0:
        return 0.0
    # sorted() is stable: equal amounts keep sheet order
    ranked = sorted(donors, key=lambda d: d.amount, reverse=True)
    top = sum((d.amount for d in ranked[:TOP_DONORS]), 0.0)
    return top / total * 100.0


def is_escalating(series: Sequence[float], step: float = ESCALATION_STEP) -> bool:
    """True if two consecutive month-over-month rises above `step` occur.

    A rise is only considered when both earlier months are strictly positive.
    """
    for i in range(2, len(series)):
        two_ago, last, current = series[i - 2], series[i - 1], series[i]
        if last > 0 and two_ago > 0 and current > last * step and last > two_ago * step:
            return True
    return False


def count_escalating_types(series_by_type: Mapping[str, Sequence[float]]) -> int:
    """Number of expense types with at least one escalating run."""
    return sum(1 for series in series_by_type.values() if is_escalating(series))


def escalation_score(escalating_types: int) -> int:
    if escalating_types >= 3:
        return ESCALATION_SCORES[3]
    return ESCALATION_SCORES.get(escalating_types, 0)


def compute_risk_radar(
    totals: Totals,
    donors: Iterable[Donor],
    series_by_type: Mapping[str, Sequence[float]],
) -> RiskRadar:
    """Compute the three risk indices.

    Args:
        totals: Year totals (subscriptions and donations are used).
        donors: Donor records, for the top-donor share.
        series_by_type: Twelve-month series per expense type.

    Returns:
        `RiskRadar` with source dependence, invoice escalation and donor
        concentration scores.
    """
    dependence = source_dependence_ratio(totals.subscriptions, totals.donations)
    concentration = donor_concentration_ratio(list(donors))

    return RiskRadar(
        source_dependence=ladder_score(dependence, SOURCE_DEPENDENCE_LADDER),
        invoice_escalation=escalation_score(count_escalating_types(series_by_type)),
        donor_concentration=ladder_score(concentration, DONOR_CONCENTRATION_LADDER),
    )
