"""401(k) deferral and employer match."""


def clamp_deferral(desired_rate: float, salary: float, annual_limit: float, catch_up: float = 0.0) -> float:
    """Employee pretax deferral for the year.

    The desired amount (rate * salary) is floored at zero and capped at the
    elective limit plus catch-up. An oversized rate silently truncates.
    """
    desired = desired_rate * salary
    cap = annual_limit + catch_up
    return min(max(0.0, desired), cap)


def employer_match(
    deferral_rate: float,
    match_per_dollar: float,
    match_ceiling_rate: float,
    salary: float,
) -> float:
    """Employer contribution: match_per_dollar on deferrals up to match_ceiling_rate of salary.

    Computed from the elected deferral *rate*, not the clamped dollar deferral.
    An employee whose rate pushes them past the elective limit still receives
    the full match for that rate.
    """
    return match_per_dollar * min(deferral_rate, match_ceiling_rate) * salary
