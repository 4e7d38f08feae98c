"""Recency bonus for ordering results within a search pass."""

MS_PER_MINUTE = 60 * 1000


def recency_bonus(
    last_accessed: float,
    now: float,
    max_bonus: float = 50.0,
    min_bonus: float = 5.0,
    full_bonus_minutes: float = 5.0,
    decay_minutes: float = 60.0,
) -> float:
    """Calculate a bonus that favours recently accessed records.

    Records accessed within ``full_bonus_minutes`` (or in the future) get
    ``max_bonus``; the bonus then decays linearly to zero at
    ``decay_minutes`` and never drops below ``min_bonus``.

    Args:
        last_accessed: Last access time in ms
        now: Reference time in ms
        max_bonus: Bonus for the most recent records
        min_bonus: Floor for older records
        full_bonus_minutes: Window that receives the full bonus
        decay_minutes: Age at which the linear decay reaches zero

    Returns:
        Bonus to add to a match score
    """
    age_minutes = (now - last_accessed) / MS_PER_MINUTE

    if age_minutes < full_bonus_minutes:
        return max_bonus
    if age_minutes < decay_minutes:
        return max(min_bonus, max_bonus * (1 - age_minutes / decay_minutes))
    return min_bonus
