"""Straight-line asset depreciation"""

MS_PER_YEAR = 365 * 24 * 60 * 60 * 1000


def elapsed_years(purchase_date: int, now: int) -> int:
    """Whole years between two epoch-millisecond timestamps.

    A purchase date in the future counts as zero years.
    """
    elapsed = now - purchase_date
    if elapsed <= 0:
        return 0
    return elapsed // MS_PER_YEAR


def depreciated_value(
    approx_value: int,
    depreciation_rate: int,
    purchase_date: int,
    now: int,
) -> int:
    """Current value of an asset, never below zero.

    ``depreciation_rate`` is the percentage of ``approx_value`` lost per
    full year since ``purchase_date``.
    """
    years = elapsed_years(purchase_date, now)
    remaining_percent = 100 - depreciation_rate * years
    if remaining_percent <= 0:
        return 0
    return max(approx_value * remaining_percent // 100, 0)
