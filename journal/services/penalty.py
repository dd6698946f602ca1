"""Penalty policy for the hour after a losing hour.

Two related numbers come out of the previous hour's balance:

* the *required minimum* is the floor suggested to the trader for the
  current hour: the KPI normally, or the loss plus twice the KPI after a loss;
* the *penalty* is what gets stored on a session: the same surcharge after a
  loss, but 0 otherwise.

Both are pure and are recomputed on every write since they depend on the
previous hour's session, which can change.
"""


def is_loss(balance: float | None) -> bool:
    """Strictly negative balances are losses; breakeven is not."""
    return balance is not None and balance < 0


def calculate_penalty(previous_loss: float, kpi: float) -> float:
    return abs(previous_loss) + 2 * kpi


def compute_required_minimum(previous_balance: float | None, kpi: float) -> float:
    """Minimum acceptable balance for an hour given the hour before it.

    ``previous_balance`` is None when there is no previous session (hour 0 or
    an unrecorded hour).
    """
    if is_loss(previous_balance):
        return calculate_penalty(previous_balance, kpi)
    return kpi


def compute_penalty(previous_balance: float | None, kpi: float) -> float:
    """Stored penalty for a session; 0 unless the previous hour lost."""
    if is_loss(previous_balance):
        return calculate_penalty(previous_balance, kpi)
    return 0.0
