# modules/review/config.py


class ReviewPolicyConfig:
    """Day offsets of the staged review policy."""
    INITIAL_INTERVAL_DAYS = 7
    # Interval granted by a pass, keyed by the stage the entry was in
    PASS_INTERVAL_DAYS = {0: 28, 1: 56, 2: 56}
    FAIL_INTERVAL_DAYS = 2
    MAX_STAGE = 2
    POSTPONE_DAYS = 1
    MAX_POSTPONE_DAYS = 3650
