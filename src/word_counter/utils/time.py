"""Time utilities for Word Counter.

Timestamps are reported in UTC with an explicit +00:00 offset.
"""

import pendulum


def current_utc() -> str:
    """Get current UTC timestamp in our standard format.

    Returns:
        Current UTC timestamp with explicit +00:00 offset
    """
    return pendulum.now("UTC").isoformat()
