"""Trade journal performance analytics.

Turns a trader's raw trade log into derived performance metrics: win
rate, profit factor, equity curve, drawdown, streaks, and time-based or
behavioural breakdowns.  Every function is a pure computation over an
in-memory trade collection supplied by a read-only trade store.
"""

__version__ = "0.1.0"
