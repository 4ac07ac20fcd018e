"""Custom exception hierarchy for the analytics engine."""


class AnalyticsError(Exception):
    """Base exception for all analytics errors."""


# --- Configuration ---
class ConfigError(AnalyticsError):
    """Invalid or missing configuration."""


# --- Data ---
class DataError(AnalyticsError):
    """Trade data integrity error."""


class MalformedTradeDateError(DataError, ValueError):
    """``trade_date`` is not an exact, zero-padded ``YYYY-MM-DD`` date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"trade_date must be a zero-padded YYYY-MM-DD calendar date, got {value!r}"
        )


class MalformedTradeError(DataError):
    """A raw store record could not be converted into a Trade."""

    def __init__(self, record_id: object, reason: str):
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Trade record [{record_id}]: {reason}")
