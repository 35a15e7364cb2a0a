# errors.py
"""Error taxonomy for the tracker. The HTTP layer maps these to status codes."""


class TrackerError(Exception):
    code = "tracker_error"


class OutOfRangeError(TrackerError):
    code = "out_of_range"


class DuplicateForDayError(TrackerError):
    code = "duplicate_for_day"


class NotFoundError(TrackerError):
    code = "not_found"


class ConfigurationError(TrackerError):
    code = "configuration_error"


class StoreError(TrackerError):
    code = "store_error"
