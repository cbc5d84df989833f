"""Generate iCalendar (.ics) documents from event descriptions."""

__version__ = "0.1.0"
