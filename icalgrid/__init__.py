"""icalgrid - merge iCalendar feeds into an HTML calendar grid."""

__version__ = "0.1.0"
