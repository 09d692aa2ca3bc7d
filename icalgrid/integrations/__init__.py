"""Feed retrieval and iCalendar parsing."""
