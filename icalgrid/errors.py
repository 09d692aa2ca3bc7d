"""Exception types raised across icalgrid."""


class IcalGridError(Exception):
    """Base class for every icalgrid error."""


class ConfigError(IcalGridError, ValueError):
    """Configuration is missing, unreadable or invalid."""


class SourceLoadError(IcalGridError, RuntimeError):
    """A single calendar source could not be retrieved."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class CalendarParseError(IcalGridError, ValueError):
    """Raw calendar text could not be parsed into events."""


class RenderError(IcalGridError, RuntimeError):
    """A render pass cannot produce any output."""


class AllSourcesFailedError(RenderError):
    """Every configured source failed to load or parse."""

    def __init__(self, failed: list):
        names = ", ".join(failed) if failed else "<none configured>"
        super().__init__(f"no calendar could be loaded (failed: {names})")
        self.failed = list(failed)


class EmptyWindowError(RenderError):
    """The date window holds no days, so there is no grid to draw."""
