class KhmerCalError(Exception):
    """Base error."""

class UnknownMonthSlug(KhmerCalError, KeyError):
    """Raised when a lunar month slug is not one of the 14 known names."""

    def __init__(self, slug: str):
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Unknown lunar month slug '{self.slug}'"

class LunarDateNotFound(KhmerCalError, LookupError):
    """Raised when the reverse search window holds no matching day."""

class InternalInvariantViolation(KhmerCalError, RuntimeError):
    """Raised on an impossible sexagesimal bucket or when no sotin reads zero degrees.

    Two zero-degree sotins are not an error; the later one is used.
    """
