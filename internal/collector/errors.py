class ErrSourceUnavailable(Exception):
    """Raised when a sub-source request fails or returns a non-success status."""

    pass


__all__ = ["ErrSourceUnavailable"]
