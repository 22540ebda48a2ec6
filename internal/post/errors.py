class ErrInvalidInput(Exception):
    pass


__all__ = ["ErrInvalidInput"]
