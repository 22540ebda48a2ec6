class ErrInvalidDigestType(Exception):
    pass


class ErrDigestGenerationFailed(Exception):
    pass


__all__ = ["ErrInvalidDigestType", "ErrDigestGenerationFailed"]
