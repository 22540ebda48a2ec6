from .interface import IDigestUseCase
from .type import DigestInput, DigestContent, DigestView
from .errors import ErrInvalidDigestType, ErrDigestGenerationFailed
from .helpers import build_digest_input, build_digest_prompt, extract_digest_metadata
from .usecase.new import New as NewDigestUseCase

__all__ = [
    "IDigestUseCase",
    "DigestInput",
    "DigestContent",
    "DigestView",
    "ErrInvalidDigestType",
    "ErrDigestGenerationFailed",
    "build_digest_input",
    "build_digest_prompt",
    "extract_digest_metadata",
    "NewDigestUseCase",
]
