from typing import Final

CONTENT_SNIPPET_LENGTH: Final[int] = 280
DEFAULT_MAX_IDS: Final[int] = 50
