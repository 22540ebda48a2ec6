from typing import Final

STAGE_COLLECTING: Final[str] = "collecting"
STAGE_FETCHING: Final[str] = "fetching-for-analysis"
STAGE_ANALYZING: Final[str] = "analyzing"
STAGE_PERSISTING: Final[str] = "persisting"
STAGE_ALERTING: Final[str] = "alerting"
STAGE_DONE: Final[str] = "done"

DEFAULT_ANALYSIS_WINDOW_HOURS: Final[int] = 1
