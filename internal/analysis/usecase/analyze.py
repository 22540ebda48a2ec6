import time
from typing import Sequence

from pkg.llm.llm import LLMError
from internal.model.post import Post
from ..constant import ANALYSIS_SYSTEM_PROMPT
from ..errors import ErrAnalysisFailed, ErrInvalidInput, ErrMalformedAnalysisPayload
from ..helpers import build_user_prompt, parse_analysis_payload
from ..type import AnalysisResult


async def analyze(self, posts: Sequence[Post]) -> AnalysisResult:
    """Submit one batch to the model exactly once and decode its answer.

    Raises:
        ErrInvalidInput: the batch is empty
        ErrAnalysisFailed: the generation call failed or timed out
        ErrMalformedAnalysisPayload: the answer is not a valid analysis document
    """
    if not posts:
        raise ErrInvalidInput("posts must not be empty")

    prompt = build_user_prompt(posts, self.content_char_budget)
    start_time = time.perf_counter()

    try:
        raw_response = await self.llm.generate(ANALYSIS_SYSTEM_PROMPT, prompt)
    except LLMError as exc:
        self.logger.error(f"internal.analysis.usecase.analyze: {exc}")
        raise ErrAnalysisFailed(str(exc)) from exc

    try:
        payload = parse_analysis_payload(raw_response)
    except ErrMalformedAnalysisPayload as exc:
        self.logger.error(f"internal.analysis.usecase.analyze: {exc}")
        raise

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    self.logger.info(
        f"internal.analysis.usecase.analyze: {len(posts)} posts, "
        f"{len(payload.themes)} themes, {len(payload.alerts)} model alerts in {elapsed_ms}ms"
    )

    return AnalysisResult(
        **payload.model_dump(),
        raw_response=raw_response,
        processing_time_ms=elapsed_ms,
    )
