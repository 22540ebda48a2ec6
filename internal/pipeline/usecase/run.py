import time
import uuid
from typing import Awaitable, Optional, Sequence, TypeVar

from internal.alert import evaluate
from internal.analysis.type import AnalysisResult
from internal.model.post import Post
from ..constant import *
from ..type import PipelineResult

T = TypeVar("T")


async def run(self) -> PipelineResult:
    """Collect, store, analyze, persist and alert in one pass.

    Every stage is isolated: a failure is logged, recorded on the result as
    "<stage>: <message>" and the run moves on or ends early. Nothing is
    raised past this boundary.
    """
    result = PipelineResult(run_id=uuid.uuid4().hex)
    started = time.perf_counter()

    with self.logger.trace_context(result.run_id):
        self.logger.info("internal.pipeline.usecase.run: pipeline started")

        await _collect(self, result)

        posts = await _stage(
            self, result, STAGE_FETCHING, self.post_usecase.recent(self.window_hours)
        )
        if posts is not None and not posts:
            self.logger.info(
                f"internal.pipeline.usecase.run: no posts in the last {self.window_hours}h, "
                "skipping analysis"
            )
        elif posts:
            await _analyze(self, result, posts)

        result.duration_ms = int((time.perf_counter() - started) * 1000)
        self.logger.info(
            f"internal.pipeline.usecase.run: {STAGE_DONE} in {result.duration_ms}ms "
            f"(collected={result.collected}, analyzed={result.analyzed}, "
            f"alerts={result.alerts}, errors={len(result.errors)})"
        )

    return result


async def _collect(self, result: PipelineResult) -> None:
    collected = await _stage(
        self, result, STAGE_COLLECTING, self.collector_usecase.collect_all()
    )
    if collected is None:
        return

    saved = await _stage(self, result, STAGE_COLLECTING, self.post_usecase.save(collected))
    if saved is not None:
        # Newly stored posts only
        result.collected = saved.inserted
        self.logger.info(
            f"internal.pipeline.usecase.run: stored {saved.inserted} new posts "
            f"of {len(collected)} collected ({saved.skipped} skipped)"
        )


async def _analyze(self, result: PipelineResult, posts: Sequence[Post]) -> None:
    analysis: Optional[AnalysisResult] = await _stage(
        self, result, STAGE_ANALYZING, self.analysis_usecase.analyze(posts)
    )
    if analysis is None:
        return

    batch_id = await _stage(
        self, result, STAGE_PERSISTING, self.insight_usecase.save_batch(analysis, posts)
    )
    if batch_id is None:
        return
    result.analyzed = len(posts)

    alerts = await _stage(self, result, STAGE_ALERTING, _alert(self, analysis, batch_id))
    if alerts is not None:
        result.alerts = alerts


async def _alert(self, analysis: AnalysisResult, batch_id: str) -> int:
    candidates = evaluate(analysis)
    await self.alert_usecase.save(candidates, batch_id=batch_id)
    return len(candidates)


async def _stage(
    self, result: PipelineResult, stage: str, call: Awaitable[T]
) -> Optional[T]:
    try:
        return await call
    except Exception as exc:
        message = f"{stage}: {exc}"
        self.logger.exception(f"internal.pipeline.usecase.run: {message}")
        result.errors.append(message)
        return None
