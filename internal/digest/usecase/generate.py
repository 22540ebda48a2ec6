from pkg.llm.llm import LLMError
from internal.model.timestamp import utc_now
from ..constant import DIGEST_SYSTEM_PROMPT
from ..errors import ErrDigestGenerationFailed
from ..helpers import (
    build_digest_input,
    build_digest_prompt,
    extract_digest_metadata,
    period_for,
)
from ..repository.option import CreateOptions


async def generate(self, digest_type: str) -> str:
    """Render a narrative digest over the current dashboard and store it.

    Raises:
        ErrInvalidDigestType: digest_type is neither daily nor weekly
        ErrDigestGenerationFailed: the model call failed
        RepositoryError: the digest could not be stored
    """
    now = utc_now()
    # Validate before touching the store or the model
    period_for(digest_type, now)

    dashboard = await self.dashboard_usecase.get_dashboard_data()
    data = build_digest_input(dashboard, digest_type, now)

    try:
        text = await self.llm.generate(DIGEST_SYSTEM_PROMPT, build_digest_prompt(data))
    except LLMError as exc:
        self.logger.error(f"internal.digest.usecase.generate: {exc}")
        raise ErrDigestGenerationFailed(str(exc)) from exc

    parsed = extract_digest_metadata(text)
    digest_id = await self.repository.create(
        CreateOptions(
            data={
                "digest_type": digest_type,
                "period_start": data.period_start,
                "period_end": data.period_end,
                "content": parsed.content,
                "summary": parsed.summary,
                "key_insights": parsed.key_insights,
            }
        )
    )

    self.logger.info(
        f"internal.digest.usecase.generate: stored {digest_type} digest {digest_id} "
        f"({len(parsed.key_insights)} insights, {data.post_count} posts)"
    )
    return digest_id
