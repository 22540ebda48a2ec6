from typing import Sequence

from internal.collector.type import CollectedPost
from ..type import SaveOutput
from ..repository.option import UpsertOptions
from ..repository.errors import RepositoryError


async def save(self, posts: Sequence[CollectedPost]) -> SaveOutput:
    """Upsert each post independently.

    A row counts as inserted only when it did not exist before; existing rows
    and failed rows count as skipped. One failure never aborts the batch.
    """
    output = SaveOutput()

    for post in posts:
        try:
            inserted = await self.repository.upsert(UpsertOptions(data=post.to_dict()))
        except RepositoryError as exc:
            self.logger.warning(
                f"internal.post.usecase.save: {post.platform_id}/{post.external_id} skipped: {exc}"
            )
            output.skipped += 1
            continue

        if inserted:
            output.inserted += 1
        else:
            output.skipped += 1

    self.logger.info(
        f"internal.post.usecase.save: inserted={output.inserted} skipped={output.skipped}"
    )
    return output
