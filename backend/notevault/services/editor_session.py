"""
Editor Session - one open page on the editing side of the pipeline.

Holds the latest block state, auto-saves it through the page repository and
exposes the plain text the AI features work on.
"""
from typing import Any, Callable, Dict, List, Optional

from .autosave import DebouncedSaveController
from ..api.exceptions import PageNotFoundError
from ..core.config import AUTOSAVE_DELAY_SECONDS
from ..domain.entities import Page
from ..domain.value_objects import OwnerId
from ..repositories.interfaces import IPageRepository
from ..utils.block_text import extract_text_from_blocks, text_to_blocks
from ..core.logging_config import get_logger

logger = get_logger(__name__)

Block = Dict[str, Any]


class EditorSession:
    """
    Client-side state for one page being edited.

    Example:
        session = EditorSession(repo, owner_id, page)
        session.edit(blocks)          # arms the auto-save timer
        text = session.plain_text     # input for AI features
        session.insert_text(result)   # explicit accept of AI output
        await session.close()         # flushes a pending save
    """

    def __init__(
        self,
        page_repo: IPageRepository,
        owner_id: OwnerId,
        page: Page,
        delay: float = AUTOSAVE_DELAY_SECONDS,
        on_save_error: Optional[Callable[[BaseException], None]] = None
    ):
        self._repo = page_repo
        self.owner_id = owner_id
        self.page_id = page.id
        self._blocks: List[Block] = list(page.content)
        self.autosave = DebouncedSaveController(
            self._persist,
            lambda: list(self._blocks),
            delay=delay,
            on_error=on_save_error,
        )

    @property
    def blocks(self) -> List[Block]:
        return list(self._blocks)

    @property
    def plain_text(self) -> str:
        return extract_text_from_blocks(self._blocks)

    def edit(self, blocks: List[Block]) -> None:
        """Replace the local block state and schedule a save."""
        self._blocks = list(blocks or [])
        self.autosave.touch()

    def insert_text(self, text: str) -> None:
        """Append accepted AI text as paragraphs at the end of the page."""
        new_blocks = text_to_blocks(text)
        if new_blocks:
            self.edit(self._blocks + new_blocks)

    async def close(self, flush: bool = True) -> None:
        await self.autosave.close(flush=flush)

    async def _persist(self, blocks: List[Block]) -> None:
        page = await self._repo.update(self.owner_id, self.page_id, {"content": blocks})
        if page is None:
            raise PageNotFoundError()
        logger.debug(f"Saved {len(blocks)} blocks to page {self.page_id}")
