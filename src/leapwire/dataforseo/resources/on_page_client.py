# leapwire/dataforseo/resources/on_page_client.py
"""Client for the DataForSEO On-Page audit endpoints.

On-page audits are asynchronous: ``create_task`` starts a crawl and returns
its task id, ``get_summary`` reports on it and raises ``TaskNotReadyError``
while the API still answers 40400 for the id. ``wait_for_summary`` wraps the
usual polling loop around that signal.
"""

import asyncio

from ...exceptions import DecodeError, TaskError, TaskNotReadyError
from ...log_config import logger
from ...models import ResultPage
from ..constants import STATUS_NOT_FOUND, STATUS_OK, STATUS_TASK_CREATED
from ..endpoints import (
    ON_PAGE_PAGES,
    ON_PAGE_SUMMARY,
    ON_PAGE_TASK_POST,
    OnPagePagesRequest,
    OnPageTaskPostRequest,
)
from ..envelope import check_envelope, first_result, first_task
from ..models import OnPagePage, OnPagePagesResult, OnPageSummary
from .base_client import DataForSEOResourceClient

DEFAULT_POLL_INTERVAL = 10.0
DEFAULT_MAX_POLLS = 60


class OnPageClient(DataForSEOResourceClient):
    """Client for the On-Page audit endpoints."""

    async def create_task(self, request: OnPageTaskPostRequest) -> str:
        """Creates an on-page audit task.

        Returns:
            str: The id of the created task.

        Raises:
            TaskError: If the task was neither accepted (20100) nor OK (20000).
        """
        envelope = await self._api_client.post(ON_PAGE_TASK_POST, request)
        task = first_task(envelope, provider=self.provider)
        if task.status_code not in (STATUS_OK, STATUS_TASK_CREATED):
            raise TaskError(
                f"task error {task.status_code}: {task.status_message}",
                status_code=task.status_code,
                status_message=task.status_message,
                provider=self.provider,
            )
        logger.info(f"Created on-page task {task.id} for {request.target}")
        return task.id

    async def get_summary(self, task_id: str) -> OnPageSummary:
        """Retrieves the summary of an on-page audit task.

        Raises:
            TaskNotReadyError: If the task has not been processed yet. Poll
                again later.
            EnvelopeError: For any other non-20000 envelope status.
        """
        path = self._endpoint(ON_PAGE_SUMMARY, task_id)
        envelope = await self._api_client.get_raw(path)
        if envelope.status_code == STATUS_NOT_FOUND:
            raise TaskNotReadyError(task_id=task_id, provider=self.provider)
        check_envelope(envelope, provider=self.provider)

        results = first_result(envelope, list[OnPageSummary], provider=self.provider)
        if not results:
            raise DecodeError("empty on-page summary result", provider=self.provider)
        return results[0]

    async def wait_for_summary(
        self,
        task_id: str,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_polls: int = DEFAULT_MAX_POLLS,
    ) -> OnPageSummary:
        """Polls ``get_summary`` until the task is ready.

        Args:
            task_id: Id returned by ``create_task``.
            poll_interval: Seconds to wait between polls.
            max_polls: Number of polls before giving up.

        Raises:
            TaskNotReadyError: If the task is still not ready after ``max_polls``.
        """
        for poll in range(1, max_polls + 1):
            try:
                return await self.get_summary(task_id)
            except TaskNotReadyError:
                logger.debug(
                    f"On-page task {task_id} not ready (poll {poll}/{max_polls})"
                )
                if poll < max_polls:
                    await asyncio.sleep(poll_interval)
        raise TaskNotReadyError(
            f"task not ready after {max_polls} polls",
            task_id=task_id,
            provider=self.provider,
        )

    async def get_pages(
        self, task_id: str, limit: int | None = None, offset: int | None = None
    ) -> ResultPage[OnPagePage]:
        """Retrieves crawled pages of an on-page audit task.

        Returns:
            ResultPage[OnPagePage]: The pages and the number of matching pages.
        """
        request = OnPagePagesRequest(id=task_id, limit=limit, offset=offset)
        results = await self._post_result(
            ON_PAGE_PAGES, request, list[OnPagePagesResult]
        )
        if not results:
            return ResultPage[OnPagePage]()
        first = results[0]
        return ResultPage[OnPagePage](items=first.items, total_count=first.total)
