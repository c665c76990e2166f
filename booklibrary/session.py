"""Caller-side state of a search session."""
import itertools
from typing import Callable, List
import logging

from booklibrary.models import SearchQuery, SearchOutcome, Idle, Loading
from booklibrary.search import AsyncQueryExecutor

logger = logging.getLogger(__name__)

Listener = Callable[[SearchOutcome], None]


class SearchSession:
    """
    Holds the single current SearchOutcome.

    Every search moves the session back to Loading. Each call is tagged with
    an increasing generation number; with ``discard_stale`` (the default) an
    outcome is only applied if no newer search has been started since, so
    the session always ends up showing the most recent query. With
    ``discard_stale=False`` whichever response arrives last wins.
    """

    def __init__(self, executor: AsyncQueryExecutor, discard_stale: bool = True):
        self.executor = executor
        self.discard_stale = discard_stale
        self.outcome: SearchOutcome = Idle()
        self._generations = itertools.count(1)
        self._latest = 0
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener):
        """Call ``listener`` with every outcome the session moves to."""
        self._listeners.append(listener)

    @property
    def latest_generation(self) -> int:
        return self._latest

    def _set(self, outcome: SearchOutcome):
        self.outcome = outcome
        for listener in self._listeners:
            listener(outcome)

    async def search(self, query: SearchQuery) -> SearchOutcome:
        """
        Run a search and update the session.

        Returns:
            The outcome of this particular search, whether or not it was
            applied to the session
        """
        generation = next(self._generations)
        self._latest = generation
        self._set(Loading())

        outcome = await self.executor.execute(query)

        if self.discard_stale and generation != self._latest:
            logger.info(f"Discarding stale outcome of search #{generation} (latest is #{self._latest})")
            return outcome

        self._set(outcome)
        return outcome
