from abc import ABC, abstractmethod
from app.domain.entities.search_result import SearchResult


class SearchServiceInterface(ABC):
    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """
        Looks up videos in the external catalog.

        :param query: Free text typed by the user
        :return: Candidate videos, empty list if nothing was found or the catalog failed
        """
        pass
