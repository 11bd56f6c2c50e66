import asyncio
import logging
import aiohttp
from app.domain.services_interfaces.aiohttp_service import AiohttpServiceInterface
from app.domain.services_interfaces.search_service import SearchServiceInterface
from app.domain.entities.search_result import SearchResult


logger = logging.getLogger('external_apis')

SEARCH_URL = 'https://www.googleapis.com/youtube/v3/search'
VIDEOS_URL = 'https://www.googleapis.com/youtube/v3/videos'


def parse_search_results(search_response: dict, details_response: dict) -> list[SearchResult]:
    """
    Combines a search response with the matching video details.

    :param search_response: Body of the search endpoint.
    :param details_response: Body of the videos endpoint for the same ids.
    :return: SearchResult instances in search order.
    """
    details = {item['id']: item for item in details_response.get('items', [])}
    results = []
    for item in search_response.get('items', []):
        video_id = item.get('id', {}).get('videoId')
        if not video_id:
            continue
        snippet = item.get('snippet', {})
        detail = details.get(video_id, {})
        results.append(SearchResult(
            video_id=video_id,
            title=snippet.get('title', ''),
            description=snippet.get('description'),
            channel_title=snippet.get('channelTitle'),
            thumbnail_url=snippet.get('thumbnails', {}).get('medium', {}).get('url'),
            duration=detail.get('contentDetails', {}).get('duration'),
            view_count=int(detail.get('statistics', {}).get('viewCount', 0) or 0),
        ))
    return results


class YoutubeSearchService(SearchServiceInterface):
    def __init__(self, aiohttp_service: AiohttpServiceInterface, api_key: str, max_results: int = 10):
        self.aiohttp_service = aiohttp_service
        self.api_key = api_key
        self.max_results = max_results

    async def search(self, query: str) -> list[SearchResult]:
        if not self.api_key:
            logger.error("YouTube API key is not configured, search skipped")
            return []
        params = {
            'part': 'snippet',
            'q': query,
            'type': 'video',
            'maxResults': self.max_results,
            'key': self.api_key,
        }
        try:
            search_response = await self.aiohttp_service.get(SEARCH_URL, params=params)
            video_ids = [item['id']['videoId'] for item in search_response.get('items', [])
                         if item.get('id', {}).get('videoId')]
            if not video_ids:
                return []
            details_response = await self.aiohttp_service.get(VIDEOS_URL, params={
                'part': 'contentDetails,statistics',
                'id': ','.join(video_ids),
                'key': self.api_key,
            })
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"YouTube search for '{query}' failed: {e!r}")
            return []
        return parse_search_results(search_response, details_response)
