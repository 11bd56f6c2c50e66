import logging
import aiohttp
import pytest
from app.domain.entities.video import embed_url, extract_youtube_id, thumbnail_url, watch_url
from infrastructure.services.youtube_service import (SEARCH_URL, VIDEOS_URL, YoutubeSearchService,
                                                     parse_search_results)


SEARCH_RESPONSE = {
    'items': [
        {
            'id': {'kind': 'youtube#video', 'videoId': 'abc'},
            'snippet': {
                'title': 'First song',
                'description': 'Live',
                'channelTitle': 'Band',
                'thumbnails': {'medium': {'url': 'https://i.ytimg.com/vi/abc/mqdefault.jpg'}},
            },
        },
        {'id': {'kind': 'youtube#channel', 'channelId': 'chan'}, 'snippet': {'title': 'A channel'}},
        {'id': {'kind': 'youtube#video', 'videoId': 'def'}, 'snippet': {'title': 'Second song'}},
    ]
}

DETAILS_RESPONSE = {
    'items': [
        {'id': 'abc', 'contentDetails': {'duration': 'PT3M21S'}, 'statistics': {'viewCount': '1500'}},
    ]
}


def test_parse_search_results_joins_details():
    results = parse_search_results(SEARCH_RESPONSE, DETAILS_RESPONSE)

    assert [r.video_id for r in results] == ['abc', 'def']
    first, second = results
    assert first.title == 'First song'
    assert first.channel_title == 'Band'
    assert first.thumbnail_url == 'https://i.ytimg.com/vi/abc/mqdefault.jpg'
    assert first.duration == 'PT3M21S'
    assert first.view_count == 1500
    assert second.duration is None
    assert second.view_count == 0


def test_parse_empty_responses():
    assert parse_search_results({}, {}) == []


@pytest.fixture
def aiohttp_service(mocker):
    service = mocker.Mock()
    service.get = mocker.AsyncMock(side_effect=[SEARCH_RESPONSE, DETAILS_RESPONSE])
    return service


async def test_search_asks_for_details_of_found_videos(aiohttp_service):
    service = YoutubeSearchService(aiohttp_service, api_key='key', max_results=5)

    results = await service.search('song')

    assert [r.video_id for r in results] == ['abc', 'def']
    search_call, details_call = aiohttp_service.get.await_args_list
    assert search_call.args == (SEARCH_URL,)
    assert search_call.kwargs['params']['q'] == 'song'
    assert search_call.kwargs['params']['maxResults'] == 5
    assert details_call.args == (VIDEOS_URL,)
    assert details_call.kwargs['params']['id'] == 'abc,def'


async def test_search_without_hits_skips_details(aiohttp_service):
    aiohttp_service.get.side_effect = [{'items': []}]

    assert await YoutubeSearchService(aiohttp_service, api_key='key').search('nothing') == []
    assert aiohttp_service.get.await_count == 1


async def test_search_without_api_key(aiohttp_service, caplog):
    with caplog.at_level(logging.ERROR):
        results = await YoutubeSearchService(aiohttp_service, api_key='').search('song')

    assert results == []
    aiohttp_service.get.assert_not_awaited()
    assert 'API key' in caplog.text


async def test_search_failure_returns_empty_list(aiohttp_service, caplog):
    aiohttp_service.get.side_effect = aiohttp.ClientConnectionError('offline')

    with caplog.at_level(logging.ERROR):
        results = await YoutubeSearchService(aiohttp_service, api_key='key').search('song')

    assert results == []
    assert "YouTube search for 'song' failed" in caplog.text


@pytest.mark.parametrize('url, video_id', [
    ('https://www.youtube.com/watch?v=dQw4w9WgXcQ', 'dQw4w9WgXcQ'),
    ('https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=x', 'dQw4w9WgXcQ'),
    ('https://youtu.be/dQw4w9WgXcQ?t=42', 'dQw4w9WgXcQ'),
    ('https://www.youtube.com/embed/dQw4w9WgXcQ', 'dQw4w9WgXcQ'),
    ('https://vimeo.com/123', None),
    ('', None),
])
def test_extract_youtube_id(url, video_id):
    assert extract_youtube_id(url) == video_id


def test_url_helpers():
    assert watch_url('abc') == 'https://www.youtube.com/watch?v=abc'
    assert thumbnail_url('abc') == 'https://img.youtube.com/vi/abc/mqdefault.jpg'
    assert embed_url('abc') == 'https://www.youtube.com/embed/abc?autoplay=1'
    assert thumbnail_url('') == ''
    assert embed_url('') == ''
