import pytest
from app.domain.entities.playlist import dump_playlists, load_playlists
from app.domain.entities.video import MediaType, Video, clamp_rating
from app.domain.errors import InvalidPlaylistNameError
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases


@pytest.fixture
def use_cases(make_playlist):
    return PlaylistUseCases([make_playlist('p1', 'Road trip'), make_playlist('p2', 'Chill')])


def test_create_playlist_appends_empty_playlist(use_cases):
    playlist = use_cases.create_playlist('  Workout  ')

    assert playlist.name == 'Workout'
    assert playlist.videos == []
    assert use_cases.playlists[-1] is playlist
    assert [p.id for p in use_cases.playlists][:2] == ['p1', 'p2']


def test_create_playlist_generates_unique_ids():
    use_cases = PlaylistUseCases([])
    ids = {use_cases.create_playlist(f'List {i}').id for i in range(50)}

    assert len(ids) == 50


@pytest.mark.parametrize('name', ['', '   ', None])
def test_create_playlist_rejects_empty_name(use_cases, name):
    with pytest.raises(InvalidPlaylistNameError):
        use_cases.create_playlist(name)

    assert len(use_cases.playlists) == 2


def test_rename_playlist(use_cases):
    assert use_cases.rename_playlist('p1', 'Summer') is True
    assert use_cases.get_playlist('p1').name == 'Summer'
    assert use_cases.rename_playlist('missing', 'Summer') is False
    with pytest.raises(InvalidPlaylistNameError):
        use_cases.rename_playlist('p1', ' ')


def test_add_video_appends_in_insertion_order(use_cases, make_video):
    assert use_cases.add_video('p1', make_video('b', 'Zebra'))
    assert use_cases.add_video('p1', make_video('a', 'Apple'))

    assert [v.video_id for v in use_cases.get_playlist('p1').videos] == ['b', 'a']


def test_duplicate_add_keeps_single_entry(use_cases, make_video):
    video = make_video('v1', 'Song')

    assert use_cases.add_video('p1', video) is True
    assert use_cases.add_video('p1', video) is False

    videos = use_cases.get_playlist('p1').videos
    assert [v.video_id for v in videos] == ['v1']


def test_same_video_may_live_in_two_playlists(use_cases, make_video):
    assert use_cases.add_video('p1', make_video('v1'))
    assert use_cases.add_video('p2', make_video('v1'))


def test_add_video_to_unknown_playlist(use_cases, make_video):
    assert use_cases.add_video('missing', make_video('v1')) is False


@pytest.mark.parametrize('rating, stored', [(-5, 1), (999, 10), (7, 7), (0, 1), ('8', 8), ('abc', 1), (None, 1)])
def test_set_rating_clamps(use_cases, make_video, rating, stored):
    use_cases.add_video('p1', make_video('v1'))

    assert use_cases.set_rating('p1', 'v1', rating) == stored
    assert use_cases.get_playlist('p1').find_video('v1').rating == stored


def test_set_rating_unknown_video_is_noop(use_cases, make_video):
    use_cases.add_video('p1', make_video('v1', rating=4))

    assert use_cases.set_rating('p1', 'other', 9) is None
    assert use_cases.set_rating('missing', 'v1', 9) is None
    assert use_cases.get_playlist('p1').find_video('v1').rating == 4


def test_remove_video_is_idempotent(use_cases, make_video):
    use_cases.add_video('p1', make_video('v1'))
    use_cases.add_video('p1', make_video('v2'))

    assert use_cases.remove_video('p1', 'v1') is True
    assert use_cases.remove_video('p1', 'v1') is False
    assert use_cases.remove_video('missing', 'v2') is False
    assert [v.video_id for v in use_cases.get_playlist('p1').videos] == ['v2']


def test_delete_playlist_is_idempotent(use_cases):
    playlists = use_cases.playlists

    assert use_cases.delete_playlist('p1') is True
    assert use_cases.delete_playlist('p1') is False
    assert [p.id for p in playlists] == ['p2']


def test_contains_video(use_cases, make_video):
    use_cases.add_video('p2', make_video('v9'))

    assert use_cases.contains_video('v9')
    assert not use_cases.contains_video('v1')


def test_clamp_rating_bounds():
    assert clamp_rating(1) == 1
    assert clamp_rating(10) == 10
    assert clamp_rating(11) == 10
    assert clamp_rating(3.7) == 3


def test_video_loads_stored_json_layout():
    video = Video.model_validate({
        'videoId': 'mp3_1', 'title': 'Demo', 'url': '/mp3/demo.mp3',
        'thumbnail': '', 'type': 'mp3', 'rating': 50,
    })

    assert video.media_type == MediaType.LOCAL_AUDIO
    assert video.source_url == '/mp3/demo.mp3'
    assert video.rating == 10


def test_playlists_dump_uses_stored_keys(make_playlist, make_video):
    playlist = make_playlist('p1', 'Mix', [make_video('v1', 'One', rating=3)])

    dumped = dump_playlists([playlist])

    assert dumped == [{
        'id': 'p1',
        'name': 'Mix',
        'videos': [{
            'videoId': 'v1', 'title': 'One', 'url': '', 'thumbnail': None,
            'type': 'youtube', 'rating': 3,
        }],
    }]
    assert load_playlists(dumped) == [playlist]


def test_missing_rating_defaults_to_one():
    assert load_playlists([{'id': 'p', 'name': 'n', 'videos': [{'videoId': 'x'}]}])[0].videos[0].rating == 1
