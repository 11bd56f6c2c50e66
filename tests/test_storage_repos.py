import asyncio
import fnmatch
import json
import pytest
from app.domain.entities.user import User
from infrastructure.json_file_store import JsonFileStore
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.playlist.file_repo import FilePlaylistRepo
from infrastructure.repositories.playlist.redis_repo import RedisPlaylistRepo
from infrastructure.repositories.upload.file_repo import FileUploadRepo
from infrastructure.repositories.user.file_repo import FileUserRepo
from infrastructure.repositories.user.redis_repo import RedisUserRepo


class FakeRedis:
    def __init__(self, data):
        self.data = data

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value.encode() if isinstance(value, str) else value

    async def scan_iter(self, match='*'):
        for key in list(self.data):
            if fnmatch.fnmatch(key, match):
                yield key


class FakeRedisPool:
    def __init__(self):
        self.data = {}

    def get_connection(self):
        return FakeRedis(self.data)


def make_user(username):
    return User(username=username, display_name=username.title(), avatar_url=f'https://img/{username}',
                password_hash='salt$hash')


async def test_redis_playlists_per_user(make_playlist, make_video):
    pool = FakeRedisPool()
    repo = RedisPlaylistRepo(pool)
    playlists = [make_playlist('p1', 'One', [make_video('v1', rating=5)])]

    await repo.save('alice', playlists)

    assert await repo.get('alice') == playlists
    assert await repo.get('bob') == []
    assert json.loads(pool.data['playlists:alice'])[0]['videos'][0]['videoId'] == 'v1'


async def test_redis_users():
    repo = RedisUserRepo(FakeRedisPool())

    await repo.save(make_user('zoe'))
    await repo.save(make_user('adam'))

    assert (await repo.get('zoe')).display_name == 'Zoe'
    assert await repo.get('nobody') is None
    assert [user.username for user in await repo.get_all()] == ['adam', 'zoe']


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / 'data'


async def test_file_playlists_keep_other_users(data_dir, make_playlist):
    repo = FilePlaylistRepo(JsonFileStore(str(data_dir / 'playlists.json')))

    await repo.save('alice', [make_playlist('a')])
    await repo.save('bob', [make_playlist('b')])
    await repo.save('alice', [])

    assert await repo.get('alice') == []
    assert [p.id for p in await repo.get('bob')] == ['b']


async def test_file_users_upsert(data_dir):
    repo = FileUserRepo(JsonFileStore(str(data_dir / 'users.json'), default_factory=list))

    await repo.save(make_user('alice'))
    updated = make_user('alice')
    updated.display_name = 'Alicia'
    await repo.save(updated)

    users = await repo.get_all()
    assert [user.display_name for user in users] == ['Alicia']
    stored = json.loads((data_dir / 'users.json').read_text(encoding='utf-8'))
    assert stored[0]['firstName'] == 'Alicia'
    assert stored[0]['passwordHash'] == 'salt$hash'


async def test_concurrent_updates_are_not_lost(data_dir):
    store = JsonFileStore(str(data_dir / 'counter.json'))

    def add_key(key):
        def update(data):
            data[key] = True
            return data
        return update

    await asyncio.gather(*[store.update(add_key(f'k{i}')) for i in range(20)])

    assert len(await store.read()) == 20


async def test_upload_repo_writes_unique_files(tmp_path):
    repo = FileUploadRepo(str(tmp_path / 'uploads'))

    first = await repo.save(b'one', 'song.mp3')
    second = await repo.save(b'two', 'song.mp3')

    assert first.filename != second.filename
    assert first.url == f'/mp3/{first.filename}'
    assert (tmp_path / 'uploads' / second.filename).read_bytes() == b'two'


def test_redis_pool_hands_out_clients_of_the_shared_pool(mocker):
    pool = RedisPool(host='localhost', port=6379, db=0)
    pool.pool = mocker.Mock()

    assert pool.get_connection() is pool.pool.client.return_value
