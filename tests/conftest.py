import pytest

from zabbix_rpc import API, Config

from .fake_zabbix import TOKEN, URL, FakeZabbix


@pytest.fixture
def fake():
    return FakeZabbix()


@pytest.fixture
def api(fake):
    """Client already holding a valid session token."""
    return API(Config(url=URL, token=TOKEN), session=fake.session())


@pytest.fixture
def anon_api(fake):
    """Client that has not logged in yet."""
    return API(Config(url=URL), session=fake.session())
