import json

import pytest
from django.contrib.auth.hashers import make_password

from habitlog.models import UserInfo


def post_json(client, url, payload, method='post', **extra):
    return getattr(client, method)(url, data=json.dumps(payload), content_type='application/json', **extra)


@pytest.fixture
def make_user(db):
    def _make(nickname='ham', password='secret123', email=None, **fields):
        return UserInfo.objects.create(
            nickname=nickname,
            pw=make_password(password),
            email=email or f'{nickname}@example.com',
            **fields,
        )
    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def auth_client(client, user):
    resp = post_json(client, '/api/login', {'username': 'ham', 'password': 'secret123'})
    assert resp.status_code == 200
    return client
