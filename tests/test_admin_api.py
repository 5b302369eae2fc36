import pytest
from django.contrib.auth.models import User

from habitlog.models import PointsRecord
from habitlog.services import points_service
from conftest import post_json


pytestmark = pytest.mark.django_db


@pytest.fixture
def admin_headers(client):
    User.objects.create_superuser('admin', 'admin@example.com', 'adminpass')
    resp = post_json(client, '/api/admin/login', {'username': 'admin', 'password': 'adminpass'})
    assert resp.status_code == 200
    return {'HTTP_AUTHORIZATION': f"Token {resp.json()['data']['token']}"}


def test_admin_login_rejects_regular_staff(client):
    User.objects.create_user('staff', 'staff@example.com', 'staffpass')
    resp = post_json(client, '/api/admin/login', {'username': 'staff', 'password': 'staffpass'})
    assert resp.status_code == 403


def test_admin_endpoints_require_token(client):
    assert client.get('/api/admin/users').status_code == 401
    assert client.get('/api/admin/users', HTTP_AUTHORIZATION='Token nope').status_code == 401


def test_admin_users_pagination(client, admin_headers, make_user):
    for i in range(3):
        make_user(nickname=f'user{i}')

    resp = client.get('/api/admin/users?limit=2', **admin_headers)
    data = resp.json()['data']
    assert len(data['list']) == 2
    assert data['has_more'] is True

    resp = client.get('/api/admin/users', {'limit': 2, 'cursor': data['next_cursor']}, **admin_headers)
    rest = resp.json()['data']
    assert len(rest['list']) == 1
    assert rest['has_more'] is False
    seen = {u['nickname'] for u in data['list'] + rest['list']}
    assert seen == {'user0', 'user1', 'user2'}

    resp = client.get('/api/admin/users?keyword=user1', **admin_headers)
    assert [u['nickname'] for u in resp.json()['data']['list']] == ['user1']

    assert client.get('/api/admin/users?cursor=bad', **admin_headers).status_code == 400


def test_admin_reset_and_records(client, admin_headers, user):
    points_service.grant_card_reward(user.id, 30)
    points_service.grant_ox_reward(user.id, True)

    resp = client.post(f'/api/admin/users/{user.id}/points/reset', **admin_headers)
    assert resp.status_code == 200
    data = resp.json()['data']
    assert data['old_point'] == 35
    assert data['point'] == 0

    resp = client.get(f'/api/admin/points-records?user_id={user.id}', **admin_headers)
    changes = sorted(r['change'] for r in resp.json()['data']['list'])
    assert changes == [-35, 5, 30]
    reset = PointsRecord.objects.get(source_type='ADMIN_RESET')
    assert reset.source_meta == {'operator': 'admin'}


def test_admin_reset_unknown_user(client, admin_headers):
    assert client.post('/api/admin/users/999999/points/reset', **admin_headers).status_code == 404


def test_admin_login_rejects_non_object_body(client):
    resp = client.post('/api/admin/login', data='["admin"]', content_type='application/json')
    assert resp.status_code == 400


def test_admin_login_wrong_password(client):
    User.objects.create_superuser('admin', 'admin@example.com', 'adminpass')
    resp = post_json(client, '/api/admin/login', {'username': 'admin', 'password': 'nope'})
    assert resp.status_code == 401


def test_admin_logout_revokes_token(client, admin_headers):
    assert client.post('/api/admin/logout', **admin_headers).status_code == 200
    assert client.get('/api/admin/users', **admin_headers).status_code == 401
