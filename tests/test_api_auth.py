import pytest

from habitlog.models import UserInfo
from conftest import post_json


pytestmark = pytest.mark.django_db


def test_register_then_login(client):
    resp = post_json(client, '/api/register', {
        'username': 'dotori',
        'password': 'pw1234',
        'email': 'dotori@example.com',
        'name': '도토리',
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body['code'] == 201
    assert body['data']['nickname'] == 'dotori'
    assert body['data']['point'] == 0
    assert body['data']['img_url'] == '/images/ham.jpg'

    user = UserInfo.objects.get(nickname='dotori')
    assert user.pw != 'pw1234'

    resp = post_json(client, '/api/login', {'username': 'dotori', 'password': 'pw1234'})
    assert resp.status_code == 200
    assert client.session['user_id'] == user.id


def test_register_rejects_duplicates(client, user):
    resp = post_json(client, '/api/register', {'username': 'ham', 'password': 'x', 'email': 'new@example.com'})
    assert resp.status_code == 400
    resp = post_json(client, '/api/register', {'username': 'new', 'password': 'x', 'email': 'ham@example.com'})
    assert resp.status_code == 400
    assert UserInfo.objects.count() == 1


def test_register_requires_fields(client):
    resp = post_json(client, '/api/register', {'username': 'solo'})
    assert resp.status_code == 400
    assert resp.json()['data'] is None


@pytest.mark.parametrize('payload', [
    {'username': 'nobody', 'password': 'secret123'},
    {'username': 'ham', 'password': 'wrong'},
])
def test_login_failures(client, user, payload):
    resp = post_json(client, '/api/login', payload)
    assert resp.status_code == 400
    assert 'user_id' not in client.session


def test_login_rejects_malformed_body(client):
    resp = client.post('/api/login', data='not-json', content_type='application/json')
    assert resp.status_code == 400
    assert resp.json()['msg'] == '请求体格式错误'


def test_protected_endpoint_requires_session(client):
    resp = client.get('/api/home')
    assert resp.status_code == 401
    resp = post_json(client, '/api/game/ox', {'is_correct': True})
    assert resp.status_code == 401


def test_session_of_deleted_user_is_destroyed(auth_client, user):
    user.delete()
    resp = auth_client.get('/api/home')
    assert resp.status_code == 401
    assert 'user_id' not in auth_client.session


def test_logout(auth_client):
    resp = post_json(auth_client, '/api/logout', {})
    assert resp.status_code == 200
    assert auth_client.get('/api/home').status_code == 401


def test_wrong_method(auth_client):
    assert auth_client.get('/api/log').status_code == 405


def test_unknown_route_returns_json(client):
    resp = client.get('/api/nothing-here')
    assert resp.status_code == 404
    assert resp.json()['code'] == 404


@pytest.mark.parametrize('url,raw', [
    ('/api/register', '[]'),
    ('/api/register', '{"username": 7, "password": "pw", "email": "a@example.com"}'),
    ('/api/login', '"ham"'),
    ('/api/login', '{"username": ["ham"], "password": "secret123"}'),
])
def test_auth_rejects_malformed_bodies(client, user, url, raw):
    resp = client.post(url, data=raw, content_type='application/json')
    assert resp.status_code == 400
    assert UserInfo.objects.count() == 1
    assert 'user_id' not in client.session
