"""用户注册、登录、退出"""
import logging
from django.views.decorators.http import require_http_methods

from habitlog.decorators import login_required
from habitlog.utils.responses import json_ok, json_err
from habitlog.utils.request import load_json_body, str_field
from habitlog.utils.auth import SessionStore
from habitlog.services.user_service import register_user, authenticate_user, serialize_profile


logger = logging.getLogger('log')


@require_http_methods(["POST"])
def user_register(request):
    """注册。请求体示例：{"username":"ham","password":"1234","email":"ham@example.com","name":"햄"}"""
    try:
        body = load_json_body(request)
        user = register_user(
            nickname=str_field(body, 'username') or str_field(body, 'nickname'),
            password=str_field(body, 'password'),
            email=str_field(body, 'email'),
            name=str_field(body, 'name'),
        )
    except ValueError as exc:
        return json_err(str(exc), status=400)
    return json_ok(serialize_profile(user), status=201, message='注册成功')


@require_http_methods(["POST"])
def user_login(request):
    """登录成功后在会话中记录 user_id"""
    try:
        body = load_json_body(request)
        username = str_field(body, 'username')
        password = str_field(body, 'password')
    except ValueError as exc:
        return json_err(str(exc), status=400)

    if not username or not password:
        return json_err('缺少参数 username 或 password', status=400)

    try:
        user = authenticate_user(username, password)
    except ValueError as exc:
        logger.info(f'登录失败: username={username}, reason={exc}')
        return json_err(str(exc), status=400)

    SessionStore(request).set_user_id(user.id)
    logger.info(f'登录成功: user_id={user.id}')
    return json_ok(serialize_profile(user), message='登录成功')


@login_required
@require_http_methods(["POST", "GET"])
def user_logout(request, user):
    SessionStore(request).destroy()
    return json_ok(message='已退出登录')
