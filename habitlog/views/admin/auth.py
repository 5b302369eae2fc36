"""管理端 Token 登录 / 注销

管理接口不走用户会话，使用 DRF authtoken；只有超级用户能拿到 Token。
"""
import logging
from django.views.decorators.http import require_http_methods
from django.contrib.auth import authenticate
from rest_framework.authtoken.models import Token

from habitlog.decorators import admin_token_required
from habitlog.utils.responses import json_ok, json_err
from habitlog.utils.request import load_json_body, str_field


logger = logging.getLogger('log')


@require_http_methods(["POST"])
def admin_login(request):
    """{"username": "...", "password": "..."} -> {"token": "...", "username": "..."}"""
    try:
        body = load_json_body(request)
        username = str_field(body, 'username').strip()
        password = str_field(body, 'password')
    except ValueError as exc:
        return json_err(str(exc), status=400)
    if not username or not password:
        return json_err('缺少参数 username 或 password', status=400)

    admin = authenticate(request, username=username, password=password)
    if admin is None:
        logger.warning(f'管理员登录失败: username={username}, ip={request.META.get("REMOTE_ADDR")}')
        return json_err('用户名或密码错误', status=401)
    if not admin.is_superuser:
        logger.warning(f'非超级用户尝试获取管理 Token: username={username}')
        return json_err('仅允许超级用户登录', status=403)

    token, created = Token.objects.get_or_create(user=admin)
    logger.info(f'管理员登录: username={username}, new_token={created}')
    return json_ok({'token': token.key, 'username': admin.get_username()})


@admin_token_required
@require_http_methods(["POST"])
def admin_logout(request, admin):
    """删除当前管理员的 Token，之后需重新登录"""
    deleted, _ = Token.objects.filter(user=admin).delete()
    logger.info(f'管理员注销: username={admin.get_username()}, deleted={deleted}')
    return json_ok(message='已注销')
