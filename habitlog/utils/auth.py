"""认证工具函数"""
import logging

from rest_framework.authtoken.models import Token


logger = logging.getLogger('log')

SESSION_USER_KEY = 'user_id'


class SessionStore:
    """对 Django 会话的薄封装，只暴露登录态相关的读写"""

    def __init__(self, request):
        self._session = request.session

    def get_user_id(self):
        return self._session.get(SESSION_USER_KEY)

    def set_user_id(self, user_id):
        # 登录时更换会话 key，防止会话固定
        self._session.cycle_key()
        self._session[SESSION_USER_KEY] = user_id

    def destroy(self):
        self._session.flush()


def parse_auth_header(request):
    """从 Authorization 头中解析出可能的 Token 值。
    支持格式：
      - Authorization: Token <key>
      - Authorization: Bearer <key>
    返回 token_key 或 None。
    """
    auth = request.headers.get('Authorization')
    if not auth:
        return None
    parts = auth.strip().split()
    if len(parts) == 2 and parts[0].lower() in ('token', 'bearer'):
        return parts[1]
    if len(parts) == 1:
        return parts[0]
    return None


def get_admin_from_token(request):
    """校验 Authorization Token 并返回 Django 管理员用户，验证失败返回 None"""
    token_key = parse_auth_header(request)
    if not token_key:
        return None
    try:
        token = Token.objects.select_related('user').get(key=token_key)
    except Token.DoesNotExist:
        return None
    user = token.user
    if user and user.is_superuser:
        return user
    return None
