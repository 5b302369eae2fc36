"""视图装饰器"""
import logging
from functools import wraps

from habitlog.services.user_service import find_by_id
from habitlog.utils.auth import SessionStore, get_admin_from_token
from habitlog.utils.responses import json_err


logger = logging.getLogger('log')


def login_required(view_func):
    """校验会话中的 user_id，并把对应用户作为 user 参数传给视图。
    会话中的用户已被删除时销毁会话。
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        store = SessionStore(request)
        user_id = store.get_user_id()
        if not user_id:
            return json_err('请先登录', status=401)
        user = find_by_id(user_id)
        if not user:
            logger.warning(f'会话用户不存在，销毁会话: user_id={user_id}')
            store.destroy()
            return json_err('请先登录', status=401)
        return view_func(request, user=user, *args, **kwargs)
    return _wrapped


def admin_token_required(view_func):
    """仅允许持有有效管理员 Token 的请求通过。"""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        admin = get_admin_from_token(request)
        if not admin:
            return json_err('未认证或无权限', status=401)
        return view_func(request, admin=admin, *args, **kwargs)
    return _wrapped
