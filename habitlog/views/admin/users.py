"""管理员用户管理视图"""
import logging
from django.views.decorators.http import require_http_methods
from django.db.models import Q

from habitlog.decorators import admin_token_required
from habitlog.utils.responses import json_ok, json_err
from habitlog.models import UserInfo
from habitlog.services.points_service import reset_user_points
from habitlog.views.admin.pagination import CursorError, paginate


logger = logging.getLogger('log')


def _fmt(value):
    return value.strftime('%Y-%m-%d %H:%M:%S') if value else None


def serialize_admin_user(u: UserInfo):
    return {
        'id': u.id,
        'nickname': u.nickname,
        'name': u.name or '',
        'email': u.email,
        'point': u.point,
        'last_post': _fmt(u.last_post),
        'last_game': _fmt(u.last_game),
        'created_at': _fmt(u.created_at),
    }


@admin_token_required
@require_http_methods(["GET"])
def admin_users(request, admin):
    """用户列表，支持 keyword 搜索昵称/邮箱/姓名"""
    qs = UserInfo.objects.all()
    keyword = (request.GET.get('keyword') or '').strip()
    if keyword:
        qs = qs.filter(Q(nickname__icontains=keyword) | Q(email__icontains=keyword) | Q(name__icontains=keyword))
    try:
        users, has_more, next_cursor = paginate(qs, request)
    except CursorError as exc:
        return json_err(str(exc), status=400)
    return json_ok({
        'list': [serialize_admin_user(u) for u in users],
        'has_more': has_more,
        'next_cursor': next_cursor,
    })


@admin_token_required
@require_http_methods(["POST"])
def admin_user_points_reset(request, admin, user_id):
    """积分清零"""
    try:
        user, old_point = reset_user_points(user_id, operator=admin.username)
    except UserInfo.DoesNotExist:
        return json_err('用户不存在', status=404)
    data = serialize_admin_user(user)
    data['old_point'] = old_point
    return json_ok(data, message='积分已清零')
