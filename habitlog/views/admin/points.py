"""管理员积分记录视图"""
import logging
from django.views.decorators.http import require_http_methods

from habitlog.decorators import admin_token_required
from habitlog.utils.responses import json_ok, json_err
from habitlog.models import UserInfo, PointsRecord
from habitlog.views.admin.pagination import CursorError, paginate


logger = logging.getLogger('log')


@admin_token_required
@require_http_methods(["GET"])
def admin_points_records(request, admin):
    user_id = request.GET.get('user_id')
    if not user_id:
        return json_err('缺少参数 user_id', status=400)
    try:
        user = UserInfo.objects.get(id=user_id)
    except (UserInfo.DoesNotExist, ValueError):
        return json_err('用户不存在', status=404)
    try:
        records, has_more, next_cursor = paginate(PointsRecord.objects.filter(user=user), request)
    except CursorError as exc:
        return json_err(str(exc), status=400)
    items = []
    for record in records:
        items.append({
            'id': record.id,
            'user_id': user.id,
            'nickname': user.nickname,
            'change': record.change,
            'source_type': record.source_type,
            'source_meta': record.source_meta,
            'created_at': record.created_at.strftime('%Y-%m-%d %H:%M:%S'),
        })
    return json_ok({'list': items, 'has_more': has_more, 'next_cursor': next_cursor})
