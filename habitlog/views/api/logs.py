"""打卡日志视图"""
import logging
from datetime import datetime
from django.views.decorators.http import require_http_methods
from django.db import transaction

from habitlog.decorators import login_required
from habitlog.utils.responses import json_ok, json_err, reward_ok
from habitlog.utils.request import load_json_body, str_field
from habitlog.models import Log
from habitlog.services.points_service import grant_post_reward
from habitlog.exceptions import RewardConflictError


logger = logging.getLogger('log')


def serialize_log(log: Log, with_content=True):
    data = {
        'id': log.id,
        'title': log.title,
        'created_at': log.created_at.strftime('%Y-%m-%d %H:%M:%S'),
    }
    if with_content:
        data['content'] = log.content or ''
    return data


@login_required
@require_http_methods(["GET"])
def logs_list(request, user):
    """当前用户的全部日志，最新在前"""
    logs = Log.objects.filter(user=user).order_by('-created_at', '-id')
    return json_ok({
        'nickname': user.nickname,
        'logs': [serialize_log(log) for log in logs],
    })


@login_required
@require_http_methods(["GET"])
def log_detail(request, user, log_id):
    try:
        log = Log.objects.get(id=log_id, user=user)
    except Log.DoesNotExist:
        return json_err('记录不存在', status=404)
    return json_ok({'nickname': user.nickname, 'log': serialize_log(log)})


@login_required
@require_http_methods(["POST"])
def log_create(request, user):
    """发布日志；当天首次发布获得日志奖励积分"""
    try:
        body = load_json_body(request)
        title = str_field(body, 'title').strip()
        content = str_field(body, 'content')
    except ValueError as exc:
        return json_err(str(exc), status=400)

    if not title:
        return json_err('缺少参数 title', status=400)
    if len(title) > 255:
        return json_err('title 最长 255 字', status=400)

    now = datetime.now()
    try:
        with transaction.atomic():
            log = Log.objects.create(user=user, title=title, content=content, created_at=now)
            user, delta = grant_post_reward(user.id, now=now, source_meta={'log_id': log.id})
    except RewardConflictError as exc:
        return json_err(str(exc), status=409)

    message = f'日志已保存，积分 +{delta}' if delta else '日志已保存，今日日志奖励已领取'
    return reward_ok(message, delta, user.point, extra={'log': serialize_log(log, with_content=False)}, status=201)
