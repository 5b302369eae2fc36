"""首页与挑战页数据"""
import logging
from datetime import datetime
from django.views.decorators.http import require_http_methods

from habitlog.decorators import login_required
from habitlog.utils.responses import json_ok
from habitlog.models import Log
from habitlog.services.reward_ledger import is_done_today
from habitlog.services.user_service import goal_summary, serialize_profile
from habitlog.views.api.logs import serialize_log


logger = logging.getLogger('log')

RECENT_LOG_LIMIT = 3


def challenge_status(user, now=None):
    now = now or datetime.now()
    return {
        'isPostCompleted': is_done_today(user.last_post, now),
        'isGameCompleted': is_done_today(user.last_game, now),
    }


@login_required
@require_http_methods(["GET"])
def home(request, user):
    """首页：个人信息、D-Day、最近日志、今日挑战完成情况"""
    now = datetime.now()
    profile = serialize_profile(user)
    profile['name'] = user.name or '이름 없음'
    profile['comment'] = user.comment or '상태 메시지 없음'

    recent_logs = Log.objects.filter(user=user).order_by('-created_at', '-id')[:RECENT_LOG_LIMIT]

    data = {
        **profile,
        **goal_summary(user, now.date()),
        **challenge_status(user, now),
        'recentLogs': [serialize_log(log, with_content=False) for log in recent_logs],
    }
    return json_ok(data)


@login_required
@require_http_methods(["GET"])
def challenge(request, user):
    data = {'nickname': user.nickname, 'point': user.point}
    data.update(challenge_status(user))
    return json_ok(data)
