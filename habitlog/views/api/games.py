"""小游戏结算视图（OX 问答 / 卡牌游戏）"""
import logging
from decimal import Decimal, InvalidOperation
from django.views.decorators.http import require_http_methods

from habitlog.decorators import login_required
from habitlog.utils.responses import json_err, reward_ok
from habitlog.utils.request import load_json_body
from habitlog.services.points_service import grant_ox_reward, grant_card_reward


logger = logging.getLogger('log')


@login_required
@require_http_methods(["POST"])
def game_ox(request, user):
    """OX 问答结算，请求体：{"is_correct": true}"""
    try:
        body = load_json_body(request)
    except ValueError as exc:
        return json_err(str(exc), status=400)

    is_correct = body.get('is_correct')
    if not isinstance(is_correct, bool):
        return json_err('is_correct 必须为布尔值', status=400)

    user, delta = grant_ox_reward(user.id, is_correct)
    message = f'回答正确，积分 +{delta}' if is_correct else '回答错误'
    return reward_ok(message, delta, user.point)


@login_required
@require_http_methods(["POST"])
def game_card(request, user):
    """卡牌游戏结算，请求体：{"final_score": 42}，得分即积分"""
    try:
        body = load_json_body(request)
    except ValueError as exc:
        return json_err(str(exc), status=400)

    final_score = body.get('final_score')
    if final_score is None or isinstance(final_score, bool):
        return json_err('缺少参数 final_score', status=400)

    try:
        score_decimal = Decimal(str(final_score))
    except InvalidOperation:
        return json_err('final_score 必须为数字', status=400)

    if not score_decimal.is_finite() or score_decimal != score_decimal.to_integral_value():
        return json_err('final_score 必须为整数', status=400)
    if score_decimal < 0:
        return json_err('final_score 必须为非负整数', status=400)

    user, delta = grant_card_reward(user.id, int(score_decimal))
    return reward_ok(f'游戏结束，积分 +{delta}', delta, user.point)
