"""积分业务逻辑服务

读取用户状态 -> 按 reward_ledger 规则计算 -> 单条条件 UPDATE 写回。
日志奖励使用 last_post 做比较交换（CAS），防止重复提交在同一天发放两次。
积分、时间戳和积分记录在同一事务中提交。
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.db.models import F

from habitlog.exceptions import RewardConflictError
from habitlog.models import PointsRecord, UserInfo
from habitlog.services.reward_ledger import (
    RewardState,
    evaluate_card_reward,
    evaluate_ox_reward,
    evaluate_post_reward,
)


logger = logging.getLogger('log')


def _record(user_id, delta: int, source_type: str, source_meta: dict = None, now: datetime = None):
    return PointsRecord.objects.create(
        user_id=user_id,
        change=int(delta),
        source_type=source_type,
        source_meta=source_meta or {},
        created_at=now or datetime.now(),
    )


def grant_post_reward(user_id, now: Optional[datetime] = None,
                      source_meta: dict = None) -> Tuple[UserInfo, int]:
    """发布日志后的积分结算，返回 (最新用户对象, 本次积分变动)。
    用户不存在时抛出 UserInfo.DoesNotExist。
    """
    now = now or datetime.now()
    retries = max(1, settings.HABITLOG_REWARD_CAS_RETRIES)

    for attempt in range(1, retries + 1):
        with transaction.atomic():
            # 加锁读取最新已提交的行
            user = UserInfo.objects.select_for_update().get(pk=user_id)
            state = RewardState.from_user(user)
            reward = evaluate_post_reward(state, now)
            if not reward.is_first_today:
                return user, 0

            updated = (
                UserInfo.objects
                .filter(pk=user_id, last_post=state.last_post)
                .update(point=F('point') + reward.point_delta, last_post=reward.new_last_post)
            )
            if updated:
                _record(user_id, reward.point_delta, 'POST', source_meta, now)
                user.refresh_from_db(fields=['point', 'last_post'])
                logger.info(f'日志奖励发放: user_id={user_id}, delta={reward.point_delta}, point={user.point}')
                return user, reward.point_delta

        logger.warning(f'日志奖励条件更新未命中，重新计算: user_id={user_id}, attempt={attempt}')

    logger.error(f'日志奖励条件更新多次失败: user_id={user_id}, retries={retries}')
    raise RewardConflictError('积分更新冲突，请稍后重试')


def _grant_game_reward(user_id, delta: int, source_type: str, source_meta: dict,
                       now: datetime) -> Tuple[UserInfo, int]:
    """游戏结算：无论积分多少都刷新 last_game"""
    with transaction.atomic():
        updated = (
            UserInfo.objects
            .filter(pk=user_id)
            .update(point=F('point') + delta, last_game=now)
        )
        if not updated:
            raise UserInfo.DoesNotExist(f'用户不存在: {user_id}')
        if delta:
            _record(user_id, delta, source_type, source_meta, now)
        user = UserInfo.objects.get(pk=user_id)
    logger.info(f'游戏结算: user_id={user_id}, source={source_type}, delta={delta}, point={user.point}')
    return user, delta


def grant_ox_reward(user_id, is_correct: bool, now: Optional[datetime] = None) -> Tuple[UserInfo, int]:
    delta = evaluate_ox_reward(is_correct)
    return _grant_game_reward(user_id, delta, 'OX', {'is_correct': bool(is_correct)}, now or datetime.now())


def grant_card_reward(user_id, final_score: int, now: Optional[datetime] = None) -> Tuple[UserInfo, int]:
    if final_score < 0:
        raise ValueError('final_score 必须为非负整数')
    delta = evaluate_card_reward(final_score)
    return _grant_game_reward(user_id, delta, 'CARD', {'final_score': final_score}, now or datetime.now())


def reset_user_points(user_id, operator: str = '') -> Tuple[UserInfo, int]:
    """管理员清零积分，返回 (用户, 清零前积分)"""
    with transaction.atomic():
        user = UserInfo.objects.select_for_update().get(pk=user_id)
        old_point = user.point
        if old_point:
            user.point = 0
            user.save(update_fields=['point'])
            _record(user_id, -old_point, 'ADMIN_RESET', {'operator': operator})
    logger.info(f'管理员清零积分: user_id={user_id}, old_point={old_point}, operator={operator}')
    return user, old_point
