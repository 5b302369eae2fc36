"""积分奖励规则

纯函数实现，不读写数据库。调用方负责加载用户状态、传入当前时间并持久化结果。

- 日志奖励：每个自然日（按 settings.TIME_ZONE）仅首次发布可得 POST_BONUS 积分
- OX 问答：每次答对得 OX_BONUS 积分，不限次数
- 卡牌游戏：最终得分即奖励积分
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from django.conf import settings
from django.utils import timezone


POST_BONUS = settings.HABITLOG_POST_BONUS
OX_BONUS = settings.HABITLOG_OX_BONUS


@dataclass(frozen=True)
class RewardState:
    """用户积分状态快照（来自 users 表的一行）"""
    id: int
    point: int
    last_post: Optional[datetime] = None
    last_game: Optional[datetime] = None

    @classmethod
    def from_user(cls, user) -> RewardState:
        return cls(id=user.id, point=user.point, last_post=user.last_post, last_game=user.last_game)


@dataclass(frozen=True)
class PostReward:
    point_delta: int
    new_last_post: Optional[datetime]
    is_first_today: bool


def calendar_date(value: datetime) -> date:
    """取本地自然日。带时区的时间先换算到 settings.TIME_ZONE，不带时区的视为本地时间。"""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.date()


def is_done_today(stamp: Optional[datetime], now: datetime) -> bool:
    """stamp 是否与 now 在同一自然日"""
    if stamp is None:
        return False
    return calendar_date(stamp) == calendar_date(now)


def evaluate_post_reward(state: RewardState, now: datetime) -> PostReward:
    """判断本次发布是否为今日首次，首次则发放日志奖励"""
    if is_done_today(state.last_post, now):
        return PostReward(point_delta=0, new_last_post=state.last_post, is_first_today=False)
    return PostReward(point_delta=POST_BONUS, new_last_post=now, is_first_today=True)


def evaluate_ox_reward(is_correct: bool) -> int:
    return OX_BONUS if is_correct else 0


def evaluate_card_reward(final_score: int) -> int:
    # 调用方保证 final_score 为非负整数
    return final_score
