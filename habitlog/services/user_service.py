"""用户业务逻辑服务"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from habitlog.models import UserInfo


logger = logging.getLogger('log')

DEFAULT_GOAL_EVENT = '목표를 설정해보세요'

PROFILE_FIELDS = ('name', 'email', 'comment')


def find_by_id(user_id) -> Optional[UserInfo]:
    return UserInfo.objects.filter(pk=user_id).first()


def find_by_nickname(nickname: str) -> Optional[UserInfo]:
    if not nickname:
        return None
    return UserInfo.objects.filter(nickname=nickname).first()


def update_fields(user: UserInfo, **fields) -> UserInfo:
    """部分字段更新，只写入传入的字段"""
    for key, value in fields.items():
        setattr(user, key, value)
    user.save(update_fields=list(fields.keys()))
    return user


def register_user(*, nickname: str, password: str, email: str, name: str = None) -> UserInfo:
    """注册新用户。昵称或邮箱重复时抛出 ValueError。"""
    nickname = (nickname or '').strip()
    email = (email or '').strip()
    if not nickname or not password or not email:
        raise ValueError('缺少参数 username、password 或 email')
    if len(nickname) > 20:
        raise ValueError('username 最长 20 字')

    if UserInfo.objects.filter(nickname=nickname).exists():
        raise ValueError('该昵称已被使用')
    if UserInfo.objects.filter(email=email).exists():
        raise ValueError('该邮箱已被使用')

    try:
        with transaction.atomic():
            user = UserInfo.objects.create(
                nickname=nickname,
                pw=make_password(password),
                email=email,
                name=(name or '').strip() or None,
            )
    except IntegrityError:
        raise ValueError('昵称或邮箱已被使用')
    logger.info(f'新用户注册: user_id={user.id}, nickname={nickname}')
    return user


def authenticate_user(nickname: str, password: str) -> UserInfo:
    """校验昵称和密码，失败时抛出 ValueError"""
    user = find_by_nickname((nickname or '').strip())
    if not user:
        raise ValueError('用户不存在')
    if not check_password(password or '', user.pw):
        raise ValueError('密码错误')
    return user


def days_until(goal: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """距目标日期的天数（按日期计算，过期为负数），未设置目标时返回 None"""
    if goal is None:
        return None
    today = today or date.today()
    return (goal - today).days


def goal_summary(user: UserInfo, today: Optional[date] = None) -> dict:
    """首页 D-Day 区块数据"""
    if not user.dday:
        return {
            'dDay': None,
            'goalEvent': DEFAULT_GOAL_EVENT,
            'goalDateFormatted': None,
            'goalEventForInput': '',
        }
    goal_event = user.goal_event or DEFAULT_GOAL_EVENT
    return {
        'dDay': days_until(user.dday, today),
        'goalEvent': goal_event,
        'goalDateFormatted': user.dday.strftime('%Y-%m-%d'),
        'goalEventForInput': goal_event if goal_event != DEFAULT_GOAL_EVENT else '',
    }


def serialize_profile(user: UserInfo) -> dict:
    return {
        'id': user.id,
        'nickname': user.nickname,
        'name': user.name or '',
        'email': user.email,
        'comment': user.comment or '',
        'img_url': user.img_url or settings.HABITLOG_DEFAULT_IMG_URL,
        'point': user.point,
    }
