from datetime import datetime, timedelta

import pytest
from django.db.models import F

from habitlog.exceptions import RewardConflictError
from habitlog.models import PointsRecord, UserInfo
from habitlog.services import points_service
from habitlog.services.reward_ledger import RewardState


pytestmark = pytest.mark.django_db


def test_post_reward_scenario(make_user):
    user = make_user(point=100, last_post=datetime(2025, 1, 1, 9, 0, 0))

    user, delta = points_service.grant_post_reward(user.id, now=datetime(2025, 1, 2, 8, 0, 0))
    assert delta == 10
    assert user.point == 110
    assert user.last_post == datetime(2025, 1, 2, 8, 0, 0)

    user, delta = points_service.grant_post_reward(user.id, now=datetime(2025, 1, 2, 20, 0, 0))
    assert delta == 0
    assert user.point == 110
    assert user.last_post == datetime(2025, 1, 2, 8, 0, 0)

    records = list(PointsRecord.objects.filter(user=user))
    assert [(r.change, r.source_type) for r in records] == [(10, 'POST')]


def test_post_reward_rechecks_after_concurrent_grant(make_user, monkeypatch):
    user = make_user(point=100)
    now = datetime(2025, 1, 2, 8, 0, 0)
    original = RewardState.from_user
    calls = []

    def racing(u):
        snapshot = original(u)
        if not calls:
            # 另一个请求在读取之后抢先完成了发放
            calls.append(u.id)
            UserInfo.objects.filter(pk=u.pk).update(point=F('point') + 10, last_post=now)
        return snapshot

    monkeypatch.setattr(RewardState, 'from_user', staticmethod(racing))

    user, delta = points_service.grant_post_reward(user.id, now=now)
    assert delta == 0
    assert UserInfo.objects.get(pk=user.pk).point == 110


def test_post_reward_gives_up_after_retries(make_user, monkeypatch, settings):
    settings.HABITLOG_REWARD_CAS_RETRIES = 2
    user = make_user(point=0)
    now = datetime(2025, 1, 10, 8, 0, 0)
    original = RewardState.from_user
    calls = []

    def always_stale(u):
        snapshot = original(u)
        calls.append(u.id)
        UserInfo.objects.filter(pk=u.pk).update(last_post=now - timedelta(days=len(calls)))
        return snapshot

    monkeypatch.setattr(RewardState, 'from_user', staticmethod(always_stale))

    with pytest.raises(RewardConflictError):
        points_service.grant_post_reward(user.id, now=now)
    assert len(calls) == 2
    assert UserInfo.objects.get(pk=user.pk).point == 0
    assert not PointsRecord.objects.exists()


def test_post_reward_unknown_user(db):
    with pytest.raises(UserInfo.DoesNotExist):
        points_service.grant_post_reward(987654)


def test_ox_reward_always_stamps_last_game(make_user):
    user = make_user(point=3)
    now = datetime(2025, 3, 1, 12, 0, 0)

    user, delta = points_service.grant_ox_reward(user.id, False, now=now)
    assert delta == 0
    assert user.point == 3
    assert user.last_game == now
    assert not PointsRecord.objects.exists()

    later = now + timedelta(minutes=1)
    user, delta = points_service.grant_ox_reward(user.id, True, now=later)
    user, delta = points_service.grant_ox_reward(user.id, True, now=later)
    assert delta == 5
    assert user.point == 13
    assert user.last_game == later
    assert PointsRecord.objects.filter(user=user, source_type='OX').count() == 2


def test_card_reward(make_user):
    user = make_user(point=0)
    now = datetime(2025, 3, 1, 12, 0, 0)

    user, delta = points_service.grant_card_reward(user.id, 0, now=now)
    assert (delta, user.point, user.last_game) == (0, 0, now)

    user, delta = points_service.grant_card_reward(user.id, 42, now=now)
    assert (delta, user.point) == (42, 42)
    record = PointsRecord.objects.get(user=user)
    assert record.source_type == 'CARD'
    assert record.source_meta == {'final_score': 42}


def test_card_reward_rejects_negative(make_user):
    user = make_user()
    with pytest.raises(ValueError):
        points_service.grant_card_reward(user.id, -1)
    assert UserInfo.objects.get(pk=user.pk).last_game is None


def test_game_reward_does_not_touch_last_post(make_user):
    last_post = datetime(2025, 3, 1, 9, 0, 0)
    user = make_user(last_post=last_post)
    user, _ = points_service.grant_card_reward(user.id, 7, now=datetime(2025, 3, 2, 9, 0, 0))
    assert user.last_post == last_post


def test_reset_user_points(make_user):
    user = make_user(point=55)
    user, old_point = points_service.reset_user_points(user.id, operator='admin')
    assert old_point == 55
    assert user.point == 0
    record = PointsRecord.objects.get(user=user)
    assert (record.change, record.source_type) == (-55, 'ADMIN_RESET')

    _, old_point = points_service.reset_user_points(user.id)
    assert old_point == 0
    assert PointsRecord.objects.count() == 1


def test_post_reward_reads_state_with_row_lock(make_user, monkeypatch):
    from django.db.models.query import QuerySet

    user = make_user()
    original = QuerySet.select_for_update
    locked = []

    def spy(self, *args, **kwargs):
        locked.append(self.model)
        return original(self, *args, **kwargs)

    monkeypatch.setattr(QuerySet, 'select_for_update', spy)

    points_service.grant_post_reward(user.id, now=datetime(2025, 5, 1, 9, 0, 0))
    assert locked == [UserInfo]
