from datetime import datetime

from django.conf import settings
from django.db import models


# 用户信息
class UserInfo(models.Model):
    pw = models.CharField('密码哈希', max_length=255)
    nickname = models.CharField('昵称', max_length=20, unique=True)  # 登录名
    name = models.CharField('姓名', max_length=20, null=True, blank=True)
    email = models.CharField('邮箱', max_length=100, unique=True)
    comment = models.CharField('状态消息', max_length=255, null=True, blank=True)
    img_url = models.CharField('头像URL', max_length=255, null=True, blank=True,
                               default=settings.HABITLOG_DEFAULT_IMG_URL)

    point = models.IntegerField('积分', default=0)
    last_post = models.DateTimeField('最近一次日志奖励时间', null=True, blank=True)
    last_game = models.DateTimeField('最近一次游戏时间', null=True, blank=True)

    dday = models.DateField('目标日期', null=True, blank=True)
    goal_event = models.CharField('目标名称', max_length=255, null=True, blank=True)

    created_at = models.DateTimeField('创建时间', default=datetime.now)

    class Meta:
        db_table = 'users'
        verbose_name = '用户信息'
        verbose_name_plural = '用户信息'

    def __str__(self):
        return f"{self.nickname}({self.id})"


# 打卡日志
class Log(models.Model):
    user = models.ForeignKey(UserInfo, verbose_name='作者', on_delete=models.CASCADE, related_name='logs')
    title = models.CharField('标题', max_length=255)
    content = models.TextField('内容', null=True, blank=True)
    created_at = models.DateTimeField('创建时间', default=datetime.now)

    class Meta:
        db_table = 'logs'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='logs_user_created_idx'),
        ]
        verbose_name = '打卡日志'
        verbose_name_plural = '打卡日志'

    def __str__(self):
        return self.title


POINTS_SOURCE_CHOICES = (
    ('POST', '日志奖励'),
    ('OX', 'OX 问答'),
    ('CARD', '卡牌游戏'),
    ('ADMIN_RESET', '管理员清零'),
)


# 积分记录（每次积分变动一条）
class PointsRecord(models.Model):
    user = models.ForeignKey(UserInfo, verbose_name='用户', on_delete=models.CASCADE, related_name='points_records')
    change = models.IntegerField('积分变动值')
    source_type = models.CharField('积分来源', max_length=20, choices=POINTS_SOURCE_CHOICES)
    source_meta = models.JSONField('来源详情', blank=True, default=dict)
    created_at = models.DateTimeField('创建时间', default=datetime.now)

    class Meta:
        db_table = 'points_records'
        indexes = [
            models.Index(fields=['user'], name='points_records_user_idx'),
            models.Index(fields=['created_at'], name='points_records_created_idx'),
        ]
        verbose_name = '积分记录'
        verbose_name_plural = '积分记录'
