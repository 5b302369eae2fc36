import datetime

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UserInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pw', models.CharField(max_length=255, verbose_name='密码哈希')),
                ('nickname', models.CharField(max_length=20, unique=True, verbose_name='昵称')),
                ('name', models.CharField(blank=True, max_length=20, null=True, verbose_name='姓名')),
                ('email', models.CharField(max_length=100, unique=True, verbose_name='邮箱')),
                ('comment', models.CharField(blank=True, max_length=255, null=True, verbose_name='状态消息')),
                ('img_url', models.CharField(blank=True, default='/images/ham.jpg', max_length=255, null=True, verbose_name='头像URL')),
                ('point', models.IntegerField(default=0, verbose_name='积分')),
                ('last_post', models.DateTimeField(blank=True, null=True, verbose_name='最近一次日志奖励时间')),
                ('last_game', models.DateTimeField(blank=True, null=True, verbose_name='最近一次游戏时间')),
                ('dday', models.DateField(blank=True, null=True, verbose_name='目标日期')),
                ('goal_event', models.CharField(blank=True, max_length=255, null=True, verbose_name='目标名称')),
                ('created_at', models.DateTimeField(default=datetime.datetime.now, verbose_name='创建时间')),
            ],
            options={
                'verbose_name': '用户信息',
                'verbose_name_plural': '用户信息',
                'db_table': 'users',
            },
        ),
        migrations.CreateModel(
            name='Log',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='标题')),
                ('content', models.TextField(blank=True, null=True, verbose_name='内容')),
                ('created_at', models.DateTimeField(default=datetime.datetime.now, verbose_name='创建时间')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='logs', to='habitlog.userinfo', verbose_name='作者')),
            ],
            options={
                'verbose_name': '打卡日志',
                'verbose_name_plural': '打卡日志',
                'db_table': 'logs',
            },
        ),
        migrations.CreateModel(
            name='PointsRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('change', models.IntegerField(verbose_name='积分变动值')),
                ('source_type', models.CharField(choices=[('POST', '日志奖励'), ('OX', 'OX 问答'), ('CARD', '卡牌游戏'), ('ADMIN_RESET', '管理员清零')], max_length=20, verbose_name='积分来源')),
                ('source_meta', models.JSONField(blank=True, default=dict, verbose_name='来源详情')),
                ('created_at', models.DateTimeField(default=datetime.datetime.now, verbose_name='创建时间')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='points_records', to='habitlog.userinfo', verbose_name='用户')),
            ],
            options={
                'verbose_name': '积分记录',
                'verbose_name_plural': '积分记录',
                'db_table': 'points_records',
            },
        ),
        migrations.AddIndex(
            model_name='log',
            index=models.Index(fields=['user', 'created_at'], name='logs_user_created_idx'),
        ),
        migrations.AddIndex(
            model_name='pointsrecord',
            index=models.Index(fields=['user'], name='points_records_user_idx'),
        ),
        migrations.AddIndex(
            model_name='pointsrecord',
            index=models.Index(fields=['created_at'], name='points_records_created_idx'),
        ),
    ]
