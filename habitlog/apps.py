from django.apps import AppConfig


class HabitLogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'habitlog'
    # 在 Django Admin 中显示的分组名称
    verbose_name = '习惯打卡'
