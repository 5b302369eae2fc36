from django.contrib import admin
from .models import (
    UserInfo,
    Log,
    PointsRecord,
)


@admin.register(UserInfo)
class UserInfoAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "nickname",
        "name",
        "email",
        "point",
        "last_post",
        "last_game",
        "dday",
        "created_at",
    )
    search_fields = ("nickname", "email", "name")
    exclude = ("pw",)


@admin.register(Log)
class LogAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "user", "created_at")
    search_fields = ("title", "user__nickname")
    list_filter = ("created_at",)
    ordering = ("-created_at",)


@admin.register(PointsRecord)
class PointsRecordAdmin(admin.ModelAdmin):
    list_display = ("user", "change", "source_type", "created_at")
    search_fields = ("user__nickname",)
    list_filter = ("source_type", "created_at")
    readonly_fields = ("created_at",)


admin.site.site_header = "习惯打卡后台"
admin.site.site_title = "习惯打卡后台"
admin.site.index_title = "站点管理"
