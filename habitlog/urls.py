"""habitlog URL Configuration

接口统一以 /api/ 开头，返回 {code, msg, data} 结构的 JSON。
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import re_path

from habitlog import views


urlpatterns = [
    # ========== 用户端接口 ==========

    # 注册、登录、退出（会话 Cookie）
    re_path(r'^api/register/?$', views.user_register),                       # POST
    re_path(r'^api/login/?$', views.user_login),                             # POST
    re_path(r'^api/logout/?$', views.user_logout),                           # POST/GET

    # 首页与挑战
    re_path(r'^api/home/?$', views.home),                                    # GET
    re_path(r'^api/challenge/?$', views.challenge),                          # GET

    # 打卡日志
    re_path(r'^api/log/?$', views.log_create),                               # POST 发布日志（每日首次奖励积分）
    re_path(r'^api/logs/?$', views.logs_list),                               # GET
    re_path(r'^api/logs/(?P<log_id>\d+)/?$', views.log_detail),              # GET

    # 小游戏
    re_path(r'^api/game/ox/?$', views.game_ox),                              # POST
    re_path(r'^api/game/card/?$', views.game_card),                          # POST

    # 个人信息
    re_path(r'^api/profile/?$', views.user_profile_handler),                 # GET/PUT
    re_path(r'^api/profile/avatar/?$', views.user_avatar_upload),            # POST multipart
    re_path(r'^api/dday/?$', views.user_dday_update),                        # PUT

    # ========== 管理员端接口 ==========
    re_path(r'^api/admin/login/?$', views.admin_login),                                                # POST
    re_path(r'^api/admin/logout/?$', views.admin_logout),                                              # POST
    re_path(r'^api/admin/users/?$', views.admin_users),                                                # GET
    re_path(r'^api/admin/users/(?P<user_id>\d+)/points/reset/?$', views.admin_user_points_reset),      # POST
    re_path(r'^api/admin/points-records/?$', views.admin_points_records),                              # GET

    # Django Admin
    re_path(r'^admin/', admin.site.urls),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'habitlog.views.not_found'
handler500 = 'habitlog.views.server_error'
