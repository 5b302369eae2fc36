"""用户端视图模块统一导出"""
from habitlog.views.api.auth import user_register, user_login, user_logout
from habitlog.views.api.home import home, challenge
from habitlog.views.api.logs import logs_list, log_detail, log_create
from habitlog.views.api.games import game_ox, game_card
from habitlog.views.api.profile import user_profile_handler, user_avatar_upload, user_dday_update

__all__ = [
    'user_register',
    'user_login',
    'user_logout',
    'home',
    'challenge',
    'logs_list',
    'log_detail',
    'log_create',
    'game_ox',
    'game_card',
    'user_profile_handler',
    'user_avatar_upload',
    'user_dday_update',
]
