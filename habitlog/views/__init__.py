"""视图模块统一导出"""
from django.views.decorators.csrf import requires_csrf_token

from habitlog.utils.responses import json_err

# 用户端视图
from habitlog.views.api import (
    user_register,
    user_login,
    user_logout,
    home,
    challenge,
    logs_list,
    log_detail,
    log_create,
    game_ox,
    game_card,
    user_profile_handler,
    user_avatar_upload,
    user_dday_update,
)

# 管理员视图
from habitlog.views.admin import (
    admin_login,
    admin_logout,
    admin_users,
    admin_user_points_reset,
    admin_points_records,
)


def not_found(request, exception=None):
    return json_err(f'{request.method} {request.path} 接口不存在', status=404)


@requires_csrf_token
def server_error(request):
    return json_err('服务器内部错误', status=500)
