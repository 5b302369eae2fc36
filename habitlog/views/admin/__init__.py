"""管理员视图模块统一导出"""
from habitlog.views.admin.auth import admin_login, admin_logout
from habitlog.views.admin.users import admin_users, admin_user_points_reset
from habitlog.views.admin.points import admin_points_records

__all__ = [
    'admin_login',
    'admin_logout',
    'admin_users',
    'admin_user_points_reset',
    'admin_points_records',
]
