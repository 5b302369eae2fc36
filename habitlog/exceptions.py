"""业务异常定义"""


class HabitLogError(Exception):
    """业务异常基类"""


class RewardConflictError(HabitLogError):
    """并发请求导致积分条件更新多次失败"""


class StorageError(HabitLogError):
    """上传文件保存失败"""
