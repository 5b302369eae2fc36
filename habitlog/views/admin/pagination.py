"""管理端游标分页"""
from datetime import datetime
from django.db.models import Q
from django.utils.dateparse import parse_datetime


class CursorError(ValueError):
    pass


def parse_page_size(value, default=20, maximum=100):
    page_size = default
    if value:
        try:
            page_size = int(value)
        except (TypeError, ValueError):
            raise CursorError('limit 必须为数字')
    return min(max(page_size, 1), maximum)


def parse_cursor(value):
    """游标格式：<created_at ISO 时间>#<id>"""
    cursor_param = (value or '').strip()
    if not cursor_param:
        return None
    parts = cursor_param.split('#', 1)
    if len(parts) == 2:
        ts_str, pk_str = parts
        dt = parse_datetime(ts_str)
        if not dt:
            try:
                dt = datetime.fromisoformat(ts_str)
            except ValueError:
                dt = None
        try:
            pk_val = int(pk_str)
        except (TypeError, ValueError):
            pk_val = None
        if dt and pk_val is not None:
            return dt, pk_val
    raise CursorError('cursor 无效')


def paginate(qs, request):
    """按 (-created_at, -id) 分页，返回 (当前页对象列表, has_more, next_cursor)"""
    page_size = parse_page_size(request.GET.get('limit'))
    cursor = parse_cursor(request.GET.get('cursor'))
    qs = qs.order_by('-created_at', '-id')
    if cursor:
        cursor_dt, cursor_pk = cursor
        qs = qs.filter(Q(created_at__lt=cursor_dt) | Q(created_at=cursor_dt, id__lt=cursor_pk))
    rows = list(qs[: page_size + 1])
    has_more = len(rows) > page_size
    sliced = rows[:page_size]
    next_cursor = f"{sliced[-1].created_at.isoformat()}#{sliced[-1].id}" if has_more and sliced else None
    return sliced, has_more, next_cursor
