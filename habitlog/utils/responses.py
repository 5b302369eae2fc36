"""统一响应工具"""
from django.http import JsonResponse


def json_ok(data=None, status=200, message='success'):
    """统一成功响应结构
    - code: 业务状态码，默认等于 HTTP 状态码（200/201）
    - msg: 人类可读提示，默认 'success'
    - data: 成功时返回的数据；若传入 None，返回空对象 {}
    """
    payload = {
        'code': status,
        'msg': message,
        'data': {} if data is None else data,
    }
    return JsonResponse(payload, status=status, json_dumps_params={'ensure_ascii': False})


def json_err(message='错误', code=None, status=400):
    """统一错误响应结构，data 固定为 None"""
    payload = {
        'code': code or status,
        'msg': message,
        'data': None,
    }
    return JsonResponse(payload, status=status, json_dumps_params={'ensure_ascii': False})


def reward_ok(message: str, point_change: int, point: int, extra: dict = None, status=200):
    """积分类接口响应：data 中包含 message / pointChange / point"""
    data = {
        'message': message,
        'pointChange': point_change,
        'point': point,
    }
    if extra:
        data.update(extra)
    return json_ok(data, status=status, message=message)
