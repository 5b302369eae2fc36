"""请求体解析工具"""
import json


def load_json_body(request) -> dict:
    """解析 JSON 请求体，必须是对象；否则抛出 ValueError"""
    try:
        body = json.loads(request.body.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError('请求体格式错误') from exc
    if not isinstance(body, dict):
        raise ValueError('请求体格式错误')
    return body


def str_field(body: dict, name: str, default: str = '') -> str:
    """取字符串字段：缺省或 null 返回 default，其他非字符串类型抛出 ValueError"""
    value = body.get(name)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f'{name} 必须为字符串')
    return value
