"""个人信息、头像与 D-Day 设置"""
import logging
from django.views.decorators.http import require_http_methods
from django.utils.dateparse import parse_date

from habitlog.decorators import login_required
from habitlog.utils.responses import json_ok, json_err
from habitlog.utils.request import load_json_body, str_field
from habitlog.models import UserInfo
from habitlog.services.user_service import update_fields, serialize_profile, goal_summary
from habitlog.services.storage_service import save_upload, delete_upload
from habitlog.exceptions import StorageError


logger = logging.getLogger('log')

FIELD_MAX_LENGTH = {
    'name': 20,
    'email': 100,
    'comment': 255,
}


@login_required
@require_http_methods(["GET", "PUT"])
def user_profile_handler(request, user):
    """个人信息 - GET查询 / PUT更新（name、email、comment，只更新传入的字段）"""
    if request.method == 'GET':
        return json_ok(serialize_profile(user))

    try:
        body = load_json_body(request)
    except ValueError as exc:
        return json_err(str(exc), status=400)

    changes = {}
    for field, max_length in FIELD_MAX_LENGTH.items():
        if field not in body:
            continue
        try:
            value = str_field(body, field).strip()
        except ValueError as exc:
            return json_err(str(exc), status=400)
        if len(value) > max_length:
            return json_err(f'{field} 最长 {max_length} 字', status=400)
        changes[field] = value or None

    if 'email' in changes:
        email = changes['email']
        if not email:
            return json_err('email 不能为空', status=400)
        if UserInfo.objects.filter(email=email).exclude(id=user.id).exists():
            return json_err('该邮箱已被使用', status=400)

    if changes:
        update_fields(user, **changes)
    return json_ok(serialize_profile(user), message='修改成功')


@login_required
@require_http_methods(["POST"])
def user_avatar_upload(request, user):
    """上传头像（multipart，字段名 image）"""
    image = request.FILES.get('image')
    if not image:
        return json_err('缺少上传文件 image', status=400)

    old_url = user.img_url
    try:
        new_url = save_upload(image, directory='avatars')
    except ValueError as exc:
        return json_err(str(exc), status=400)
    except StorageError as exc:
        return json_err(str(exc), status=500)

    update_fields(user, img_url=new_url)
    logger.info(f'用户更新头像: user_id={user.id}, img_url={new_url}')

    if old_url != new_url:
        try:
            delete_upload(old_url)
        except StorageError as exc:
            logger.warning(f'删除旧头像失败: {old_url}, error={exc}')

    return json_ok({'img_url': new_url}, message='头像上传成功')


@login_required
@require_http_methods(["PUT", "POST"])
def user_dday_update(request, user):
    """设置目标日期和目标名称，请求体：{"dday":"2026-12-31","goal_event":"자격증 시험"}"""
    try:
        body = load_json_body(request)
        raw_dday = str_field(body, 'dday')
        goal_event = str_field(body, 'goal_event').strip()
    except ValueError as exc:
        return json_err(str(exc), status=400)

    changes = {}
    if 'dday' in body:
        if raw_dday:
            try:
                dday = parse_date(raw_dday)
            except ValueError:
                dday = None
            if not dday:
                return json_err('dday 格式应为 YYYY-MM-DD', status=400)
            changes['dday'] = dday
        else:
            changes['dday'] = None

    if 'goal_event' in body:
        if len(goal_event) > 255:
            return json_err('goal_event 最长 255 字', status=400)
        changes['goal_event'] = goal_event or None

    if not changes:
        return json_err('缺少参数 dday 或 goal_event', status=400)

    update_fields(user, **changes)
    return json_ok(goal_summary(user), message='目标已更新')
