"""上传文件存储服务"""
import logging
import os
import time

from django.conf import settings
from django.core.files.storage import default_storage

from habitlog.exceptions import StorageError


logger = logging.getLogger('log')


def generate_storage_path(filename: str, directory: str = 'avatars') -> str:
    """生成存储路径：原文件名 + 毫秒时间戳 + 扩展名"""
    base, ext = os.path.splitext(os.path.basename(filename or ''))
    base = base or 'image'
    return f"{directory}/{base}{int(time.time() * 1000)}{ext}"


def is_uploaded_url(url: str) -> bool:
    return bool(url) and url.startswith(settings.MEDIA_URL)


def save_upload(uploaded_file, directory: str = 'avatars') -> str:
    """保存上传文件，返回可访问的 URL"""
    if uploaded_file.size > settings.HABITLOG_AVATAR_MAX_BYTES:
        raise ValueError(f'文件大小不能超过 {settings.HABITLOG_AVATAR_MAX_BYTES // (1024 * 1024)}MB')
    path = generate_storage_path(uploaded_file.name, directory)
    try:
        saved_path = default_storage.save(path, uploaded_file)
    except OSError as exc:
        logger.error(f'保存上传文件失败: path={path}, error={exc}')
        raise StorageError('保存上传文件失败') from exc
    return default_storage.url(saved_path)


def delete_upload(url: str):
    """删除之前上传的文件，非本站上传的地址直接忽略"""
    if not is_uploaded_url(url):
        return
    path = url[len(settings.MEDIA_URL):]
    try:
        default_storage.delete(path)
    except OSError as exc:
        raise StorageError('删除上传文件失败') from exc
