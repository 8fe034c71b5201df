"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

"""
Record 能力适配

render_with 接收到的 record 可能是 Django Model、QuerySet、分页对象，也可能是任意实现了
save() / delete() / errors 的普通对象。这里在边界处把它们统一成几个能力判断和操作，
默认的 create / update / destroy 处理函数只依赖这些函数。
"""

import logging
from collections.abc import Iterable, Mapping

import inflection
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.core.paginator import Page
from django.db import models
from django.db.models import ProtectedError, RestrictedError
from django.db.models.query import QuerySet

logger = logging.getLogger(__name__)

# Django Model 在 save_record / destroy_record 失败后，错误消息暂存在该属性上
MODEL_ERRORS_ATTR = "_response_error_messages"


def is_collection(record) -> bool:
    """
    判断 record 是否为集合

    列表类值视为集合，但字符串、字节串和键值映射（单个对象的字典表示）不是。
    """
    if isinstance(record, (str, bytes, Mapping, models.Model)):
        return False
    if isinstance(record, (list, tuple, set, frozenset, QuerySet, Page)):
        return True
    return isinstance(record, Iterable)


def format_error_messages(errors) -> list[str]:
    """
    将各种形态的错误集合展开为可读的消息列表

    支持：
        - 提供 full_messages 的错误对象（属性或方法）
        - {"field": ["msg", ...]} 形式的映射（DRF serializer.errors、Django message_dict）
        - 消息列表
    """
    if errors is None:
        return []

    full_messages = getattr(errors, "full_messages", None)
    if full_messages is not None:
        return list(full_messages() if callable(full_messages) else full_messages)

    if isinstance(errors, Mapping):
        messages = []
        for field_name, field_errors in errors.items():
            if isinstance(field_errors, (str, bytes)):
                field_errors = [field_errors]
            for message in field_errors:
                if field_name in (NON_FIELD_ERRORS, "non_field_errors"):
                    messages.append(str(message))
                else:
                    messages.append(f"{inflection.humanize(field_name)} {message}")
        return messages

    if isinstance(errors, (str, bytes)):
        return [str(errors)]

    return [str(message) for message in errors]


def error_messages(record) -> list[str]:
    """
    读取 record 当前的校验错误消息
    """
    if isinstance(record, models.Model):
        return list(getattr(record, MODEL_ERRORS_ATTR, []))
    return format_error_messages(getattr(record, "errors", None))


def has_errors(record) -> bool:
    return bool(error_messages(record))


def save_record(record) -> bool:
    """
    持久化 record，返回是否成功

    Django Model 先执行 full_clean()，校验失败时记录错误并返回 False；
    其他对象直接调用 save() 并以其返回值为准。
    """
    if isinstance(record, models.Model):
        try:
            record.full_clean()
        except ValidationError as e:
            setattr(record, MODEL_ERRORS_ATTR, format_error_messages(e.message_dict))
            return False
        record.save()
        setattr(record, MODEL_ERRORS_ATTR, [])
        return True

    return bool(record.save())


def destroy_record(record) -> bool:
    """
    删除 record，返回是否成功

    Django Model 被外键保护（PROTECT / RESTRICT）而无法删除时记录错误并返回 False。
    """
    if isinstance(record, models.Model):
        try:
            record.delete()
        except (ProtectedError, RestrictedError) as e:
            logger.info("delete of %r refused: %s", record, e)
            setattr(record, MODEL_ERRORS_ATTR, [str(e.args[0])])
            return False
        return True

    return bool(record.delete())
