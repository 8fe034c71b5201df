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
DRF-Responses 异常处理器

配置方式:
    REST_FRAMEWORK = {
        'EXCEPTION_HANDLER': 'drf_responses.exceptions.handlers.responses_exception_handler'
    }
"""

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from .base import ResponsesException

logger = logging.getLogger(__name__)


def responses_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    DRF-Responses 异常处理器

    处理以下类型的异常：
    1. ResponsesException 及其子类 - 记录日志并按其 http_status 渲染
    2. 其他异常 - 交给 DRF 默认处理器（返回 None 时由 Django 继续抛出）

    Args:
        exc: 异常实例
        context: DRF 提供的上下文，包含 view, args, kwargs, request 等

    Returns:
        Response 对象，或 None
    """
    if isinstance(exc, ResponsesException):
        exc.log(logger)
        return Response(exc.to_dict(), status=exc.http_status)

    return exception_handler(exc, context)
