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
DRF-Responses Exceptions Module

Example:
    from drf_responses.exceptions import SerializerNotFoundError

    raise SerializerNotFoundError(serializer_name="WidgetSerializer")

配置 DRF:
    REST_FRAMEWORK = {
        'EXCEPTION_HANDLER': 'drf_responses.exceptions.responses_exception_handler'
    }
"""

# Base - 基础异常类
from drf_responses.exceptions.base import ResponsesException

# Error Codes - 错误码系统
from drf_responses.exceptions.codes import (
    ErrorCode,
    ErrorCodeRange,
    ErrorCodeRegistry,
    StandardErrorCodes,
)

# Configuration - 配置异常
from drf_responses.exceptions.configuration import (
    ResponderNotImplementedError,
    SerializerNotFoundError,
)

# Dispatch - 分发异常
from drf_responses.exceptions.dispatch import ResponseHandlerNotFound

# Handlers - DRF 异常处理器
from drf_responses.exceptions.handlers import responses_exception_handler

__all__ = [
    "ResponsesException",
    "ErrorCode",
    "ErrorCodeRange",
    "ErrorCodeRegistry",
    "StandardErrorCodes",
    "ResponderNotImplementedError",
    "SerializerNotFoundError",
    "ResponseHandlerNotFound",
    "responses_exception_handler",
]
