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
DRF-Responses 错误码系统

Example:
    from drf_responses.exceptions.codes import ErrorCode, ErrorCodeRegistry

    MY_ERROR = ErrorCodeRegistry.register(
        ErrorCode(5001, "error.custom", "Custom error", 400)
    )
"""

from dataclasses import dataclass
from enum import IntEnum


class ErrorCodeRange(IntEnum):
    """
    错误码范围枚举

    范围划分:
        - 1000-1999: 配置错误（启动期即可发现的问题）
        - 3000-3999: 请求分发错误
        - 5000+: 业务逻辑错误（用户自定义）
    """

    CONFIGURATION = 1000
    DISPATCH = 3000
    BUSINESS = 5000


@dataclass(frozen=True)
class ErrorCode:
    """
    错误码定义

    Attributes:
        code: 错误码数值
        message_key: 用于 i18n 的消息键
        default_message: 默认错误消息
        http_status: 对应的 HTTP 状态码，默认 500
    """

    code: int
    message_key: str
    default_message: str
    http_status: int = 500

    def __str__(self) -> str:
        return f"{self.code}"


class ErrorCodeRegistry:
    """
    错误码注册表

    支持运行时注册自定义错误码，确保错误码唯一性。
    """

    _codes: dict[int, ErrorCode] = {}

    @classmethod
    def register(cls, error_code: ErrorCode) -> ErrorCode:
        """
        注册错误码

        Raises:
            ValueError: 当错误码已存在时
        """
        if error_code.code in cls._codes:
            existing = cls._codes[error_code.code]
            raise ValueError(
                f"Error code {error_code.code} already registered as '{existing.message_key}'"
            )
        cls._codes[error_code.code] = error_code
        return error_code

    @classmethod
    def get(cls, code: int) -> ErrorCode | None:
        return cls._codes.get(code)

    @classmethod
    def all(cls) -> dict[int, ErrorCode]:
        return cls._codes.copy()

    @classmethod
    def unregister(cls, code: int) -> ErrorCode | None:
        return cls._codes.pop(code, None)


class StandardErrorCodes:
    """
    标准错误码集合
    """

    # ==================== 配置错误 (1000-1999) ====================
    CONFIGURATION_ERROR = ErrorCode(
        1000, "error.configuration", "Configuration error", 500
    )
    SERIALIZER_NOT_FOUND = ErrorCode(
        1001, "error.serializer_not_found", "Serializer not found", 500
    )
    NOT_IMPLEMENTED = ErrorCode(1002, "error.not_implemented", "Not implemented", 501)

    # ==================== 请求分发 (3000-3999) ====================
    ACTION_NOT_SUPPORTED = ErrorCode(
        3000, "error.action_not_supported", "Action not supported", 400
    )


def _register_standard_codes():
    """注册所有标准错误码到注册表"""
    for attr_name in dir(StandardErrorCodes):
        if attr_name.startswith("_"):
            continue
        attr = getattr(StandardErrorCodes, attr_name)
        if isinstance(attr, ErrorCode):
            try:
                ErrorCodeRegistry.register(attr)
            except ValueError:
                # 已注册则跳过
                pass


_register_standard_codes()
