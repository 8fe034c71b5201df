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
DRF-Responses 基础异常模块
"""

import logging
from typing import Any

from django.utils.translation import gettext as _

from .codes import ErrorCode, StandardErrorCodes


class ResponsesException(Exception):
    """
    DRF-Responses 异常基类

    所有框架异常的根类，提供：
    - 结构化的错误码系统
    - 国际化支持
    - 异常链追踪

    Example:
        raise ResponsesException(
            message="Custom error message",
            error_code=StandardErrorCodes.CONFIGURATION_ERROR,
        )
    """

    # 默认错误码，子类应覆盖
    default_error_code: ErrorCode = StandardErrorCodes.CONFIGURATION_ERROR

    # 日志级别
    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        data: Any = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.default_error_code
        if message is None:
            message = _(self._error_code.default_message)

        self._message = message
        self._data = data
        super().__init__(message)
        if cause:
            self.__cause__ = cause

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def http_status(self) -> int:
        """HTTP 状态码"""
        return self._error_code.http_status

    @property
    def message(self) -> str:
        """错误消息"""
        return self._message

    @property
    def data(self) -> Any:
        """附加数据"""
        return self._data

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "data": self._data,
        }

    def log(self, logger: logging.Logger | None = None):
        if logger is None:
            logger = logging.getLogger(__name__)

        logger.log(
            self.log_level, "[%s] %s", self.code, self.message, exc_info=self.__cause__
        )

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code}, message={self.message!r})"
