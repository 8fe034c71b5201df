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
请求分发相关异常

Classes:
    ResponseHandlerNotFound: 解析出的响应处理函数不存在
"""

import logging

from .base import ResponsesException
from .codes import StandardErrorCodes


class ResponseHandlerNotFound(ResponsesException):
    """
    响应处理函数不存在

    render_with 在解析出 respond_for_<action> 后，若注册表中找不到该处理函数则抛出此异常。
    render_with 会捕获它并渲染 "Action not supported" 结构化响应，不会向外传播。

    Example:
        raise ResponseHandlerNotFound(action="export_csv", handler_name="respond_for_export_csv")
    """

    default_error_code = StandardErrorCodes.ACTION_NOT_SUPPORTED
    log_level = logging.WARNING

    def __init__(self, action: str, handler_name: str, **kwargs):
        """
        Args:
            action: 请求的 action 名称
            handler_name: 期望存在的处理函数名
            **kwargs: 传递给父类的其他参数
        """
        self._action = action
        self._handler_name = handler_name

        if "message" not in kwargs:
            kwargs["message"] = (
                f"No response handler '{handler_name}' for action '{action}'"
            )
        super().__init__(**kwargs)

    @property
    def action(self) -> str:
        return self._action

    @property
    def handler_name(self) -> str:
        return self._handler_name
