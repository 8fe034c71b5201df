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
配置相关异常

这类异常代表的是代码或配置缺陷，而不是某次请求的可恢复错误，因此总是向外传播。

Classes:
    SerializerNotFoundError: 序列化器无法解析
    ResponderNotImplementedError: Responder 子类未实现 render()
"""

from .base import ResponsesException
from .codes import StandardErrorCodes


class SerializerNotFoundError(ResponsesException):
    """
    序列化器无法解析

    按命名约定推导出的序列化器名在注册表中不存在时抛出。

    Example:
        raise SerializerNotFoundError(serializer_name="WidgetSerializer", controller="widgets")
    """

    default_error_code = StandardErrorCodes.SERIALIZER_NOT_FOUND

    def __init__(
        self, serializer_name: str, controller: str | None = None, **kwargs
    ):
        self._serializer_name = serializer_name
        self._controller = controller

        if "message" not in kwargs:
            message = f"Serializer '{serializer_name}' is not registered"
            if controller:
                message = f"{message} (required by controller '{controller}')"
            kwargs["message"] = message
        super().__init__(**kwargs)

    @property
    def serializer_name(self) -> str:
        return self._serializer_name

    @property
    def controller(self) -> str | None:
        return self._controller


class ResponderNotImplementedError(ResponsesException, NotImplementedError):
    """
    Responder 子类未实现 render() 时抛出
    """

    default_error_code = StandardErrorCodes.NOT_IMPLEMENTED

    def __init__(self, responder_name: str, method_name: str = "render", **kwargs):
        self._responder_name = responder_name

        if "message" not in kwargs:
            kwargs["message"] = f"{responder_name} must implement #{method_name} method"
        super().__init__(**kwargs)

    @property
    def responder_name(self) -> str:
        return self._responder_name
