"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import abc
import logging
from typing import Any

from django.utils.module_loading import import_string
from rest_framework.serializers import BaseSerializer

from drf_responses.exceptions import SerializerNotFoundError
from drf_responses.records import is_collection
from drf_responses.settings import responses_settings

logger = logging.getLogger(__name__)


__doc__ = """
序列化器约定与序列化辅助函数

序列化器约定
------------
任何序列化器只需满足：以 (record, context) 构造，并提供 to_dict() 返回扁平的键值结构。
框架从不关心序列化器内部实现，只负责调用并将结果放入响应信封。

DRF 原生的 Serializer 同样可以直接使用，此时以 serializer_class(record, context=context).data 取值。

```python
from drf_responses.serializers import ResponseSerializer, SerializerRegistry

@SerializerRegistry.register
class WidgetSerializer(ResponseSerializer):
    def to_dict(self):
        if self.view == "minimal":
            return {"id": self.resource.id}
        return {"id": self.resource.id, "name": self.resource.name}
```

序列化器注册表
--------------
render_with 未显式传入 serializer 时，会按命名约定（控制器名单数化 + 大驼峰 + Serializer）
在 SerializerRegistry 中查找，而不是在全局命名空间中按字符串查找类。
也可以通过 settings.DRF_RESPONSES["SERIALIZERS"] 以导入路径的形式批量注册。
"""


class ResponseSerializer(abc.ABC):
    """
    序列化器基类

    Attributes:
        resource: 待序列化的对象
        context: 请求上下文（current_user、view 等）
    """

    def __init__(self, resource: Any, context: dict | None = None):
        self.resource = resource
        self.context = context if context is not None else {}

    @abc.abstractmethod
    def to_dict(self) -> dict:
        """返回对象的键值表示，子类必须实现"""
        raise NotImplementedError

    @property
    def current_user(self):
        return self.context.get(responses_settings.IDENTITY_CONTEXT_KEY)

    @property
    def view(self):
        """当前请求的展示视图，例如 full / summary / minimal"""
        return self.context.get("view")

    def serialize_association(self, association, serializer_class):
        """
        序列化关联对象，沿用当前 context

        :param association: 单个对象或集合
        :param serializer_class: 关联对象使用的序列化器
        :return: dict / list[dict] / None
        """
        if association is None:
            return None
        if is_collection(association):
            return serialize_collection(association, serializer_class, self.context)
        return serialize_item(association, serializer_class, self.context)


def serialize_item(item: Any, serializer_class: type, context: dict | None = None):
    """
    使用序列化器序列化单个对象
    """
    context = context if context is not None else {}
    if isinstance(serializer_class, type) and issubclass(
        serializer_class, BaseSerializer
    ):
        return serializer_class(item, context=context).data
    return serializer_class(item, context).to_dict()


def serialize_collection(
    collection: Any, serializer_class: type, context: dict | None = None
) -> list:
    """
    逐个序列化集合中的对象，保持原有顺序
    """
    return [serialize_item(item, serializer_class, context) for item in collection]


class SerializerRegistry:
    """
    序列化器注册表

    Example:
        # 装饰器方式
        @SerializerRegistry.register
        class WidgetSerializer(ResponseSerializer):
            ...

        # 指定名称
        SerializerRegistry.register(LegacyWidgetSerializer, name="WidgetSerializer")

        # 查找
        serializer_class = SerializerRegistry.resolve("WidgetSerializer")
    """

    _serializers: dict[str, type] = {}

    @classmethod
    def register(cls, serializer_class: type | None = None, name: str | None = None):
        """
        注册序列化器，可直接调用也可作为装饰器使用

        同名注册时后注册者覆盖先注册者。
        """

        def decorator(klass):
            key = name or klass.__name__
            if key in cls._serializers and cls._serializers[key] is not klass:
                logger.debug("serializer %s re-registered by %r", key, klass)
            cls._serializers[key] = klass
            return klass

        if serializer_class is None:
            return decorator
        return decorator(serializer_class)

    @classmethod
    def get(cls, name: str) -> type | None:
        return cls._serializers.get(name)

    @classmethod
    def resolve(cls, name: str, controller: str | None = None) -> type:
        """
        按名称查找序列化器

        Raises:
            SerializerNotFoundError: 名称未注册时
        """
        serializer_class = cls._serializers.get(name)
        if serializer_class is None:
            raise SerializerNotFoundError(serializer_name=name, controller=controller)
        return serializer_class

    @classmethod
    def load_from_settings(cls) -> None:
        """
        注册 settings.DRF_RESPONSES["SERIALIZERS"] 中声明的序列化器
        """
        for name, path in responses_settings.SERIALIZERS.items():
            serializer_class = import_string(path) if isinstance(path, str) else path
            cls.register(serializer_class, name=name)

    @classmethod
    def all(cls) -> dict[str, type]:
        return cls._serializers.copy()

    @classmethod
    def unregister(cls, name: str) -> type | None:
        return cls._serializers.pop(name, None)

    @classmethod
    def clear(cls) -> None:
        """
        清空注册表（仅用于测试）
        """
        cls._serializers.clear()
