"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

from collections.abc import Iterable, Iterator, Sized

from django.db.models.query import QuerySet
from django.utils import timezone

from drf_responses.exceptions import ResponderNotImplementedError
from drf_responses.pagination import is_paginated, pagination_meta
from drf_responses.records import is_collection
from drf_responses.settings import responses_settings

__doc__ = """
Responder - 独立于视图的响应对象

Responder 把某个资源的自定义 action 响应集中到一个类中，让视图保持简洁。
每次 render_with 都会新建一个 Responder 实例，响应生成后即丢弃。

```python
class ProductResponder(ApplicationResponder):
    def featured(self):
        return self.render_collection_with_type(
            type="featured", additional_meta={"category": self.params.get("category_id")}
        )

class ProductViewSet(RespondableViewSet):
    @action(detail=False)
    def featured(self, request):
        return self.render_with(Product.objects.featured(), responder=ProductResponder, action="featured")
```

render_with 指定了 action 且 Responder 上存在同名的公开 action 方法时调用它，
否则调用 render()。基类中的辅助方法不会被当作 action。
"""


class Responder:
    """
    Responder 基类

    Attributes:
        view: 视图实例
        record: 待渲染的对象或集合
        serializer_class: 序列化器类
        context: 请求上下文
    """

    # 不能作为 action 被 render_with 调用的名称
    helper_methods = frozenset(
        {
            "view",
            "record",
            "serializer_class",
            "context",
            "helper_methods",
            "has_action",
            "serialize_collection",
            "serialize_item",
            "params",
            "request",
            "current_user",
            "render_json",
            "is_collection",
            "is_single_item",
            "is_paginated",
            "render_collection_with_meta",
        }
    )

    def __init__(self, view, record, serializer_class, context: dict | None = None):
        self.view = view
        # 一次性迭代器展开为列表
        self.record = list(record) if isinstance(record, Iterator) else record
        self.serializer_class = serializer_class
        self.context = context if context is not None else {}

    def render(self):
        """
        渲染响应，子类必须实现
        """
        raise ResponderNotImplementedError(responder_name=type(self).__name__)

    @classmethod
    def has_action(cls, name: str) -> bool:
        """
        name 是否为该 Responder 公开的 action 方法
        """
        if not name or name.startswith("_") or name in cls.helper_methods:
            return False
        return callable(getattr(cls, name, None))

    def serialize_collection(self, records=None, serializer_class=None, context=None):
        """
        序列化集合，参数缺省时使用 Responder 持有的值
        """
        return self.view.serialize_collection(
            self.record if records is None else records,
            serializer_class or self.serializer_class,
            self.context if context is None else context,
        )

    def serialize_item(self, item=None, serializer_class=None, context=None):
        return self.view.serialize_item(
            self.record if item is None else item,
            serializer_class or self.serializer_class,
            self.context if context is None else context,
        )

    @property
    def request(self):
        return getattr(self.view, "request", None)

    @property
    def params(self):
        """
        请求的查询参数
        """
        request = self.request
        if request is None:
            return {}
        return getattr(request, "query_params", request.GET)

    @property
    def current_user(self):
        return self.context.get(
            responses_settings.IDENTITY_CONTEXT_KEY,
            getattr(self.request, "user", None),
        )

    def render_json(self, data, status=None, headers=None):
        return self.view.render_json(data, status=status, headers=headers)

    def is_collection(self) -> bool:
        return is_collection(self.record)

    def is_single_item(self) -> bool:
        return not self.is_collection()

    def is_paginated(self) -> bool:
        return is_paginated(self.record)

    def render_collection_with_meta(self, records=None, additional_meta=None):
        """
        渲染集合并自动附带 meta

        - 集合已分页：分页信息，合并 additional_meta
        - 未分页但 additional_meta 非空：additional_meta
        - 否则不输出 meta
        """
        records = self.record if records is None else records
        additional_meta = additional_meta or {}

        response = {"data": self.serialize_collection(records)}
        if is_paginated(records):
            response["meta"] = {
                **pagination_meta(records, self.context),
                **additional_meta,
            }
        elif additional_meta:
            response["meta"] = dict(additional_meta)
        return self.render_json(response)


DEFAULT_FILTER_KEYS = ("category_id", "level", "status", "sort_by", "limit")


class ApplicationResponder(Responder):
    """
    项目级 Responder 基类，提供常用的带 meta 渲染方法

    Example:
        class ProductResponder(ApplicationResponder):
            def popular(self):
                return self.render_collection_with_type(
                    type="popular", additional_meta={"period": self.params.get("period", "month")}
                )
    """

    helper_methods = Responder.helper_methods | {
        "render_collection_with_type",
        "render_item_with_meta",
        "render_grouped_data",
        "base_meta",
        "record_count",
        "param_present",
        "filters_applied",
    }

    def render_collection_with_type(self, type=None, additional_meta=None):
        """
        渲染集合，meta 包含 base_meta、type 与 additional_meta
        """
        meta = self.base_meta()
        if type is not None:
            meta["type"] = type
        meta.update(additional_meta or {})
        return self.render_json({"data": self.serialize_collection(), "meta": meta})

    def render_item_with_meta(self, additional_meta=None):
        meta = self.base_meta()
        meta.update(additional_meta or {})
        return self.render_json({"data": self.serialize_item(), "meta": meta})

    def render_grouped_data(self, groups):
        """
        直接输出已分组好的数据
        """
        return self.render_json(groups)

    def base_meta(self) -> dict:
        """
        所有响应共有的 meta：时间戳与记录数（仅集合）
        """
        meta = {"timestamp": timezone.now().isoformat()}
        count = self.record_count()
        if count is not None:
            meta["count"] = count
        return meta

    def record_count(self) -> int | None:
        if not self.is_collection():
            return None
        # QuerySet 使用 COUNT 查询，避免把整个结果集加载到内存
        if isinstance(self.record, QuerySet):
            return self.record.count()
        if isinstance(self.record, Sized):
            return len(self.record)
        return len(list(self.record))

    def param_present(self, key) -> bool:
        value = self.params.get(key)
        return value not in (None, "", [], {})

    def filters_applied(self, filter_keys: Iterable = DEFAULT_FILTER_KEYS) -> dict | None:
        """
        收集请求中出现的过滤参数，没有时返回 None
        """
        filters = {key: self.params.get(key) for key in filter_keys if self.param_present(key)}
        return filters or None
