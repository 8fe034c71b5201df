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
请求上下文

每次 render_with 都会新建一个 context 字典，贯穿处理函数与序列化器，请求结束即丢弃。
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def build_context(
    context: Mapping | None = None,
    identity: Mapping | None = None,
    requested_view: Any = None,
) -> dict:
    """
    构建请求上下文

    1. 以调用方传入的 context 为基础
    2. 合并身份信息（如 current_user）
    3. 仅当 context 中没有 view 时，才使用请求参数中的 view

    :param context: 调用方传入的上下文
    :param identity: 身份信息
    :param requested_view: 请求参数中的 view
    :return: 新的上下文字典
    """
    merged = {**(context or {}), **(identity or {})}
    if not merged.get("view"):
        merged["view"] = requested_view or None
    return merged


@dataclass(frozen=True)
class RequestSnapshot:
    """
    处理函数调用时的只读请求快照

    define_crud_responses 的 collection_context / item_context 以它作为唯一参数，
    需要的请求状态都从这里读取，而不是隐式访问视图实例。

    Example:
        def collection_context(snapshot):
            return {"meta": {"total": len(snapshot.record), "page": snapshot.params.get("page")}}
    """

    action: str
    record: Any
    user: Any = None
    params: Mapping = field(default_factory=dict)
    kwargs: Mapping = field(default_factory=dict)
    context: Mapping = field(default_factory=dict)

    @classmethod
    def capture(cls, view, action, record, context: Mapping) -> "RequestSnapshot":
        """
        从视图实例截取快照
        """
        request = getattr(view, "request", None)
        query_params = getattr(request, "query_params", None)
        return cls(
            action=action,
            record=record,
            user=getattr(request, "user", None),
            # QueryDict.dict() 对多值参数只保留最后一个值
            params=MappingProxyType(
                query_params.dict() if query_params is not None else {}
            ),
            kwargs=MappingProxyType(dict(getattr(view, "kwargs", None) or {})),
            context=MappingProxyType(dict(context)),
        )
