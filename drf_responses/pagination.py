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
分页识别与分页元信息

一个 record 只要提供 current_page / total_pages / total_count 三项，就被视为已分页，
index 响应会自动附带 meta：

    {
        "data": [...],
        "meta": {"current_page": 2, "total_pages": 5, "total_count": 48, "per_page": 10}
    }

Django 的 Page 对象会通过 DjangoPage 适配后参与判断。
"""

from typing import Any, Protocol, runtime_checkable

from django.core.paginator import Page, Paginator


@runtime_checkable
class Paginated(Protocol):
    """
    已分页集合需要提供的能力
    """

    current_page: int
    total_pages: int
    total_count: int


class PaginatedList(list):
    """
    带分页信息的列表

    Example:
        records = PaginatedList(items, current_page=1, total_pages=3, total_count=25, per_page=10)
    """

    def __init__(
        self,
        items=(),
        current_page: int = 1,
        total_pages: int = 1,
        total_count: int | None = None,
        per_page: int | None = None,
    ):
        super().__init__(items)
        self.current_page = current_page
        self.total_pages = total_pages
        self.total_count = len(self) if total_count is None else total_count
        self.per_page = per_page


class DjangoPage:
    """
    将 django.core.paginator.Page 适配为 Paginated
    """

    def __init__(self, page: Page):
        self.page = page

    @property
    def current_page(self) -> int:
        return self.page.number

    @property
    def total_pages(self) -> int:
        return self.page.paginator.num_pages

    @property
    def total_count(self) -> int:
        return self.page.paginator.count

    @property
    def per_page(self) -> int:
        return self.page.paginator.per_page

    def __iter__(self):
        return iter(self.page.object_list)

    def __len__(self):
        return len(self.page)

    def __repr__(self):
        return f"<DjangoPage {self.current_page} of {self.total_pages}>"


def paginate(object_list, page_number=1, per_page=25) -> DjangoPage:
    """
    使用 Django Paginator 对列表或 QuerySet 分页

    页码越界时返回最后一页，非法页码返回第一页。
    """
    return DjangoPage(Paginator(object_list, per_page).get_page(page_number))


def as_paginated(record) -> Paginated | None:
    """
    返回 record 的 Paginated 视图，未分页时返回 None
    """
    if isinstance(record, Page):
        return DjangoPage(record)
    if isinstance(record, Paginated):
        return record
    return None


def is_paginated(record) -> bool:
    return as_paginated(record) is not None


def pagination_meta(record, context: dict | None = None) -> dict[str, Any]:
    """
    提取分页元信息

    per_page 依次取自 record.limit_value、record.per_page、context["per_page"]；
    取不到的字段直接省略，不会以 None 或 0 出现。
    context["meta"] 存在时合并到结果之上（同名键以 context["meta"] 为准）。

    :param record: 已分页的集合
    :param context: 请求上下文
    :return: 分页元信息字典
    """
    context = context or {}
    paginated = as_paginated(record) or record

    per_page = (
        getattr(paginated, "limit_value", None)
        or getattr(paginated, "per_page", None)
        or context.get("per_page")
    )
    meta = {
        "current_page": getattr(paginated, "current_page", None),
        "total_pages": getattr(paginated, "total_pages", None),
        "total_count": getattr(paginated, "total_count", None),
        "per_page": per_page,
    }
    meta = {key: value for key, value in meta.items() if value is not None}

    if context.get("meta") is not None:
        meta.update(context["meta"])
    return meta
