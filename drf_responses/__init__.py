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
DRF-Responses 框架

为 Django REST Framework 视图提供按 action 选择响应方式的能力。

核心模块:
    - respondable: RespondableMixin，render_with 分发入口与处理函数注册表
    - viewsets: 可直接继承的 RespondableViewSet / RespondableAPIView
    - responders: 独立于视图的 Responder
    - serializers: 序列化器约定与 SerializerRegistry
    - pagination: 分页识别与分页元信息
    - exceptions: 异常体系

基本用法:
    from drf_responses import RespondableViewSet

    class WidgetViewSet(RespondableViewSet):
        def list(self, request):
            return self.render_with(Widget.objects.all())
"""

from drf_responses.decorators import response_for
from drf_responses.pagination import Paginated, PaginatedList, paginate
from drf_responses.respondable import RespondableMixin
from drf_responses.responders import ApplicationResponder, Responder
from drf_responses.serializers import ResponseSerializer, SerializerRegistry
from drf_responses.viewsets import RespondableAPIView, RespondableViewSet

__version__ = "0.1.0"

__all__ = [
    "RespondableMixin",
    "RespondableViewSet",
    "RespondableAPIView",
    "response_for",
    "Responder",
    "ApplicationResponder",
    "ResponseSerializer",
    "SerializerRegistry",
    "Paginated",
    "PaginatedList",
    "paginate",
]
