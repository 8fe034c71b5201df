"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

from rest_framework import viewsets
from rest_framework.views import APIView

from drf_responses.respondable import RespondableMixin

"""
可直接继承的视图基类
"""


class RespondableViewSet(RespondableMixin, viewsets.GenericViewSet):
    """
    支持 render_with 的 ViewSet

    DRF 的 list / retrieve / partial_update 通过内置别名对应到 index / show / update，
    @action 生成的自定义端点直接以端点名作为 action。
    """

    filter_backends = []
    pagination_class = None

    def get_queryset(self):
        """
        添加默认函数，避免 schema 生成报错
        """
        return


class RespondableAPIView(RespondableMixin, APIView):
    """
    支持 render_with 的 APIView

    APIView 没有 action 的概念，按 HTTP 方法与 URL 中是否带主键推导：

    ┌─────────────────────────────────────────────────────┐
    │   HTTP方法    URL带主键    action                    │
    │   ─────────────────────────────────────────         │
    │   GET         否          index                     │
    │   GET         是          show                      │
    │   POST        -           create                    │
    │   PUT/PATCH   -           update                    │
    │   DELETE      -           destroy                   │
    └─────────────────────────────────────────────────────┘
    """

    HTTP_METHOD_ACTIONS = {
        "POST": "create",
        "PUT": "update",
        "PATCH": "update",
        "DELETE": "destroy",
    }

    # URL 中主键参数名
    lookup_url_kwarg = "pk"

    def get_current_action(self):
        request = getattr(self, "request", None)
        if request is None:
            return None

        method = request.method.upper()
        if method == "GET":
            return "show" if self.lookup_url_kwarg in self.kwargs else "index"
        return self.HTTP_METHOD_ACTIONS.get(method, method.lower())
