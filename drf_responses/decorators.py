"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

# 被 response_for 标记的函数上记录 action 列表的属性名
RESPONSE_ACTIONS_ATTR = "response_actions"


def response_for(*actions):
    """
    将视图方法标记为一个或多个 action 的响应处理函数

    类创建时由 RespondableMixin 收集，并以 respond_for_<action> 的名称安装到类上。

    Example:
        class WidgetViewSet(RespondableViewSet):
            @response_for("dashboard", "admin_dashboard")
            def dashboard_response(self, record, serializer_class, context):
                return self.render_json({"data": self.serialize_item(record, serializer_class, context)})
    """
    if not actions:
        raise ValueError("response_for requires at least one action")

    def decorator(func):
        setattr(func, RESPONSE_ACTIONS_ATTR, tuple(str(action) for action in actions))
        return func

    return decorator
