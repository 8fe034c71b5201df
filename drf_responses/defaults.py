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
默认响应行为

所有函数签名一致：(view, record, serializer_class, context) -> Response，
view 需要提供 serialize_item / serialize_collection / render_json。

┌──────────┬──────────────────────────────────────────────┬────────┐
│ action   │ 响应                                          │ 状态码  │
├──────────┼──────────────────────────────────────────────┼────────┤
│ index    │ {"data": [...], "meta"?: {...}}              │ 200    │
│ show     │ {...}                                        │ 200    │
│ create   │ {...} / {"errors": [...]}                    │ 201/422│
│ update   │ {...} / {"errors": [...]}                    │ 200/422│
│ destroy  │ {"message": "..."} / {"errors": [...]}       │ 200/422│
└──────────┴──────────────────────────────────────────────┴────────┘
"""

from rest_framework import status

from drf_responses.pagination import is_paginated, pagination_meta
from drf_responses.records import (
    destroy_record,
    error_messages,
    has_errors,
    save_record,
)
from drf_responses.resolver import handler_name_for
from drf_responses.settings import responses_settings

DEFAULT_REST_ACTIONS = ("index", "show", "create", "update", "destroy")


def render_errors(view, record):
    return view.render_json(
        {"errors": error_messages(record)},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def render_index(view, record, serializer_class, context):
    """
    集合响应，自动附带分页信息

    已分页时 meta 为分页信息（并合并 context["meta"]），否则使用 context["meta"]。
    """
    response = {"data": view.serialize_collection(record, serializer_class, context)}

    if is_paginated(record):
        response["meta"] = pagination_meta(record, context)
    elif context.get("meta") is not None:
        response["meta"] = context["meta"]

    return view.render_json(response)


def render_show(view, record, serializer_class, context):
    return view.render_json(view.serialize_item(record, serializer_class, context))


def render_create(view, record, serializer_class, context):
    if save_record(record):
        return view.render_json(
            view.serialize_item(record, serializer_class, context),
            status=status.HTTP_201_CREATED,
        )
    return render_errors(view, record)


def render_update(view, record, serializer_class, context):
    # 更新已由调用方完成，这里只检查 record 上是否残留校验错误
    if not has_errors(record):
        return view.render_json(
            view.serialize_item(record, serializer_class, context),
            status=status.HTTP_200_OK,
        )
    return render_errors(view, record)


def render_destroy(view, record, serializer_class, context):
    if destroy_record(record):
        return view.render_json(
            {"message": responses_settings.DESTROY_SUCCESS_MESSAGE},
            status=status.HTTP_200_OK,
        )
    return render_errors(view, record)


def render_collection_data(view, record, serializer_class, context):
    return view.render_json(
        {"data": view.serialize_collection(record, serializer_class, context)}
    )


def render_item_data(view, record, serializer_class, context):
    return view.render_json(
        {"data": view.serialize_item(record, serializer_class, context)}
    )


# generate_rest_responses 在没有可委托的处理函数时使用的兜底行为
REST_FALLBACKS = {
    "index": render_collection_data,
    "show": render_item_data,
    "create": render_create,
    "update": render_update,
    "destroy": render_destroy,
}


def render_rest_fallback(view, base_action, record, serializer_class, context):
    fallback = REST_FALLBACKS.get(str(base_action))
    if fallback is None:
        return view.render_json(
            {"error": f"No default behavior for action {base_action}"},
            status=status.HTTP_501_NOT_IMPLEMENTED,
        )
    return fallback(view, record, serializer_class, context)


def action_not_supported_payload(action, controller) -> dict:
    """
    "Action not supported" 结构化错误信息
    """
    required_method = handler_name_for(action)
    return {
        "error": "Action not supported",
        "message": f"The action '{action}' is not supported by this controller",
        "details": {
            "action": action,
            "controller": controller,
            "required_method": required_method,
        },
        "suggestions": [
            f"Define a '{required_method}' method in your controller",
            f"Use 'map_response_action(\"{action}\", to=\"existing_action\")' "
            "to map it to an existing response method",
        ],
    }
