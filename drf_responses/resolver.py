"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

import logging
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

HANDLER_PREFIX = "respond_for_"


def handler_name_for(action) -> str:
    """
    action 对应的处理函数名：respond_for_<action>
    """
    return f"{HANDLER_PREFIX}{action}"


def action_from_handler_name(handler_name: str) -> str | None:
    """
    handler_name_for 的逆操作，名称不符合约定时返回 None
    """
    if handler_name.startswith(HANDLER_PREFIX) and len(handler_name) > len(
        HANDLER_PREFIX
    ):
        return handler_name[len(HANDLER_PREFIX) :]
    return None


def resolve_handler_name(
    action,
    action_mappings: Mapping,
    handler_exists: Callable[[str], bool],
) -> str:
    """
    将 action 解析为处理函数名

    按固定优先级查找，不存在其他兜底：

    1. 控制器上存在 respond_for_<action>，直接使用
    2. action_mappings 中为 action 声明了别名，且 respond_for_<alias> 存在，使用别名的处理函数
    3. 返回 respond_for_<action>，由调用方发现其不存在后渲染 "Action not supported"

    即使步骤 1 和步骤 2 最终指向同一处理函数，也总是步骤 1 生效。
    别名只解析一跳，不会沿着别名链继续查找。

    :param action: action 名称
    :param action_mappings: action -> 别名 action 的映射
    :param handler_exists: 判断处理函数名是否存在的谓词
    :return: 处理函数名
    """
    handler_name = handler_name_for(action)
    if handler_exists(handler_name):
        return handler_name

    mapped_action = action_mappings.get(action)
    if mapped_action:
        mapped_handler_name = handler_name_for(mapped_action)
        if handler_exists(mapped_handler_name):
            logger.debug(
                "action %s mapped to %s", action, mapped_handler_name
            )
            return mapped_handler_name

    return handler_name
