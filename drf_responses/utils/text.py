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
文本处理工具模块

提供控制器名、序列化器名之间的命名约定转换。
"""

import inflection

# 视图类名中会被剥离的后缀，按顺序匹配
VIEW_CLASS_SUFFIXES = ("ViewSet", "APIView", "View", "Controller")


def controller_name_from_class(class_name):
    """
    根据视图类名推导控制器名（复数、下划线风格）

    示例:
        - "WidgetsViewSet" -> "widgets"
        - "BlogPostsAPIView" -> "blog_posts"
        - "PeopleController" -> "people"

    :param class_name: 视图类名
    :return: 控制器名
    """
    assert isinstance(class_name, str), "class_name must be a string"

    for suffix in VIEW_CLASS_SUFFIXES:
        if class_name.endswith(suffix) and class_name != suffix:
            class_name = class_name[: -len(suffix)]
            break
    return inflection.underscore(class_name)


def serializer_name_for(controller_name, suffix="Serializer"):
    """
    根据控制器名推导序列化器类名：单数化 + 大驼峰 + 后缀

    示例:
        - "widgets" -> "WidgetSerializer"
        - "blog_posts" -> "BlogPostSerializer"
        - "people" -> "PersonSerializer"

    :param controller_name: 控制器名
    :param suffix: 序列化器类名后缀
    :return: 序列化器类名
    """
    assert isinstance(controller_name, str), "controller_name must be a string"

    return f"{inflection.camelize(inflection.singularize(controller_name))}{suffix}"
