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
tests 目录的 pytest conftest
在导入其他模块之前配置 Django
"""

import os

# 清除环境变量，避免 .env 文件干扰
os.environ.pop("DJANGO_SETTINGS_MODULE", None)
os.environ.pop("DJANGO_CONF_MODULE", None)

# 在任何其他导入之前配置 Django
import django
from django.conf import settings

if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY="test-secret-key",
        ALLOWED_HOSTS=["testserver", "localhost", "127.0.0.1"],
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "rest_framework",
            "drf_responses",
        ],
        DATABASES={
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        },
        REST_FRAMEWORK={
            "TEST_REQUEST_DEFAULT_FORMAT": "json",
            "EXCEPTION_HANDLER": "drf_responses.exceptions.handlers.responses_exception_handler",
        },
        DRF_RESPONSES={},
    )
    django.setup()

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory, force_authenticate

from drf_responses.serializers import SerializerRegistry


@pytest.fixture(autouse=True)
def clean_serializer_registry():
    """每个测试前后清空序列化器注册表"""
    SerializerRegistry.clear()
    yield
    SerializerRegistry.clear()


@pytest.fixture
def api_factory():
    return APIRequestFactory()


@pytest.fixture
def make_view(api_factory):
    """
    构造一个已绑定请求的视图实例，不经过 as_view

    Example:
        view = make_view(WidgetViewSet, action="list", path="/widgets/?view=minimal")
    """

    def _make_view(
        view_class, action=None, path="/widgets/", method="get", user=None, kwargs=None
    ):
        wsgi_request = getattr(api_factory, method)(path)
        if user is not None:
            force_authenticate(wsgi_request, user=user)

        view = view_class()
        view.action = action
        view.args = ()
        view.kwargs = kwargs or {}
        view.format_kwarg = None
        view.request = Request(wsgi_request)
        return view

    return _make_view
