"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

from django.conf import settings
from django.core.signals import setting_changed
from rest_framework.settings import APISettings

DEFAULT = {
    # 读取 view 的查询参数名
    "VIEW_PARAM": "view",
    # 身份信息写入 context 时使用的键
    "IDENTITY_CONTEXT_KEY": "current_user",
    # 按命名约定推导序列化器名时的后缀
    "SERIALIZER_SUFFIX": "Serializer",
    # 序列化器名 -> 导入路径，启动时注册到 SerializerRegistry
    "SERIALIZERS": {},
    "DESTROY_SUCCESS_MESSAGE": "register destroyed successfully",
    # render_with(responder=True) 时使用的 Responder 类
    "DEFAULT_RESPONDER_CLASS": None,
}

IMPORT_STRINGS = ["DEFAULT_RESPONDER_CLASS"]


class DrfResponsesSettings(APISettings):
    """
    DrfResponsesSettings
    """

    @property
    def user_settings(self):
        if not hasattr(self, "_user_settings"):
            self._user_settings = getattr(settings, "DRF_RESPONSES", {})
        return self._user_settings


responses_settings = DrfResponsesSettings(None, DEFAULT, IMPORT_STRINGS)


def reload_responses_settings(*args, **kwargs):
    if kwargs["setting"] == "DRF_RESPONSES":
        responses_settings.reload()


setting_changed.connect(reload_responses_settings)
