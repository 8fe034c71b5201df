"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

from django.apps import AppConfig

from drf_responses.serializers import SerializerRegistry


# AppConfig 相关文档：https://docs.djangoproject.com/zh-hans/5.1/ref/applications/
class DRFResponsesConfig(AppConfig):
    name = "drf_responses"
    verbose_name = "drf_responses"
    label = "drf_responses"

    def ready(self):
        """
        注册 settings 中声明的序列化器

            DRF_RESPONSES = {
                "SERIALIZERS": {
                    "WidgetSerializer": "widgets.serializers.WidgetSerializer",
                },
            }
        """
        SerializerRegistry.load_from_settings()
