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
请求上下文单元测试
"""

import dataclasses

import pytest
from rest_framework.request import Request

from drf_responses.context import RequestSnapshot, build_context


class TestBuildContext:
    """测试上下文构建"""

    def test_requested_view_used_when_absent(self):
        assert build_context({}, {}, "summary") == {"view": "summary"}

    def test_caller_view_wins(self):
        assert build_context({"view": "a"}, {}, "b")["view"] == "a"

    def test_falsy_caller_view_replaced(self):
        assert build_context({"view": ""}, {}, "b")["view"] == "b"

    def test_view_defaults_to_none(self):
        assert build_context(None, None, "") == {"view": None}

    def test_identity_merged_over_caller_context(self):
        context = build_context(
            {"current_user": "spoofed", "meta": {"x": 1}}, {"current_user": "alice"}
        )
        assert context == {"current_user": "alice", "meta": {"x": 1}, "view": None}

    def test_caller_context_not_mutated(self):
        caller_context = {"meta": {"x": 1}}
        build_context(caller_context, {"current_user": "alice"}, "b")
        assert caller_context == {"meta": {"x": 1}}


class FakeView:
    def __init__(self, request, kwargs=None):
        self.request = request
        self.kwargs = kwargs or {}


class TestRequestSnapshot:
    """测试请求快照"""

    def test_capture(self, api_factory):
        request = Request(api_factory.get("/widgets/?page=2&tag=a&tag=b"))
        view = FakeView(request, {"pk": "7"})
        snapshot = RequestSnapshot.capture(view, "show", {"id": 7}, {"view": None})

        assert snapshot.action == "show"
        assert snapshot.record == {"id": 7}
        assert snapshot.params["page"] == "2"
        assert snapshot.params["tag"] == "b"
        assert snapshot.kwargs == {"pk": "7"}
        assert snapshot.context == {"view": None}

    def test_read_only(self, api_factory):
        view = FakeView(Request(api_factory.get("/widgets/")))
        snapshot = RequestSnapshot.capture(view, "index", [], {})
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.action = "show"
        with pytest.raises(TypeError):
            snapshot.params["page"] = "1"

    def test_capture_without_request(self):
        snapshot = RequestSnapshot.capture(object(), "index", [], {})
        assert snapshot.user is None
        assert snapshot.params == {}
        assert snapshot.kwargs == {}
