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
异常体系与异常处理器单元测试
"""

import logging

import pytest
from rest_framework import status
from rest_framework.exceptions import NotFound

from drf_responses.exceptions import (
    ErrorCode,
    ErrorCodeRange,
    ErrorCodeRegistry,
    ResponderNotImplementedError,
    ResponseHandlerNotFound,
    ResponsesException,
    SerializerNotFoundError,
    StandardErrorCodes,
    responses_exception_handler,
)


class TestErrorCodeRegistry:
    """测试错误码注册表"""

    def test_standard_codes_registered(self):
        """测试标准错误码在导入时已注册"""
        assert ErrorCodeRegistry.get(1000) is StandardErrorCodes.CONFIGURATION_ERROR
        assert ErrorCodeRegistry.get(3000) is StandardErrorCodes.ACTION_NOT_SUPPORTED

    def test_register_custom_code(self):
        """测试注册自定义错误码"""
        code = ErrorCode(5999, "error.test", "Test error", 400)
        try:
            assert ErrorCodeRegistry.register(code) is code
            assert ErrorCodeRegistry.get(5999) is code
        finally:
            ErrorCodeRegistry.unregister(5999)

    def test_codes_within_ranges(self):
        """测试标准错误码落在对应范围内"""
        assert StandardErrorCodes.SERIALIZER_NOT_FOUND.code < ErrorCodeRange.DISPATCH
        assert (
            ErrorCodeRange.DISPATCH
            <= StandardErrorCodes.ACTION_NOT_SUPPORTED.code
            < ErrorCodeRange.BUSINESS
        )

    def test_register_duplicate_code(self):
        """测试重复注册抛出 ValueError"""
        with pytest.raises(ValueError):
            ErrorCodeRegistry.register(ErrorCode(1000, "error.dup", "Duplicate"))


class TestResponsesException:
    """测试异常基类"""

    def test_default_message(self):
        """测试未传入消息时使用错误码的默认消息"""
        exc = ResponsesException()
        assert exc.message == "Configuration error"
        assert exc.code == 1000
        assert exc.http_status == 500

    def test_to_dict(self):
        exc = ResponsesException(message="boom", data={"key": "value"})
        assert exc.to_dict() == {
            "error": "ResponsesException",
            "code": 1000,
            "message": "boom",
            "data": {"key": "value"},
        }

    def test_str(self):
        assert str(ResponsesException(message="boom")) == "[1000] boom"

    def test_cause(self):
        """测试异常链"""
        cause = KeyError("missing")
        exc = ResponsesException(message="boom", cause=cause)
        assert exc.__cause__ is cause

    def test_log(self, caplog):
        """测试按异常的日志级别记录"""
        logger = logging.getLogger("tests.exceptions")
        with caplog.at_level(logging.DEBUG, logger="tests.exceptions"):
            ResponseHandlerNotFound(action="x", handler_name="respond_for_x").log(logger)
        assert caplog.records[0].levelno == logging.WARNING
        assert "respond_for_x" in caplog.records[0].getMessage()


class TestSubclasses:
    """测试具体异常"""

    def test_response_handler_not_found(self):
        exc = ResponseHandlerNotFound(action="export", handler_name="respond_for_export")
        assert exc.action == "export"
        assert exc.handler_name == "respond_for_export"
        assert exc.http_status == 400
        assert "respond_for_export" in exc.message

    def test_serializer_not_found(self):
        exc = SerializerNotFoundError(serializer_name="WidgetSerializer", controller="widgets")
        assert exc.serializer_name == "WidgetSerializer"
        assert exc.controller == "widgets"
        assert exc.code == 1001
        assert "WidgetSerializer" in exc.message
        assert "widgets" in exc.message

    def test_responder_not_implemented(self):
        """测试 Responder 未实现 render 的异常同时是 NotImplementedError"""
        exc = ResponderNotImplementedError(responder_name="WidgetResponder")
        assert isinstance(exc, NotImplementedError)
        assert exc.message == "WidgetResponder must implement #render method"
        assert exc.http_status == 501


class TestExceptionHandler:
    """测试 DRF 异常处理器"""

    def test_handle_responses_exception(self):
        """测试框架异常按其 http_status 渲染"""
        exc = SerializerNotFoundError(serializer_name="WidgetSerializer")
        response = responses_exception_handler(exc, {})
        assert response.status_code == 500
        assert response.data["error"] == "SerializerNotFoundError"
        assert response.data["code"] == 1001

    def test_delegate_drf_exception(self):
        """测试 DRF 异常交给默认处理器"""
        response = responses_exception_handler(NotFound(), {})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_exception_returns_none(self):
        """测试未知异常返回 None，由 Django 继续抛出"""
        assert responses_exception_handler(RuntimeError("boom"), {}) is None
