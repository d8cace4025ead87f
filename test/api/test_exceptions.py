# -*- coding: utf-8 -*-
"""
API异常类测试用例
"""

import pytest
from okcoin.exceptions import (
    OKCoinException,
    TransportException,
    ParseException,
    APIException,
    AuthenticationException,
    ValidationException,
    ClientClosedException
)


class TestOKCoinException:
    """异常基类测试"""

    def test_basic(self):
        """测试基本异常"""
        error = OKCoinException("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.code is None
        assert error.details is None

    def test_with_code(self):
        """测试带错误码的异常"""
        error = OKCoinException("Test error", code=10002)
        assert str(error) == "[10002] Test error"
        assert error.code == 10002

    @pytest.mark.parametrize("error", [
        TransportException(),
        ParseException("oops"),
        APIException(10007, "Signatures do not match"),
        AuthenticationException(),
        ValidationException(),
        ClientClosedException()
    ])
    def test_inheritance(self, error):
        """测试所有异常都继承自基类"""
        assert isinstance(error, OKCoinException)
        assert isinstance(error, Exception)


class TestTransportException:
    """传输异常测试"""

    def test_details(self):
        """测试保留底层异常"""
        cause = ConnectionRefusedError("refused")
        error = TransportException("Connection error", details=cause)
        assert error.details is cause
        assert str(error) == "Connection error"


class TestParseException:
    """解析异常测试"""

    def test_body_attached(self):
        error = ParseException("not json")
        assert error.body == "not json"
        assert str(error) == "Could not understand response from server: not json"


class TestAPIException:
    """业务错误测试"""

    def test_attributes(self):
        error = APIException(10009, "Order does not exist")
        assert error.code == 10009
        assert error.error == "Order does not exist"
        assert error.message == "Order does not exist"
        assert str(error) == "[10009] Order does not exist"

    def test_to_dict(self):
        error = APIException(10007, "Signatures do not match")
        assert error.to_dict() == {'code': 10007, 'error': 'Signatures do not match'}


class TestAuthenticationException:
    """认证异常测试"""

    def test_default_message(self):
        error = AuthenticationException()
        assert "API key" in str(error)
        assert error.code is None
