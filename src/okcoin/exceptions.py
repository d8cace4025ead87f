# -*- coding: utf-8 -*-
"""
API异常处理模块
"""

from typing import Any, Dict, Optional


class OKCoinException(Exception):
    """OKCoin API基础异常类"""

    def __init__(self, message: str, code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def __str__(self):
        if self.code is not None:
            return f"[{self.code}] {self.message}"
        return self.message


class TransportException(OKCoinException):
    """网络传输异常 (连接失败、DNS解析失败、超时等)"""

    def __init__(self, message: str = "Error in server response", details: Any = None):
        super().__init__(message, details=details)


class ParseException(OKCoinException):
    """响应解析异常 - 服务器返回的不是合法JSON"""

    def __init__(self, body: str):
        super().__init__(f"Could not understand response from server: {body}")
        self.body = body


class APIException(OKCoinException):
    """
    业务错误 - 服务器正常响应但返回了 error_code

    Attributes:
        code: OKCoin错误码
        error: 错误码对应的说明
    """

    def __init__(self, code: int, error: str, details: Any = None):
        super().__init__(error, code=code, details=details)
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, 'error': self.error}


class AuthenticationException(OKCoinException):
    """认证异常 - 私有接口缺少API密钥"""

    def __init__(self, message: str = "API key and secret required for private endpoints"):
        super().__init__(message)


class ValidationException(OKCoinException):
    """参数验证异常"""

    def __init__(self, message: str = "Invalid parameters"):
        super().__init__(message)


class ClientClosedException(OKCoinException):
    """客户端已关闭，无法再发起请求"""

    def __init__(self, message: str = "OKCoin client is closed"):
        super().__init__(message)
