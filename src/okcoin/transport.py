# -*- coding: utf-8 -*-
"""
HTTP传输层
"""

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import TransportException, ValidationException

logger = logging.getLogger(__name__)


class RequestsTransport:
    """基于 requests.Session 的传输实现"""

    def __init__(self, timeout: Optional[float] = 10, session: requests.Session = None):
        """
        初始化传输层

        Args:
            timeout: 请求超时时间 (秒)
            session: 可选，复用外部的 requests.Session
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'okcoin-api-python/1.0',
        })

    def send(self, url: str, method: str, body: Optional[Dict[str, Any]] = None) -> str:
        """
        发送HTTP请求

        Args:
            url: 完整请求URL
            method: 'GET' 或 'POST'
            body: POST 表单参数

        Returns:
            响应文本 (UTF-8)

        Raises:
            TransportException: 网络层失败
        """
        method = method.upper()
        logger.debug(f"{method} {url}")

        try:
            if method == 'GET':
                response = self.session.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = self.session.post(url, data=body, timeout=self.timeout)
            else:
                raise ValidationException(f"Unsupported HTTP method: {method}")
        except requests.exceptions.Timeout as e:
            raise TransportException(f"Error in server response: timeout: {e}", details=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportException(f"Error in server response: {e}", details=e) from e

        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        response.encoding = 'utf-8'
        return response.text

    def close(self):
        """关闭会话"""
        if self.session:
            self.session.close()
