# -*- coding: utf-8 -*-
"""
API基础类模块
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

from .config import ClientConfig
from .endpoints import ENDPOINTS, Endpoint
from .exceptions import (
    AuthenticationException,
    ClientClosedException,
    TransportException,
    ValidationException
)
from .transport import RequestsTransport
from .utils import generate_signature, parse_response

logger = logging.getLogger(__name__)

# callback(error, data)
Callback = Callable[[Optional[Exception], Any], None]


class BaseAPI:
    """API基础类 - 负责参数组装、签名、发送与响应分类"""

    def __init__(self, config: ClientConfig, transport=None):
        """
        初始化API客户端

        Args:
            config: 客户端配置
            transport: 传输层，需提供 send(url, method, body) 方法；默认使用 RequestsTransport
        """
        self.config = config
        if transport is None:
            transport = RequestsTransport(timeout=config.timeout)
        self.transport = transport
        self.executor = ThreadPoolExecutor(
            max_workers=config.max_workers,
            thread_name_prefix='okcoin'
        )

    def _generate_signature(self, params: Dict[str, Any]) -> str:
        """用客户端的 secret 为参数签名"""
        return generate_signature(params, self.config.credentials.secret)

    def _prepare_params(self, endpoint: Endpoint, params: Dict[str, Any] = None) -> Optional[Dict[str, Any]]:
        """
        组装请求参数

        Args:
            endpoint: 接口定义
            params: 接口自身参数

        Returns:
            公开接口返回 None；私有接口返回带 api_key 和 sign 的参数
        """
        params = dict(params or {})

        unexpected = set(params) - set(endpoint.params)
        if unexpected:
            raise ValidationException(f"Unexpected parameters for {endpoint.name}: {sorted(unexpected)}")

        if not endpoint.signed:
            return None

        if not self.config.credentials.complete:
            raise AuthenticationException(f"API key and secret required for {endpoint.name}")

        params['api_key'] = self.config.credentials.api_key
        # sign 必须在其他参数全部就绪后计算，且自身不参与签名
        params['sign'] = self._generate_signature(params)
        return params

    def _make_request(self, name: str, params: Dict[str, Any] = None) -> Any:
        """
        同步执行一次请求

        Args:
            name: 接口名称
            params: 接口参数

        Returns:
            解析后的响应数据
        """
        endpoint = ENDPOINTS[name]
        body = self._prepare_params(endpoint, params)
        try:
            raw = self.transport.send(self.config.endpoint_url(endpoint.name), endpoint.method, body)
        except TransportException as e:
            logger.warning(f"{endpoint.name} 请求失败: {e}")
            raise
        return parse_response(raw)

    def _request(self, name: str, params: Dict[str, Any] = None,
                 callback: Optional[Callback] = None) -> Future:
        """
        异步发起请求

        Args:
            name: 接口名称
            params: 接口参数
            callback: 可选，完成时调用 callback(error, data)

        Returns:
            Future，结果为响应数据或对应异常；已处于运行状态，cancel() 总是返回 False
        """
        future = Future()
        future.set_running_or_notify_cancel()
        if callback is not None:
            future.add_done_callback(lambda f: self._notify(callback, f))

        try:
            self.executor.submit(self._run, future, name, params)
        except RuntimeError:
            # executor 已关闭
            logger.warning(f"{name} 请求失败: 客户端已关闭")
            future.set_exception(ClientClosedException())
        return future

    def _run(self, future: Future, name: str, params: Dict[str, Any] = None):
        """在工作线程中执行请求，并把结果写入调用方持有的 Future"""
        try:
            result = self._make_request(name, params)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(result)

    def _notify(self, callback: Callback, future: Future):
        """把 Future 的结果转成 callback(error, data)"""
        error = future.exception()
        try:
            if error is not None:
                callback(error, None)
            else:
                callback(None, future.result())
        except Exception:
            logger.exception("OKCoin回调执行失败")

    def close(self):
        """等待进行中的请求完成并释放资源"""
        self.executor.shutdown(wait=True)
        if hasattr(self.transport, 'close'):
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
