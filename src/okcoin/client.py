# -*- coding: utf-8 -*-
"""
OKCoin API主客户端
"""

import logging
from typing import Any, Dict

from .base import BaseAPI
from .config import ClientConfig
from .account import AccountAPI
from .market import MarketDataAPI
from .spot import SpotAPI

logger = logging.getLogger(__name__)


class OKCoinAPI(BaseAPI):
    """
    OKCoin API主客户端

    基于OKCoin REST API v1: https://www.okcoin.cn/about/rest_api.do

    所有接口都是异步的：立即返回 concurrent.futures.Future，
    也可以传入 callback(error, data) 在请求完成时收到通知。
    """

    def __init__(self, api_key: str = None, secret: str = None,
                 settings: Dict[str, Any] = None, transport=None,
                 config: ClientConfig = None):
        """
        初始化OKCoin API客户端

        Args:
            api_key: API key
            secret: API secret
            settings: 可选覆盖项 (url, version, timeout, max_workers)
            transport: 可选，自定义传输层
            config: 可选，直接使用已有配置 (此时忽略 api_key/secret/settings)
        """
        if config is None:
            config = ClientConfig.from_settings(api_key, secret, settings)

        super().__init__(config, transport)

        # 初始化子模块
        self.market = MarketDataAPI(self)
        self.account = AccountAPI(self)
        self.spot = SpotAPI(self)

        # 公开接口
        self.ticker = self.market.ticker
        self.depth = self.market.depth
        self.trades = self.market.trades
        # 私有接口
        self.userinfo = self.account.userinfo
        self.trade = self.spot.trade
        self.cancel_order = self.spot.cancel_order
        self.order_info = self.spot.order_info
        self.orders_info = self.spot.orders_info
        self.order_history = self.spot.order_history

        logger.info(f"OKCoin API客户端初始化完成 (base_url={config.base_url}, version={config.api_version})")

    @classmethod
    def from_config(cls, config: ClientConfig, transport=None) -> 'OKCoinAPI':
        """根据已有的 ClientConfig 创建客户端"""
        return cls(config=config, transport=transport)

    def __repr__(self):
        return f"OKCoinAPI(base_url='{self.config.base_url}', version='{self.config.api_version}')"
