# -*- coding: utf-8 -*-
"""
OKCoin市场行情API (公开接口)
"""

import logging
from concurrent.futures import Future

logger = logging.getLogger(__name__)


class MarketDataAPI:
    """OKCoin市场行情API"""

    def __init__(self, client):
        """
        初始化市场行情API

        Args:
            client: OKCoinAPI客户端实例
        """
        self.client = client

    def ticker(self, callback=None) -> Future:
        """获取最新行情"""
        return self.client._request('ticker', callback=callback)

    def depth(self, callback=None) -> Future:
        """获取市场深度"""
        return self.client._request('depth', callback=callback)

    def trades(self, callback=None) -> Future:
        """获取最近成交记录"""
        return self.client._request('trades', callback=callback)
