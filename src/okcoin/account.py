# -*- coding: utf-8 -*-
"""
OKCoin账户API
"""

import logging
from concurrent.futures import Future

logger = logging.getLogger(__name__)


class AccountAPI:
    """OKCoin账户API"""

    def __init__(self, client):
        self.client = client

    def userinfo(self, callback=None) -> Future:
        """
        获取用户资产信息 (需要API密钥)

        Args:
            callback: 可选，完成时调用 callback(error, data)

        Returns:
            Future，结果为账户信息
        """
        return self.client._request('userinfo', {}, callback=callback)
