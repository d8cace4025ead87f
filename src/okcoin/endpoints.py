# -*- coding: utf-8 -*-
"""
OKCoin REST接口目录
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


@dataclass(frozen=True)
class Endpoint:
    """单个REST接口"""
    name: str
    signed: bool
    params: Tuple[str, ...] = ()

    @property
    def method(self) -> str:
        return 'POST' if self.signed else 'GET'


ENDPOINTS = MappingProxyType({
    # 公开行情接口
    'ticker': Endpoint('ticker', signed=False),
    'depth': Endpoint('depth', signed=False),
    'trades': Endpoint('trades', signed=False),
    # 私有接口
    'userinfo': Endpoint('userinfo', signed=True),
    'trade': Endpoint('trade', signed=True, params=('symbol', 'type', 'price', 'amount')),
    'cancel_order': Endpoint('cancel_order', signed=True, params=('order_id', 'symbol')),
    'order_info': Endpoint('order_info', signed=True, params=('order_id', 'symbol')),
    'orders_info': Endpoint('orders_info', signed=True, params=('order_id', 'symbol')),
    'order_history': Endpoint('order_history', signed=True,
                              params=('current_page', 'symbol', 'status', 'page_length')),
})
