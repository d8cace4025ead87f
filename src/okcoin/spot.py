# -*- coding: utf-8 -*-
"""
OKCoin现货交易API
"""

import logging
from concurrent.futures import Future
from typing import Iterable, Union

from .utils import join_order_ids

logger = logging.getLogger(__name__)


class SpotAPI:
    """OKCoin现货交易API (全部为私有接口)"""

    def __init__(self, client):
        """
        初始化现货交易API

        Args:
            client: OKCoinAPI客户端实例
        """
        self.client = client

    def trade(self, symbol: str, type: str, price=None, amount=None, callback=None) -> Future:
        """
        下单

        Args:
            symbol: 交易对，如 'btc_cny'
            type: 'buy', 'sell', 'buy_market', 'sell_market'
            price: 价格 (市价买单时为买入金额)，为空时不发送
            amount: 数量 (市价买单不需要)，为空时不发送
            callback: 可选，完成时调用 callback(error, data)

        Returns:
            Future，结果包含 order_id
        """
        params = {}
        if amount:
            params['amount'] = amount
        if price:
            params['price'] = price
        params['symbol'] = symbol
        params['type'] = type

        return self.client._request('trade', params, callback=callback)

    def cancel_order(self, order_id, symbol: str, callback=None) -> Future:
        """
        撤销订单

        Args:
            order_id: 订单号，多个订单号用逗号分隔
            symbol: 交易对
        """
        params = {'order_id': order_id, 'symbol': symbol}
        return self.client._request('cancel_order', params, callback=callback)

    def order_info(self, order_id, symbol: str, callback=None) -> Future:
        """
        查询订单

        Args:
            order_id: 订单号，-1 表示查询全部未成交订单
            symbol: 交易对
        """
        params = {'order_id': order_id, 'symbol': symbol}
        return self.client._request('order_info', params, callback=callback)

    def orders_info(self, order_ids: Union[str, int, Iterable[Union[str, int]]],
                    symbol: str, callback=None) -> Future:
        """
        批量查询订单

        Args:
            order_ids: 单个订单号、逗号分隔的订单号字符串或订单号列表
            symbol: 交易对
        """
        params = {'order_id': join_order_ids(order_ids), 'symbol': symbol}
        return self.client._request('orders_info', params, callback=callback)

    def order_history(self, symbol: str, status, current_page, page_length,
                      callback=None) -> Future:
        """
        查询历史订单

        Args:
            symbol: 交易对
            status: 0 未完成订单，1 已完成订单
            current_page: 当前页数
            page_length: 每页条数
        """
        params = {
            'current_page': current_page,
            'symbol': symbol,
            'status': status,
            'page_length': page_length
        }
        return self.client._request('order_history', params, callback=callback)
