# -*- coding: utf-8 -*-
"""
API工具模块 - 参数规范化、签名、错误码解析
"""

import json
import hashlib
import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Union

from .exceptions import APIException, AuthenticationException, ParseException

logger = logging.getLogger(__name__)


# OKCoin错误码表 (只读)
ERROR_CODES = MappingProxyType({
    10000: 'Required parameter can not be null',
    10001: 'Requests are too frequent',
    10002: 'System Error',
    10003: 'Restricted list request, please try again later',
    10004: 'IP restriction',
    10005: 'Key does not exist',
    10006: 'User does not exist',
    10007: 'Signatures do not match',
    10008: 'Illegal parameter',
    10009: 'Order does not exist',
    10010: 'Insufficient balance',
    10011: 'Order is less than minimum trade amount',
    10012: 'Unsupported symbol (not btc_cny or ltc_cny)',
    10013: 'This interface only accepts https requests',
    10014: 'Order price must be between 0 and 1,000,000',
    10015: 'Order price differs from current market price too much',
    10016: 'Insufficient coins balance',
    10017: 'API authorization error',
    10026: 'Loan (including reserved loan) and margin cannot be withdrawn',
    10027: 'Cannot withdraw within 24 hrs of authentication information modification',
    10028: 'Withdrawal amount exceeds daily limit',
    10029: 'Account has unpaid loan, please cancel/pay off the loan before withdraw',
    10031: 'Deposits can only be withdrawn after 6 confirmations',
    10032: 'Please enabled phone/google authenticator',
    10033: 'Fee higher than maximum network transaction fee',
    10034: 'Fee lower than minimum network transaction fee',
    10035: 'Insufficient BTC/LTC',
    10036: 'Withdrawal amount too low',
    10037: 'Trade password not set',
    10040: 'Withdrawal cancellation fails',
    10041: 'Withdrawal address not approved',
    10042: 'Admin password error',
    10100: 'User account frozen',
    10216: 'Non-available API',
    503: 'Too many requests (Http)',
})


def stringify_params(params: Mapping[str, Any]) -> str:
    """
    将参数按键名升序拼接成 key=value&key=value 形式

    Args:
        params: 请求参数

    Returns:
        规范化后的参数字符串，空参数返回空字符串
    """
    return '&'.join(f"{key}={params[key]}" for key in sorted(params))


def generate_signature(params: Mapping[str, Any], secret: str) -> str:
    """
    生成OKCoin签名: MD5(规范化参数 + '&secret_key=' + secret) 的大写十六进制

    Args:
        params: 请求参数 (不能包含 sign 字段)
        secret: API secret

    Returns:
        32位大写签名字符串
    """
    if not secret:
        raise AuthenticationException("API secret is required for signed requests")

    payload = f"{stringify_params(params)}&secret_key={secret}"
    return hashlib.md5(payload.encode('utf-8')).hexdigest().upper()


def join_order_ids(order_ids: Union[str, int, Iterable[Union[str, int]]]) -> Union[str, int]:
    """多个订单号用逗号拼接，单个订单号原样返回"""
    if isinstance(order_ids, (list, tuple)):
        return ','.join(str(order_id) for order_id in order_ids)
    return order_ids


def error_code_meaning(error_code: Union[int, str]) -> APIException:
    """
    根据OKCoin错误码构造异常

    Args:
        error_code: 错误码

    Returns:
        APIException实例，未收录的错误码返回通用提示
    """
    try:
        code = int(error_code)
    except (TypeError, ValueError):
        code = error_code

    error = ERROR_CODES.get(code)
    if error is None:
        error = f"OKCoin error code :{error_code} is not yet supported by the API"
    return APIException(code, error)


def parse_response(raw: str) -> Any:
    """
    解析服务器响应

    Args:
        raw: 原始响应文本

    Returns:
        解析后的响应数据

    Raises:
        ParseException: 响应不是合法JSON，或不是JSON对象/数组
        APIException: 响应包含非零 error_code
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("无法解析OKCoin响应")
        raise ParseException(raw)

    # 合法响应只会是JSON对象或数组
    if not isinstance(data, (dict, list)):
        logger.warning("OKCoin响应不是JSON对象或数组")
        raise ParseException(raw)

    if isinstance(data, dict) and data.get('error_code'):
        error = error_code_meaning(data['error_code'])
        error.details = data
        logger.warning(f"OKCoin返回错误: {error}")
        raise error

    return data
