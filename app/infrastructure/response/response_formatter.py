from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "OK",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，与HTTP状态码一致
        msg: 响应消息

    返回:
        Dict[str, Any]: {"code", "data", "msg"} 格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def error_response(
    msg: str = "Request failed",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: 错误状态码，默认400表示客户端错误
        data: 可选的错误详情数据
    """
    return standard_response(data=data, code=code, msg=msg)


def bad_request_response(
    msg: str = "Invalid data",
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """创建400响应"""
    return error_response(msg=msg, code=400, data=data)


def not_found_response(entity: str = "Resource") -> Dict[str, Any]:
    """
    创建资源未找到响应

    参数:
        entity: 未找到的实体类型名称
    """
    return error_response(msg=f"{entity} not found", code=404)


def internal_error_response() -> Dict[str, Any]:
    """创建500响应，不向调用方暴露异常细节"""
    return error_response(msg="Internal server error", code=500)
