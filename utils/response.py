# utils/response.py
from flask import jsonify


def json_response(message="success", data=None, code=200, http_status=None):
    """
    统一响应信封 {"code", "message", "data"}。
    http_status 缺省时与 code 一致（例如创建成功时 code=201）。
    """
    resp = jsonify({"code": code, "message": message, "data": data})
    resp.status_code = http_status or code
    return resp
