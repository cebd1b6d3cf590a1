# utils/exceptions.py
from typing import Any, Optional
from werkzeug.exceptions import HTTPException


class BizError(HTTPException):
    code: int  # HTTP 状态码
    message: str  # 业务提示
    data: Optional[Any]  # 附加数据

    def __init__(self, message: str = "业务异常", code: int = 400, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(description=message)


class ValidationError(BizError):
    """一个或多个约束未通过；data["violations"] 为逐条的违规明细。"""

    def __init__(self, violations, message: str = "数据校验失败"):
        self.violations = list(violations)
        super().__init__(
            message=message,
            code=422,
            data={"violations": [v.to_dict() for v in self.violations]},
        )


class NotFoundError(BizError):
    def __init__(self, message: str = "资源不存在", data: Any = None):
        super().__init__(message=message, code=404, data=data)


class AuthenticationError(BizError):
    def __init__(self, message: str = "未登录", data: Any = None):
        super().__init__(message=message, code=401, data=data)


class AuthorizationError(BizError):
    def __init__(self, message: str = "无权限", data: Any = None):
        super().__init__(message=message, code=403, data=data)
