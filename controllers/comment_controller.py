from flask import Blueprint, request
from utils.response import json_response
from utils.exceptions import BizError
from services.comment_service import CommentService
from controllers.auth_helpers import auth_required
from constants.comment import SERIALIZATION_GROUPS, COLLECTION_GROUPS, ITEM_GROUPS
from utils.permissions import get_permission_scope
from utils.serializer import normalize


comment_bp = Blueprint("comment", __name__, url_prefix="/api/comments")


def _read_view(comment, groups=COLLECTION_GROUPS):
    return normalize(comment, groups, SERIALIZATION_GROUPS)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BizError("请求体必须为 JSON 对象")
    return data


def _content_arg(data: dict):
    content = data.get("content")
    if content is not None and not isinstance(content, str):
        raise BizError("content 必须为字符串")
    return content


def _post_arg(data: dict):
    post_id = data.get("post")
    if post_id is None:
        return None
    if isinstance(post_id, bool):
        raise BizError("post 必须为文章 ID")
    try:
        return int(post_id)
    except (TypeError, ValueError):
        raise BizError("post 必须为文章 ID")


def _int_arg(args, name: str, message: str):
    raw = args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise BizError(message)


@comment_bp.get("")
def list_comments():
    args = request.args
    post_id = _int_arg(args, "post", "post 必须为文章 ID")
    page = _int_arg(args, "page", "page 必须为整数")
    page_size = _int_arg(args, "page_size", "page_size 必须为整数")
    items, total, page, page_size = CommentService.list(
        post_id=post_id, page=page, page_size=page_size
    )
    return json_response(
        data={
            "items": [_read_view(i) for i in items],
            "total": total,
            "page": page,
            "page_size": page_size,
        }
    )


@comment_bp.post("")
@auth_required()
def create_comment():
    data = _json_body()
    comment = CommentService.create(
        post_id=_post_arg(data),
        content=_content_arg(data),
        permission_scope=get_permission_scope(),
    )
    return json_response(message="创建成功", data=_read_view(comment), code=201)


@comment_bp.get("/<int:comment_id>")
def get_comment(comment_id: int):
    comment = CommentService.get(comment_id)
    return json_response(data=_read_view(comment, ITEM_GROUPS))


@comment_bp.put("/<int:comment_id>")
@auth_required()
def update_comment(comment_id: int):
    data = _json_body()
    comment = CommentService.update(
        comment_id,
        content=_content_arg(data),
        published_at=data.get("published_at"),
        permission_scope=get_permission_scope(),
    )
    return json_response(message="更新成功", data=_read_view(comment))


@comment_bp.delete("/<int:comment_id>")
@auth_required()
def delete_comment(comment_id: int):
    CommentService.delete(comment_id, permission_scope=get_permission_scope())
    return json_response(message="删除成功")
