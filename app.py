# app.py
import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from config.settings import get_config
from extensions.database import db
from extensions.logger import init_logger
from utils.response import json_response
from utils.exceptions import BizError
from controllers.comment_controller import comment_bp

logger = logging.getLogger(__name__)


def create_app(config_name="development"):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # 初始化扩展
    db.init_app(app)
    init_logger(app)
    app.logger.info("当前数据库 URI: %s", app.config["SQLALCHEMY_DATABASE_URI"])

    # 注册模型，保证 create_all 能发现全部表
    import models  # noqa: F401

    # 评论
    app.register_blueprint(comment_bp)

    # 错误处理
    @app.errorhandler(BizError)
    def _biz_err(e: BizError):
        return json_response(code=e.code, message=e.message, data=e.data)

    @app.errorhandler(HTTPException)
    def _http_err(e: HTTPException):
        if e.code == 404:
            return json_response(message="接口不存在", code=404)
        return json_response(message=e.description, code=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e):
        logger.exception("UNHANDLED EXCEPTION")
        return json_response(message="服务器内部错误", code=500)

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(host="0.0.0.0", port=8888, debug=True)
