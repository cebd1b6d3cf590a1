# extensions/logger.py
import os, sys, logging, json, uuid, time
from logging.handlers import RotatingFileHandler
from flask import g, request, has_request_context

_REQUEST_ID_KEY = "request_id"
_HANDLER_MARK = "_app_log_handler"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        data = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            data["request_id"] = record.request_id
        if getattr(record, "user_id", None) is not None:
            data["user_id"] = record.user_id
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        if has_request_context():
            record.request_id = getattr(g, _REQUEST_ID_KEY, "-")
            scope = getattr(g, "permission_scope", None)
            record.user_id = getattr(scope, "user_id", None)
        else:
            record.request_id = "-"
            record.user_id = None
        return True


def _assign_request_id():
    rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    setattr(g, _REQUEST_ID_KEY, rid)
    return rid


def _install_handlers(cfg, level):
    root = logging.getLogger()
    # 避免重复添加（多次 create_app 时只装一次）
    if any(getattr(h, _HANDLER_MARK, False) for h in root.handlers):
        return
    root.setLevel(level)

    text_fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(request_id)s | %(name)s | %(message)s",
        "%Y-%m-%d %H:%M:%S"
    )
    fmt = JsonFormatter() if cfg["LOG_JSON"] else text_fmt

    def _mark(h, lvl=None):
        h.setLevel(lvl or level)
        h.setFormatter(fmt)
        h.addFilter(RequestIdFilter())
        setattr(h, _HANDLER_MARK, True)
        root.addHandler(h)

    _mark(logging.StreamHandler(sys.stdout))

    if cfg.get("LOG_TO_FILE", True):
        log_dir = cfg["LOG_DIR"]
        os.makedirs(log_dir, exist_ok=True)

        def make_handler(filename):
            return RotatingFileHandler(
                os.path.join(log_dir, filename),
                maxBytes=cfg["LOG_MAX_BYTES"],
                backupCount=cfg["LOG_BACKUP_COUNT"],
                encoding="utf-8"
            )

        _mark(make_handler("app.log"))
        _mark(make_handler("error.log"), logging.ERROR)

    # 降低 noisy 包
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def init_logger(app):
    cfg = app.config
    level = getattr(logging, cfg["LOG_LEVEL"].upper(), logging.INFO)
    _install_handlers(cfg, level)
    app.logger.info("Logger initialized")

    @app.before_request
    def _before():
        g._req_start = time.time()
        _assign_request_id()
        app.logger.info(f"REQ {request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def _after(resp):
        duration = (time.time() - getattr(g, "_req_start", time.time())) * 1000
        app.logger.info(f"RESP {request.method} {request.path} {resp.status_code} {duration:.1f}ms")
        resp.headers["X-Request-ID"] = getattr(g, _REQUEST_ID_KEY, "-")
        return resp
