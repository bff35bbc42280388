"""
로깅 설정

앱 로거와 uvicorn 로거가 같은 형식으로 stdout 에 출력되도록 한다.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "explorer", "src", "main")
# 업스트림 요청마다 INFO 를 찍는 라이브러리
QUIET_LOGGERS = ("httpx", "httpcore", "pymongo")


def configure_logging(level_name: str) -> int:
    """루트 핸들러를 stdout 하나로 교체하고 앱 로거 레벨을 맞춘다. 적용된 레벨을 반환"""
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in APP_LOGGERS:
        named = logging.getLogger(name)
        named.setLevel(level)
        named.propagate = True
        named.handlers.clear()
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return level


def uvicorn_log_config(level_name: str) -> dict:
    level_name = level_name.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": {
            "stdout": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["stdout"], "level": level_name, "propagate": False},
            "uvicorn.error": {"level": level_name},
            "uvicorn.access": {"handlers": ["stdout"], "level": level_name, "propagate": False},
        },
    }
