"""table_reader 로깅 구성

모듈 로거는 logging.getLogger(__name__)만 사용하고, 핸들러는 이 모듈에서
한 번에 붙입니다. 모든 핸들러는 연결 정보 마스킹 필터를 거칩니다.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .app_paths import AppPaths
from .log_masking import MaskingFilter

PACKAGE_LOGGER_NAME = "table_reader"


class LoggerConfig:
    """핸들러 팩토리와 로거 설정

    읽기 워커는 여러 스레드에서 로그를 남기므로 기본 포맷에 스레드 이름을 포함합니다.

    Examples:
        >>> from table_reader.utils.logger_config import LoggerConfig
        >>> LoggerConfig.setup_package_logger()
    """

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(threadName)s - %(levelname)s - %(message)s"
    DEFAULT_LEVEL = logging.DEBUG

    @staticmethod
    def _finish(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        handler.addFilter(MaskingFilter())
        return handler

    @staticmethod
    def create_file_handler(
        log_dir: Optional[Path] = None,
        filename_pattern: str = "table_reader_{date}.log",
        level: int = logging.DEBUG,
        encoding: str = "utf-8",
    ) -> logging.FileHandler:
        """일자별 로그 파일 핸들러

        log_dir을 생략하면 AppPaths 로그 디렉토리에 기록합니다.
        filename_pattern의 {date}는 YYYYMMDD로 채워집니다.
        """
        if log_dir is None:
            log_dir = AppPaths.get_logs_dir()
        else:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / filename_pattern.format(date=datetime.now().strftime("%Y%m%d"))
        return LoggerConfig._finish(
            logging.FileHandler(log_file, encoding=encoding), level, LoggerConfig.DEFAULT_FORMAT
        )

    @staticmethod
    def create_console_handler(
        level: int = logging.INFO, format_string: Optional[str] = None
    ) -> logging.StreamHandler:
        """stderr 핸들러 (운영자 확인용, 기본 INFO)"""
        return LoggerConfig._finish(
            logging.StreamHandler(), level, format_string or LoggerConfig.DEFAULT_FORMAT
        )

    @staticmethod
    def setup_logger(
        name: str,
        handlers: list[logging.Handler],
        level: int = logging.DEBUG,
        clear_existing: bool = True,
    ) -> logging.Logger:
        """이름 있는 로거에 핸들러 연결

        clear_existing이면 이전에 붙은 핸들러를 닫고 떼어냅니다.
        로거는 상위로 전파하지 않습니다.
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if clear_existing:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

        for handler in handlers:
            logger.addHandler(handler)

        logger.propagate = False
        return logger

    @staticmethod
    def setup_package_logger(
        log_dir: Optional[Path] = None,
        console_level: int = logging.INFO,
        file_level: int = logging.DEBUG,
    ) -> logging.Logger:
        """table_reader 패키지 로거 설정 (파일 + 콘솔)

        모듈 로거(logging.getLogger(__name__))는 모두 이 로거의 자식이므로
        애플리케이션 시작 시 한 번 호출하면 됩니다.
        """
        return LoggerConfig.setup_logger(
            PACKAGE_LOGGER_NAME,
            [
                LoggerConfig.create_file_handler(log_dir=log_dir, level=file_level),
                LoggerConfig.create_console_handler(level=console_level),
            ],
            level=min(console_level, file_level),
        )
