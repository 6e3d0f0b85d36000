"""애플리케이션 경로 관리 유틸리티

로그 디렉토리와 오프셋 저장소 DB 경로를 중앙집중화하여 관리합니다.
테스트 환경에서는 커스텀 루트 경로를 주입할 수 있습니다.
"""
import os
from pathlib import Path
from typing import Optional

APP_HOME_ENV = "TABLE_READER_HOME"
APP_DIR_NAME = "TableReader"


class AppPaths:
    """애플리케이션 경로 중앙 관리 클래스

    경로 캐싱을 제공하며, 루트 경로는 다음 순서로 결정됩니다.
    1. set_custom_root()로 주입된 경로 (테스트용)
    2. TABLE_READER_HOME 환경 변수
    3. $XDG_DATA_HOME/TableReader 또는 ~/.local/share/TableReader

    Examples:
        >>> from table_reader.utils.app_paths import AppPaths
        >>> logs_dir = AppPaths.get_logs_dir()
        >>> db_path = AppPaths.get_db_path()

        # 테스트 환경
        >>> AppPaths.set_custom_root(Path("/tmp/test"))
        >>> AppPaths.get_app_data_dir()  # /tmp/test
        >>> AppPaths.set_custom_root(None)  # 원복
    """

    # 클래스 변수: 경로 캐싱
    _app_data_dir: Optional[Path] = None
    _logs_dir: Optional[Path] = None
    _db_path: Optional[Path] = None

    # 설정: 커스텀 루트 디렉토리 (테스트용)
    _custom_root: Optional[Path] = None

    @classmethod
    def set_custom_root(cls, root: Optional[Path]):
        """커스텀 루트 디렉토리 설정 (테스트용)

        Args:
            root: 커스텀 루트 경로. None이면 기본 경로 사용
        """
        cls._custom_root = root
        cls._reset_cache()

    @classmethod
    def _reset_cache(cls):
        """경로 캐시 초기화"""
        cls._app_data_dir = None
        cls._logs_dir = None
        cls._db_path = None

    @classmethod
    def get_app_data_dir(cls) -> Path:
        """애플리케이션 데이터 디렉토리

        디렉토리가 없으면 자동 생성합니다.
        """
        if cls._app_data_dir is None:
            if cls._custom_root:
                cls._app_data_dir = Path(cls._custom_root)
            elif os.environ.get(APP_HOME_ENV):
                cls._app_data_dir = Path(os.environ[APP_HOME_ENV])
            else:
                data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
                cls._app_data_dir = Path(data_home) / APP_DIR_NAME

            cls._app_data_dir.mkdir(parents=True, exist_ok=True)

        return cls._app_data_dir

    @classmethod
    def get_logs_dir(cls) -> Path:
        """로그 파일 디렉토리"""
        if cls._logs_dir is None:
            cls._logs_dir = cls.get_app_data_dir() / "logs"
            cls._logs_dir.mkdir(parents=True, exist_ok=True)

        return cls._logs_dir

    @classmethod
    def get_db_path(cls) -> Path:
        """오프셋 저장소 SQLite 파일 경로"""
        if cls._db_path is None:
            cls._db_path = cls.get_app_data_dir() / "table_reader.db"

        return cls._db_path

    @classmethod
    def get_log_file(cls, filename: str) -> Path:
        """로그 파일 경로

        Examples:
            >>> log_file = AppPaths.get_log_file("table_reader_20250118.log")
        """
        return cls.get_logs_dir() / filename
