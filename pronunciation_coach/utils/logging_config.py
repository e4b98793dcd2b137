"""발음 평가 엔진의 로깅 설정.

CLI 와 테스트가 같은 형식의 로그를 남기도록 루트 로거를 한 곳에서 구성합니다.
분석기 자체는 ``logging.getLogger(__name__)`` 만 사용하며 이 모듈을 부르지 않습니다.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = 'pronunciation_coach'

_logging_initialized = False
_current_config: Dict[str, Any] = {}


def is_logging_configured() -> bool:
    """configure_logging 이 이미 적용되었는지 여부."""
    return _logging_initialized


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"알 수 없는 로그 레벨: {log_level}")
    return level


def _build_handlers(console_output: bool,
                    log_file: Optional[str]) -> Tuple[List[logging.Handler], Optional[str]]:
    """콘솔/파일 핸들러 목록과 파일 절대 경로를 반환."""
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    if console_output:
        handlers.append(logging.StreamHandler())

    resolved = None
    if log_file:
        path = Path(log_file).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode='a', encoding='utf-8'))
        resolved = str(path)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers, resolved


def _clear_root_handlers() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


def configure_logging(log_level: str = "INFO",
                      log_file: Optional[str] = None,
                      console_output: bool = True,
                      force_reconfigure: bool = False) -> None:
    """
    루트 로거 구성.

    Args:
        log_level: 로그 레벨 이름 (DEBUG/INFO/WARNING/ERROR)
        log_file: 추가로 기록할 파일 경로 (None 이면 파일 기록 없음)
        console_output: stderr 출력 여부
        force_reconfigure: 이미 구성된 경우에도 다시 적용

    Raises:
        ValueError: 알 수 없는 로그 레벨
    """
    global _logging_initialized, _current_config

    if _logging_initialized and not force_reconfigure:
        return

    level = _resolve_level(log_level)
    handlers, log_file_path = _build_handlers(console_output, log_file)

    _clear_root_handlers()
    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    _current_config = {
        'log_level': log_level.upper(),
        'log_file': log_file_path,
        'console_output': console_output,
        'configured_at': datetime.now(),
    }
    _logging_initialized = True

    logging.getLogger(PACKAGE_LOGGER).debug(
        f"로깅 구성 완료: {_current_config['log_level']}, 파일={log_file_path or '없음'}"
    )


def get_current_config() -> Dict[str, Any]:
    return dict(_current_config)


def reset_logging() -> None:
    """루트 핸들러를 모두 제거하고 구성 상태를 초기화."""
    global _logging_initialized, _current_config

    _clear_root_handlers()
    _logging_initialized = False
    _current_config = {}


def create_silent_logger(name: str = f"{PACKAGE_LOGGER}.silent") -> logging.Logger:
    """아무것도 출력하지 않는 로거 (분석기 주입용)."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
