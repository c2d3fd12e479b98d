"""
Configuration Management

시스템 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
from pathlib import Path
import logging


DEFAULT_DOC_EXTENSIONS = (".md", ".mdx", ".markdown")


@dataclass
class OracleConfig:
    """텍스트 개선 oracle (LLM) 설정"""
    api_key: Optional[str] = None
    model: str = "gpt-4"
    api_base_url: str = "https://api.openai.com/v1"
    timeout_seconds: int = 60


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class SuggestionConfig:
    """제안 생성 설정"""
    file_extensions: Tuple[str, ...] = DEFAULT_DOC_EXTENSIONS
    prompt_file: Optional[str] = None

    def __post_init__(self):
        # YAML 리스트도 허용
        self.file_extensions = tuple(ext.strip().lower() for ext in self.file_extensions if ext.strip())


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    oracle: OracleConfig = field(default_factory=OracleConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        extensions = os.getenv("DOC_FILE_EXTENSIONS")
        return cls(
            oracle=OracleConfig(
                api_key=os.getenv("OPENAI_API_KEY"),
                model=os.getenv("ORACLE_MODEL", "gpt-4"),
                api_base_url=os.getenv("ORACLE_API_URL", "https://api.openai.com/v1"),
                timeout_seconds=int(os.getenv("ORACLE_TIMEOUT", "60")),
            ),
            github=GitHubConfig(
                token=os.getenv("GITHUB_TOKEN"),
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(os.getenv("GITHUB_TIMEOUT", "30")),
            ),
            suggestions=SuggestionConfig(
                file_extensions=tuple(extensions.split(",")) if extensions else DEFAULT_DOC_EXTENSIONS,
                prompt_file=os.getenv("PROMPT_FILE"),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(
            oracle=OracleConfig(**config_data.get('oracle', {})),
            github=GitHubConfig(**config_data.get('github', {})),
            suggestions=SuggestionConfig(**config_data.get('suggestions', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 토큰 필수 확인
        if not self.github.token:
            errors.append("GitHub token is required")

        if not self.oracle.api_key:
            errors.append("Oracle API key is required")

        # 타임아웃 검증
        if self.github.timeout_seconds <= 0 or self.oracle.timeout_seconds <= 0:
            errors.append("Timeouts must be positive")

        if not self.suggestions.file_extensions:
            errors.append("At least one documentation file extension is required")

        if self.suggestions.prompt_file and not Path(self.suggestions.prompt_file).exists():
            errors.append(f"Prompt file not found: {self.suggestions.prompt_file}")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'oracle': {
                'model': self.oracle.model,
                'api_base_url': self.oracle.api_base_url,
                'timeout_seconds': self.oracle.timeout_seconds,
                # 보안상 API 키는 제외
            },
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'suggestions': {
                'file_extensions': list(self.suggestions.file_extensions),
                'prompt_file': self.suggestions.prompt_file,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


class ConfigManager:
    """설정 관리자"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        """현재 설정 반환"""
        return self._config

    def _setup_logging(self) -> None:
        """로깅 설정"""
        level = logging.DEBUG if self._config.debug else getattr(logging, self._config.logging.level.upper())
        logging.basicConfig(
            level=level,
            format=self._config.logging.format,
        )

        # 파일 로깅이 설정된 경우 로테이션 설정
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            # 루트 로거에 핸들러 추가
            root_logger = logging.getLogger()
            root_logger.addHandler(handler)


# 전역 설정 관리자 인스턴스 (최초 접근 시 생성)
_config_manager: Optional[ConfigManager] = None

def get_config() -> AppConfig:
    """현재 설정 반환"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.config
