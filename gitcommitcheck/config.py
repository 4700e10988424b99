"""Configuration management for git-commit-check."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".gitcommitcheck.toml"
CONFIG_SECTION = "gitcommitcheck"

_STRING_FIELDS = ['log_file', 'log_directory']
_BOOL_FIELDS = ['require_breaking_footer', 'allow_exempt_messages', 'always_log']
_INT_FIELDS = ['max_subject_length', 'max_body_line_length']


def _sanitize_string(value: str) -> str:
    """Sanitize string values to prevent injection attacks."""
    if not value:
        return value

    # Remove control characters and null bytes
    value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

    # Remove command injection patterns and split on them
    value = re.split(r'[;&|`$()]', value)[0]

    if len(value) > 1000:
        value = value[:1000]

    return value.strip()


def _is_safe_path(path: str) -> bool:
    """Check if a path is safe (no path traversal)."""
    if not path:
        return False

    if '..' in path or path.startswith('/') or '\\' in path:
        return False

    if os.path.isabs(path):
        return False

    return True


class Config(BaseModel):
    """Configuration settings for git-commit-check.

    Values come from the ``[gitcommitcheck]`` table of the config file,
    from ``GIT_COMMIT_CHECK_*`` environment variables, or from command
    line arguments, in increasing order of precedence.
    """

    max_subject_length: int = Field(
        default=72,
        ge=0,
        description="Maximum header length (0 disables the check)"
    )

    max_body_line_length: int = Field(
        default=100,
        ge=0,
        description="Maximum length of body and footer lines (0 disables the check)"
    )

    require_breaking_footer: bool = Field(
        default=False,
        description="Whether a '!' header must be explained by a BREAKING CHANGE footer"
    )

    allow_exempt_messages: bool = Field(
        default=True,
        description="Whether merge, revert, fixup! and squash! messages skip validation"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatically generated log files"
    )

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        for field_name in _STRING_FIELDS + _BOOL_FIELDS + _INT_FIELDS:
            env_var = f"GIT_COMMIT_CHECK_{field_name.upper()}"
            if env_var not in os.environ:
                continue
            value = os.environ[env_var]

            if field_name in _STRING_FIELDS:
                value = _sanitize_string(value)
            elif field_name in _BOOL_FIELDS:
                value = value.lower() in ['true', '1', 'yes', 'on']
            else:
                try:
                    value = int(value)
                except ValueError:
                    print(f"Warning: Ignoring invalid integer {env_var}={value!r}")
                    continue

            env_data[field_name] = value

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            config_section = config_data.get(CONFIG_SECTION, config_data)

            for key in _STRING_FIELDS:
                if key in config_section and isinstance(config_section[key], str):
                    config_section[key] = _sanitize_string(config_section[key])

            if config_section.get('log_file') and not _is_safe_path(config_section['log_file']):
                print(f"Warning: Unsafe log file path '{config_section['log_file']}', using default")
                config_section['log_file'] = None

            known = {key: value for key, value in config_section.items() if key in cls.model_fields}
            return cls(**known)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Path: Location of the written config file
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        if config_dict.get('log_file') and not _is_safe_path(config_dict['log_file']):
            print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
            del config_dict['log_file']

        try:
            with config_path.open('wb') as f:
                tomli_w.dump({CONFIG_SECTION: config_dict}, f)
        except OSError as e:
            print(f"Error saving config file: {e}")
        return config_path

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = Path(".")
            if self.log_directory:
                if _is_safe_path(self.log_directory):
                    directory = Path(self.log_directory)
                else:
                    print(f"Warning: Unsafe log directory '{self.log_directory}', using repository root")
            return directory / f"gcc_log-{timestamp}.log"
        elif self.log_file:
            if _is_safe_path(self.log_file):
                return Path(self.log_file)
            print(f"Warning: Unsafe log file path '{self.log_file}', using default")
        return None
