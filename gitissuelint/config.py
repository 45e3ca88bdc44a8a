"""Configuration management for git-issue-lint."""
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re

from .models import RuleSetting
from .rules import PRESETS, RULES

DEFAULT_CONFIG_FILENAME = ".gitissuelint.toml"
DEFAULT_WORKFLOW_FILE = ".github/workflows/commitlint.yml"

# Applied on top of the extended presets, before the user's own rules
DEFAULT_RULE_OVERRIDES: Dict[str, list] = {
    "type-enum": [0],
    "type-case": [0],
    "header-max-length": [2, "always", 100],
    "issue-number-required": [2, "always"],
}

class Config(BaseModel):
    """Configuration settings for git-issue-lint.

    Values come from ``.gitissuelint.toml`` in the repository root, from
    ``GIT_ISSUE_LINT_*`` environment variables, or from command line options.
    """

    extends: List[str] = Field(
        default_factory=lambda: ["conventional"],
        description="Rule presets to extend (currently only 'conventional')"
    )

    rules: Dict[str, list] = Field(
        default_factory=dict,
        description="Rule settings as [level, applicable, value], applied over the presets"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatic log files"
    )

    workflow_file: str = Field(
        default=DEFAULT_WORKFLOW_FILE,
        description="CI workflow definition checked by --check-workflow"
    )

    @staticmethod
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

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the repository's config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            return cls.load_file(config_path)
        except (OSError, ValueError, tomli.TOMLDecodeError) as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    @classmethod
    def load_file(cls, config_path: Path) -> 'Config':
        """Load configuration from an explicit file.

        Unlike ``load``, errors propagate to the caller.
        """
        with Path(config_path).open('rb') as f:
            config_data = tomli.load(f)

        for key in ['log_file', 'log_directory', 'workflow_file']:
            if key in config_data and isinstance(config_data[key], str):
                config_data[key] = cls._sanitize_string(config_data[key])

        if config_data.get('log_file') and not cls._is_safe_path(config_data['log_file']):
            print(f"Warning: Unsafe log file path '{config_data['log_file']}', using default")
            config_data['log_file'] = None

        config = cls(**config_data)
        # Surface bad rule settings at load time
        config.resolved_rules()
        return config

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        try:
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
                print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
                del config_dict['log_file']

            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            print(f"Error saving config file: {e}")

    def resolved_rules(self) -> Dict[str, RuleSetting]:
        """Merge presets, default overrides and configured rules.

        Raises:
            ValueError: On an unknown preset, unknown rule or malformed setting
        """
        merged: Dict[str, list] = {}
        for preset in self.extends:
            if preset not in PRESETS:
                raise ValueError(f"Unknown preset '{preset}'")
            merged.update(PRESETS[preset])
        merged.update(DEFAULT_RULE_OVERRIDES)
        merged.update(self.rules)

        resolved = {}
        for name, setting in merged.items():
            if name not in RULES:
                raise ValueError(f"Unknown rule '{name}'")
            resolved[name] = RuleSetting.from_list(name, setting)
        return resolved

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        ``log_directory`` (falling back to the current directory when that
        path is unsafe). Otherwise returns the configured log_file if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = Path(".gitissuelint")
            if self.log_directory is not None:
                directory = Path(self.log_directory) if self._is_safe_path(self.log_directory) else Path(".")
            return directory / f"gil_log-{timestamp}.log"
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            print(f"Warning: Unsafe log file path '{self.log_file}', using default")
            return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'GIT_ISSUE_LINT_ALWAYS_LOG': 'always_log',
            'GIT_ISSUE_LINT_LOG_FILE': 'log_file',
            'GIT_ISSUE_LINT_LOG_DIRECTORY': 'log_directory',
            'GIT_ISSUE_LINT_WORKFLOW_FILE': 'workflow_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name == 'always_log':
                    value = value.lower() in ['true', '1', 'yes', 'on']
                else:
                    value = self._sanitize_string(value)

                env_data[field_name] = value

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
