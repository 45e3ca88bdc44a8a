"""Shared models for git-issue-lint."""
from typing import Any, List, Optional, Tuple
from dataclasses import dataclass
from enum import IntEnum
from pydantic import BaseModel, Field

# (passed, explanation) as returned by every rule
ValidationResult = Tuple[bool, str]

class RuleLevel(IntEnum):
    OFF = 0
    WARNING = 1
    ERROR = 2

@dataclass(frozen=True)
class ParsedCommit:
    raw: str
    header: Optional[str]
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None

class RuleSetting(BaseModel):
    level: RuleLevel
    applicable: str = Field(default="always", description="Either 'always' or 'never'")
    value: Optional[Any] = None

    @classmethod
    def from_list(cls, name: str, setting: list) -> 'RuleSetting':
        """Build a setting from commitlint's ``[level, applicable, value]`` form."""
        if not isinstance(setting, (list, tuple)) or not setting:
            raise ValueError(f"Rule '{name}' must be configured as [level, applicable, value]")
        level = setting[0]
        if isinstance(level, bool) or level not in (0, 1, 2):
            raise ValueError(f"Rule '{name}' has invalid level {level!r}, expected 0, 1 or 2")
        applicable = setting[1] if len(setting) > 1 else "always"
        if applicable not in ("always", "never"):
            raise ValueError(f"Rule '{name}' has invalid condition {applicable!r}, expected 'always' or 'never'")
        value = setting[2] if len(setting) > 2 else None
        return cls(level=RuleLevel(level), applicable=applicable, value=value)

    def to_list(self) -> list:
        if self.level == RuleLevel.OFF:
            return [0]
        if self.value is None:
            return [int(self.level), self.applicable]
        return [int(self.level), self.applicable, self.value]

class LintProblem(BaseModel):
    level: RuleLevel
    name: str = Field(description="Name of the rule that reported the problem")
    message: str

class LintReport(BaseModel):
    input: str = Field(description="The commit message that was linted")
    valid: bool
    errors: List[LintProblem] = Field(default_factory=list)
    warnings: List[LintProblem] = Field(default_factory=list)
    sha: Optional[str] = Field(default=None, description="Commit hash when linting history")
