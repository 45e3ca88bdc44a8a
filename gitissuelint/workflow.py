"""Checks on the CI workflow that runs the linter.

The workflow file is parsed by PyYAML. These checks only look at the parsed
structure: field presence and values.
"""
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, Field


class WorkflowExpectations(BaseModel):
    """Expected structure of the commit lint workflow."""

    permissions: Dict[str, str] = Field(
        default_factory=lambda: {"contents": "read", "pull-requests": "read"},
        description="Required permission scopes and their access level"
    )
    pull_request_types: List[str] = Field(
        default_factory=lambda: ["opened", "synchronize", "reopened"],
        description="pull_request activity types that must trigger the workflow"
    )
    job: str = Field(default="commitlint", description="Name of the lint job")
    runs_on: str = Field(default="ubuntu-latest")
    checkout_action: str = Field(default="actions/checkout@v4")
    fetch_depth: int = Field(default=0, description="Full history is needed to lint a commit range")
    lint_command: str = Field(default="git-issue-lint")
    config_file: str = Field(default=".gitissuelint.toml")


def load_workflow(path) -> Dict[str, Any]:
    """Parse a workflow definition with ``yaml.safe_load``."""
    with Path(path).open('r', encoding='utf-8') as f:
        workflow = yaml.safe_load(f)
    if not isinstance(workflow, dict):
        raise ValueError(f"Workflow file {path} does not contain a mapping")
    return workflow


def workflow_triggers(workflow: Mapping) -> Mapping:
    """Return the ``on:`` table; YAML 1.1 loads the bare key as ``True``."""
    triggers = workflow.get("on", workflow.get(True))
    return triggers if isinstance(triggers, Mapping) else {}


def find_step(job: Mapping, uses: Optional[str] = None, run_contains: Optional[str] = None) -> Optional[Mapping]:
    steps = job.get("steps")
    if not isinstance(steps, list):
        return None
    for step in steps:
        if not isinstance(step, Mapping):
            continue
        if uses is not None and step.get("uses") == uses:
            return step
        if run_contains is not None and run_contains in str(step.get("run", "")):
            return step
    return None


def check_workflow(workflow: Mapping, expectations: Optional[WorkflowExpectations] = None) -> Tuple[bool, List[str]]:
    """Check a parsed workflow against the expected structure.

    Returns:
        Tuple[bool, List[str]]: Whether the workflow passed, and its problems
    """
    expected = expectations or WorkflowExpectations()
    problems: List[str] = []

    permissions = workflow.get("permissions")
    if not isinstance(permissions, Mapping):
        problems.append("Workflow must declare a permissions block")
    else:
        for scope, access in expected.permissions.items():
            if permissions.get(scope) != access:
                problems.append(f"permissions.{scope} must be '{access}', found {permissions.get(scope)!r}")

    pull_request = workflow_triggers(workflow).get("pull_request")
    if not isinstance(pull_request, Mapping):
        problems.append("Workflow must run on pull_request events")
    else:
        types = pull_request.get("types") or []
        if isinstance(types, str):
            types = [types]
        elif not isinstance(types, list):
            problems.append(f"pull_request.types must be a list, found {types!r}")
            types = []
        for activity in expected.pull_request_types:
            if activity not in types:
                problems.append(f"pull_request.types must include '{activity}'")

    jobs = workflow.get("jobs")
    job = jobs.get(expected.job) if isinstance(jobs, Mapping) else None
    if not isinstance(job, Mapping):
        problems.append(f"Workflow must define a '{expected.job}' job")
        return not problems, problems

    if job.get("runs-on") != expected.runs_on:
        problems.append(f"jobs.{expected.job}.runs-on must be '{expected.runs_on}', found {job.get('runs-on')!r}")

    checkout = find_step(job, uses=expected.checkout_action)
    if checkout is None:
        problems.append(f"jobs.{expected.job} must use {expected.checkout_action}")
    else:
        options = checkout.get("with")
        depth = options.get("fetch-depth") if isinstance(options, Mapping) else None
        # bool is an int subclass; 'false' must not pass for 0
        if isinstance(depth, bool) or depth != expected.fetch_depth:
            problems.append(f"{expected.checkout_action} must set fetch-depth to {expected.fetch_depth}, found {depth!r}")

    lint_step = find_step(job, run_contains=expected.lint_command)
    if lint_step is None:
        problems.append(f"jobs.{expected.job} must run {expected.lint_command}")
    elif f"--config {expected.config_file}" not in str(lint_step.get("run")):
        problems.append(f"{expected.lint_command} must be run with --config {expected.config_file}")

    return not problems, problems
