"""CLI entry point for Pesquisa.

Runs YAML operation scripts against fresh in-memory registries. A script
is a list of steps:

    - op: register_researcher
      args: {name: Ana, role: student, biography: graphs,
             email: ana@x.com, photo_url: http://x/a.png}
    - op: describe_researcher
      args: {email: ana@x.com}
      expect: "Ana (student) - graphs - ana@x.com - http://x/a.png - active=true"
    - op: list_researchers
      args: {role: PROFESSOR}
      expect_error: "No researchers"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
import yaml

from pesquisa.config import ConfigError, RegistryConfig, find_config, load_config
from pesquisa.exceptions import PesquisaError
from pesquisa.logging import parse_component_levels, setup_logging
from pesquisa.problems import ProblemRegistry
from pesquisa.researchers import ResearcherRegistry

# Operation name -> (registry, method)
OPERATIONS: dict[str, tuple[str, str]] = {
    "register_researcher": ("researchers", "register"),
    "remove_researcher": ("researchers", "remove"),
    "set_researcher_attribute": ("researchers", "set_attribute"),
    "activate_researcher": ("researchers", "activate"),
    "deactivate_researcher": ("researchers", "deactivate"),
    "describe_researcher": ("researchers", "describe"),
    "is_researcher_active": ("researchers", "is_active"),
    "attach_student_specialty": ("researchers", "attach_student_specialty"),
    "attach_professor_specialty": ("researchers", "attach_professor_specialty"),
    "list_researchers": ("researchers", "list_by_role"),
    "search_researchers": ("researchers", "search_by_term"),
    "researcher_hit_count": ("researchers", "hit_count"),
    "register_problem": ("problems", "register_problem"),
    "describe_problem": ("problems", "describe_problem"),
    "remove_problem": ("problems", "remove_problem"),
    "register_objective": ("problems", "register_objective"),
    "describe_objective": ("problems", "describe_objective"),
    "remove_objective": ("problems", "remove_objective"),
}


class ScriptError(Exception):
    """Raised when a script file is malformed."""


@dataclass
class StepOutcome:
    """Result of running one script step."""

    index: int
    op: str
    ok: bool
    message: str


@dataclass
class Session:
    """Registries shared by all steps of one script run."""

    config: RegistryConfig = field(default_factory=RegistryConfig)
    researchers: ResearcherRegistry = field(init=False)
    problems: ProblemRegistry = field(init=False)

    def __post_init__(self) -> None:
        self.researchers = ResearcherRegistry(self.config)
        self.problems = ProblemRegistry(self.config)

    def call(self, op: str, args: dict[str, Any]) -> Any:
        """Invoke a named operation.

        Raises:
            ScriptError: If op is unknown
            PesquisaError: Whatever the registry raises
        """
        if op not in OPERATIONS:
            raise ScriptError(f"Unknown operation: '{op}'")
        registry_name, method = OPERATIONS[op]
        registry = getattr(self, registry_name)
        return getattr(registry, method)(**args)

    def run_step(self, index: int, step: dict[str, Any]) -> StepOutcome:
        """Run one step and check its expectations."""
        op = step.get("op")
        args = step.get("args") or {}
        if not isinstance(op, str) or not isinstance(args, dict):
            return StepOutcome(index, str(op), False, "Step needs an 'op' name and mapping 'args'")

        try:
            result = self.call(op, args)
        except (PesquisaError, ScriptError, TypeError) as e:
            expected_error = step.get("expect_error")
            if expected_error is not None and str(expected_error) in str(e):
                return StepOutcome(index, op, True, f"Error (expected): {e}")
            return StepOutcome(index, op, False, f"Error: {e}")

        if "expect_error" in step:
            return StepOutcome(
                index, op, False, f"Expected error '{step['expect_error']}', got {result!r}"
            )
        if "expect" in step and result != step["expect"]:
            return StepOutcome(index, op, False, f"Expected {step['expect']!r}, got {result!r}")
        if result is None:
            return StepOutcome(index, op, True, "")
        text = result.describe() if hasattr(result, "describe") else str(result)
        return StepOutcome(index, op, True, text)


def load_script(path: Path) -> list[dict[str, Any]]:
    """Load a YAML script.

    Raises:
        ScriptError: If the file is not a YAML list of mappings
    """
    try:
        with open(path) as f:
            steps = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScriptError(f"Invalid YAML in {path}: {e}") from e

    if steps is None:
        return []
    if not isinstance(steps, list) or not all(isinstance(s, dict) for s in steps):
        raise ScriptError(f"Script must be a YAML list of steps: {path}")
    return steps


def _component_levels_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> dict[str, str] | None:
    if value is None:
        return None
    try:
        return parse_component_levels(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _resolve_config(config_path: Path | None, script: Path) -> RegistryConfig:
    if config_path is not None:
        return load_config(config_path)
    try:
        return load_config(find_config(script.parent))
    except ConfigError:
        return RegistryConfig()


@click.group()
@click.version_option(package_name="pesquisa")
def main() -> None:
    """Pesquisa - research-group record registry."""
    pass


@main.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to pesquisa.yaml (auto-detected next to the script if not specified)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write rotating log files to this directory",
)
@click.option(
    "--log-levels",
    "component_levels",
    default=None,
    callback=_component_levels_option,
    help="Per-registry log levels, e.g. researchers=DEBUG,problems=WARNING",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
def run(
    script: Path,
    config_path: Path | None,
    log_dir: Path | None,
    component_levels: dict[str, str] | None,
    verbose: bool,
) -> None:
    """Run a YAML operation script against fresh registries."""
    if verbose or log_dir is not None or component_levels:
        setup_logging(
            log_dir=log_dir,
            level="DEBUG" if verbose else "INFO",
            console=verbose,
            component_levels=component_levels,
        )

    try:
        config = _resolve_config(config_path, script)
        steps = load_script(script)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ScriptError as e:
        click.echo(f"Script error: {e}", err=True)
        sys.exit(1)

    session = Session(config)
    failures = 0
    for index, step in enumerate(steps, start=1):
        outcome = session.run_step(index, step)
        line = f"[{outcome.index}] {outcome.op}"
        if outcome.message:
            line += f": {outcome.message}"
        if outcome.ok:
            click.echo(line)
        else:
            failures += 1
            click.echo(line, err=True)

    click.echo(f"\n{len(steps) - failures}/{len(steps)} steps passed")
    if failures:
        sys.exit(1)


@main.command()
def ops() -> None:
    """List the operation names a script can use."""
    for name, (registry, method) in sorted(OPERATIONS.items()):
        click.echo(f"{name:28} {registry}.{method}")


if __name__ == "__main__":
    main()
