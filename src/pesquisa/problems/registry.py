"""ProblemRegistry - create, read and delete problems and objectives."""

from __future__ import annotations

import threading

from pesquisa.config import RegistryConfig
from pesquisa.logging import get_logger
from pesquisa.problems.exceptions import ObjectiveNotFoundError, ProblemNotFoundError
from pesquisa.problems.models import Objective, ObjectiveType, Problem
from pesquisa.validation import require_choice, require_score, require_text

logger = get_logger("problems")


class ProblemRegistry:
    """Registry of problems (P1, P2, ...) and objectives (O1, O2, ...).

    Codes come from per-kind counters that only grow, so a removed code is
    never handed out again.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config or RegistryConfig()
        self._problems: dict[str, Problem] = {}
        self._objectives: dict[str, Objective] = {}
        self._next_problem = 1
        self._next_objective = 1
        self._lock = threading.RLock()

    # --- Problems ---

    def register_problem(self, description: str, viability: int) -> str:
        """Register a problem.

        Args:
            description: What the problem is about
            viability: Score within the configured bounds

        Returns:
            The generated code, e.g. 'P1'

        Raises:
            ValidationError: If description is empty or viability out of range
        """
        require_text(description, "Description cannot be empty.")
        require_score(viability, "Invalid viability value.", self._config.limits)

        with self._lock:
            code = f"P{self._next_problem}"
            self._problems[code] = Problem(code=code, description=description, viability=viability)
            self._next_problem += 1
        logger.info("Registered problem %s", code)
        return code

    def describe_problem(self, code: str) -> str:
        """Return the text representation of a problem.

        Raises:
            ValidationError: If code is empty
            ProblemNotFoundError: If code is unknown
        """
        require_text(code, "Code cannot be empty.")
        with self._lock:
            return self._require_problem(code).describe()

    def remove_problem(self, code: str) -> None:
        """Remove a problem.

        Raises:
            ValidationError: If code is empty
            ProblemNotFoundError: If code is unknown
        """
        require_text(code, "Code cannot be empty.")
        with self._lock:
            self._require_problem(code)
            del self._problems[code]
        logger.info("Removed problem %s", code)

    def _require_problem(self, code: str) -> Problem:
        problem = self._problems.get(code)
        if problem is None:
            raise ProblemNotFoundError(f"Problem '{code}' not found")
        return problem

    # --- Objectives ---

    def register_objective(
        self,
        kind: str,
        description: str,
        adherence: int,
        viability: int,
    ) -> str:
        """Register an objective.

        Args:
            kind: GENERAL or SPECIFIC (exact case)
            description: What the objective is about
            adherence: Score within the configured bounds
            viability: Score within the configured bounds

        Returns:
            The generated code, e.g. 'O1'

        Raises:
            ValidationError: On the first invalid field (kind emptiness,
                description, kind token, adherence, viability)
        """
        limits = self._config.limits
        require_text(kind, "Type cannot be empty.")
        require_text(description, "Description cannot be empty.")
        require_choice(kind, list(ObjectiveType), "Invalid type value.")
        require_score(adherence, "Invalid adherence value.", limits)
        require_score(viability, "Invalid viability value.", limits)

        with self._lock:
            code = f"O{self._next_objective}"
            self._objectives[code] = Objective(
                code=code,
                kind=ObjectiveType(kind),
                description=description,
                adherence=adherence,
                viability=viability,
            )
            self._next_objective += 1
        logger.info("Registered objective %s (%s)", code, kind)
        return code

    def describe_objective(self, code: str) -> str:
        """Return the text representation of an objective.

        Raises:
            ValidationError: If code is empty
            ObjectiveNotFoundError: If code is unknown
        """
        require_text(code, "Code cannot be empty.")
        with self._lock:
            return self._require_objective(code).describe()

    def remove_objective(self, code: str) -> None:
        """Remove an objective.

        Raises:
            ValidationError: If code is empty
            ObjectiveNotFoundError: If code is unknown
        """
        require_text(code, "Code cannot be empty.")
        with self._lock:
            self._require_objective(code)
            del self._objectives[code]
        logger.info("Removed objective %s", code)

    def _require_objective(self, code: str) -> Objective:
        objective = self._objectives.get(code)
        if objective is None:
            raise ObjectiveNotFoundError(f"Objective '{code}' not found")
        return objective
