"""Unit tests for ProblemRegistry operations."""

import pytest

from pesquisa.config import RegistryConfig
from pesquisa.problems import (
    ObjectiveNotFoundError,
    ProblemNotFoundError,
    ProblemRegistry,
)
from pesquisa.validation import Limits, ValidationError


@pytest.fixture
def registry() -> ProblemRegistry:
    """Create a fresh registry for each test."""
    return ProblemRegistry()


@pytest.mark.unit
class TestProblems:
    """Tests for register_problem, describe_problem and remove_problem."""

    def test_codes_are_sequential(self, registry: ProblemRegistry) -> None:
        assert registry.register_problem("slow graph queries", 3) == "P1"
        assert registry.register_problem("flaky builds", 5) == "P2"

    def test_describe(self, registry: ProblemRegistry) -> None:
        code = registry.register_problem("slow graph queries", 3)

        assert registry.describe_problem(code) == "P1 - slow graph queries - 3"

    @pytest.mark.parametrize("viability", [0, 6])
    def test_viability_out_of_range(self, registry: ProblemRegistry, viability: int) -> None:
        with pytest.raises(ValidationError, match="Invalid viability value."):
            registry.register_problem("slow graph queries", viability)

    def test_empty_description(self, registry: ProblemRegistry) -> None:
        with pytest.raises(ValidationError, match="Description cannot be empty."):
            registry.register_problem("", 3)

    def test_failed_registration_consumes_no_code(self, registry: ProblemRegistry) -> None:
        with pytest.raises(ValidationError):
            registry.register_problem("", 3)

        assert registry.register_problem("flaky builds", 2) == "P1"

    def test_remove(self, registry: ProblemRegistry) -> None:
        code = registry.register_problem("flaky builds", 2)

        registry.remove_problem(code)

        with pytest.raises(ProblemNotFoundError):
            registry.describe_problem(code)

    def test_codes_not_reused_after_remove(self, registry: ProblemRegistry) -> None:
        registry.remove_problem(registry.register_problem("flaky builds", 2))

        assert registry.register_problem("slow queries", 2) == "P2"

    def test_unknown_code(self, registry: ProblemRegistry) -> None:
        with pytest.raises(ProblemNotFoundError, match="P9"):
            registry.describe_problem("P9")
        with pytest.raises(ProblemNotFoundError):
            registry.remove_problem("P9")

    def test_empty_code(self, registry: ProblemRegistry) -> None:
        with pytest.raises(ValidationError, match="Code cannot be empty."):
            registry.describe_problem(" ")

    def test_configured_score_bounds(self) -> None:
        registry = ProblemRegistry(RegistryConfig(limits=Limits(score_min=0, score_max=10)))

        assert registry.register_problem("flaky builds", 0) == "P1"
        assert registry.register_problem("slow queries", 10) == "P2"


@pytest.mark.unit
class TestObjectives:
    """Tests for register_objective, describe_objective and remove_objective."""

    def test_codes_are_sequential(self, registry: ProblemRegistry) -> None:
        assert registry.register_objective("GENERAL", "faster queries", 4, 3) == "O1"
        assert registry.register_objective("SPECIFIC", "index edges", 2, 5) == "O2"

    def test_counters_are_independent(self, registry: ProblemRegistry) -> None:
        registry.register_problem("slow graph queries", 3)

        assert registry.register_objective("GENERAL", "faster queries", 4, 3) == "O1"

    def test_describe_sums_scores(self, registry: ProblemRegistry) -> None:
        code = registry.register_objective("GENERAL", "faster queries", 4, 3)

        assert registry.describe_objective(code) == "O1 - GENERAL - faster queries - 7"

    @pytest.mark.parametrize("kind", ["general", "OTHER", "Specific"])
    def test_kind_is_exact(self, registry: ProblemRegistry, kind: str) -> None:
        with pytest.raises(ValidationError, match="Invalid type value."):
            registry.register_objective(kind, "faster queries", 4, 3)

    def test_validation_order(self, registry: ProblemRegistry) -> None:
        """Emptiness of type and description is reported before the type token."""
        with pytest.raises(ValidationError, match="Type cannot be empty."):
            registry.register_objective("", "", 0, 0)
        with pytest.raises(ValidationError, match="Description cannot be empty."):
            registry.register_objective("OTHER", "", 0, 0)
        with pytest.raises(ValidationError, match="Invalid adherence value."):
            registry.register_objective("GENERAL", "faster queries", 0, 0)
        with pytest.raises(ValidationError, match="Invalid viability value."):
            registry.register_objective("GENERAL", "faster queries", 3, 9)

    def test_remove(self, registry: ProblemRegistry) -> None:
        code = registry.register_objective("SPECIFIC", "index edges", 2, 5)

        registry.remove_objective(code)

        with pytest.raises(ObjectiveNotFoundError):
            registry.describe_objective(code)

    def test_unknown_code(self, registry: ProblemRegistry) -> None:
        with pytest.raises(ObjectiveNotFoundError, match="O3"):
            registry.remove_objective("O3")

    def test_problem_code_is_not_an_objective(self, registry: ProblemRegistry) -> None:
        registry.register_problem("slow graph queries", 3)

        with pytest.raises(ObjectiveNotFoundError):
            registry.describe_objective("P1")
