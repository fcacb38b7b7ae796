"""Integration tests: researchers and problems used together as one research group."""

import pytest

from pesquisa.config import RegistryConfig
from pesquisa.problems import ProblemRegistry
from pesquisa.researchers import EmptyResultError, NotFoundError, ResearcherRegistry
from pesquisa.validation import Limits


@pytest.fixture
def config() -> RegistryConfig:
    return RegistryConfig(limits=Limits(semester_max=12))


@pytest.mark.integration
class TestResearchGroupLifecycle:
    """A group is set up, reorganized and queried."""

    def test_student_rekey_keeps_specialty(self, config: RegistryConfig) -> None:
        researchers = ResearcherRegistry(config)
        researchers.register("Ana", "student", "works on graphs", "ana@x.com", "http://x/a.png")
        researchers.attach_student_specialty("ana@x.com", 4, 8.5)

        described = researchers.describe("ana@x.com")
        assert "ana@x.com" in described
        assert "4" in described
        assert "8.5" in described

        researchers.set_attribute("ana@x.com", "EMAIL", "ana2@x.com")

        with pytest.raises(NotFoundError):
            researchers.describe("ana@x.com")
        assert researchers.describe("ana2@x.com") == described.replace("ana@x.com", "ana2@x.com")

    def test_search_counts_every_call(self, config: RegistryConfig) -> None:
        researchers = ResearcherRegistry(config)
        researchers.register("Ana", "student", "works on graphs", "ana@x.com", "http://x/a.png")

        first = researchers.search_by_term("graph")
        second = researchers.search_by_term("graph")

        assert first == second == "ana@x.com: works on graphs | "
        assert researchers.hit_count() == 2

    def test_listing_after_role_changes(self, config: RegistryConfig) -> None:
        researchers = ResearcherRegistry(config)
        researchers.register("Ana", "student", "graphs", "ana@x.com", "http://x/a.png")
        researchers.register("Caio", "student", "logic", "caio@x.com", "http://x/c.png")

        with pytest.raises(EmptyResultError):
            researchers.list_by_role("PROFESSOR")

        researchers.set_attribute("caio@x.com", "ROLE", "professor")
        researchers.attach_professor_specialty("caio@x.com", "Doutorado", "DSC", "15/08/2019")

        assert researchers.list_by_role("PROFESSOR") == (
            "Caio (professor) - logic - caio@x.com - http://x/c.png - active=true"
            " - Doutorado - DSC - 15/08/2019"
        )
        assert researchers.list_by_role("student").startswith("Ana (student)")

    def test_problems_and_objectives_share_limits(self, config: RegistryConfig) -> None:
        problems = ProblemRegistry(config)

        problem = problems.register_problem("graph queries time out", 4)
        general = problems.register_objective("GENERAL", "sub-second queries", 5, 4)
        specific = problems.register_objective("SPECIFIC", "index hot edges", 3, 5)
        problems.remove_objective(general)

        assert problems.describe_problem(problem) == "P1 - graph queries time out - 4"
        assert problems.describe_objective(specific) == "O2 - SPECIFIC - index hot edges - 8"
        assert problems.register_objective("GENERAL", "cache results", 2, 2) == "O3"
