"""Data models for the Researcher registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from pesquisa.researchers.exceptions import RoleMismatchError, UnknownFieldError
from pesquisa.validation import (
    DEFAULT_LIMITS,
    Limits,
    require_date,
    require_gpa,
    require_semester,
    require_text,
)


class Role(StrEnum):
    """Recognized researcher roles."""

    STUDENT = "student"
    PROFESSOR = "professor"
    EXTERNAL = "external"


class ResearcherField(StrEnum):
    """Field names accepted by attribute updates."""

    NAME = "NAME"
    ROLE = "ROLE"
    BIOGRAPHY = "BIOGRAPHY"
    PHOTO_URL = "PHOTO_URL"
    EMAIL = "EMAIL"


@dataclass
class StudentProfile:
    """Student specialty: current semester and GPA."""

    required_role: ClassVar[Role] = Role.STUDENT

    semester: int
    gpa: float

    @classmethod
    def create(cls, semester: int, gpa: float, limits: Limits = DEFAULT_LIMITS) -> StudentProfile:
        """Validate the field set and build the profile.

        Raises:
            ValidationError: On the first invalid field (semester, then gpa)
        """
        require_semester(semester, limits)
        require_gpa(gpa, limits)
        return cls(semester=semester, gpa=gpa)

    def describe(self) -> str:
        return f"semester {self.semester} - gpa {self.gpa}"


@dataclass
class ProfessorProfile:
    """Professor specialty: academic formation, unit and hiring date."""

    required_role: ClassVar[Role] = Role.PROFESSOR

    formation: str
    unit: str
    date: str

    @classmethod
    def create(cls, formation: str, unit: str, date: str) -> ProfessorProfile:
        """Validate the field set and build the profile.

        Raises:
            ValidationError: On the first invalid field (formation, unit, then date)
        """
        require_text(formation, "Formation cannot be empty.")
        require_text(unit, "Unit cannot be empty.")
        require_date(date)
        return cls(formation=formation, unit=unit, date=date)

    def describe(self) -> str:
        return f"{self.formation} - {self.unit} - {self.date}"


Specialty = StudentProfile | ProfessorProfile


@dataclass(eq=False)
class Researcher:
    """A registered researcher.

    Attributes:
        name: Display name.
        role: Role token as given at registration.
        biography: Free text, searched by term.
        email: Identifying key inside a registry.
        photo_url: Link to the researcher's photo.
        active: Whether the researcher is active.
        specialty: Role-specific profile, if one was attached.
    """

    name: str
    role: str
    biography: str
    email: str
    photo_url: str
    active: bool = True
    specialty: Specialty | None = None

    def mutate_field(self, field: ResearcherField | str, new_value: str) -> None:
        """Set one of the mutable profile fields by name.

        Changing ROLE drops a specialty the new role no longer matches.

        Args:
            field: NAME, ROLE, BIOGRAPHY or PHOTO_URL
            new_value: Value to store

        Raises:
            UnknownFieldError: If field is not one of the mutable fields
        """
        try:
            target = ResearcherField(field)
        except ValueError as e:
            raise UnknownFieldError(f"Unknown researcher field: '{field}'") from e

        match target:
            case ResearcherField.NAME:
                self.name = new_value
            case ResearcherField.ROLE:
                self.role = new_value
                if self.specialty is not None and self.specialty.required_role != new_value:
                    self.specialty = None
            case ResearcherField.BIOGRAPHY:
                self.biography = new_value
            case ResearcherField.PHOTO_URL:
                self.photo_url = new_value
            case _:
                raise UnknownFieldError(f"Field '{target}' cannot be changed directly")

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def attach_student_specialty(
        self, semester: int, gpa: float, limits: Limits = DEFAULT_LIMITS
    ) -> StudentProfile:
        """Attach a student profile, replacing any previous specialty.

        Raises:
            RoleMismatchError: If role is not exactly 'student'
            ValidationError: If semester or gpa is invalid
        """
        self._require_role(StudentProfile.required_role)
        profile = StudentProfile.create(semester, gpa, limits)
        self.specialty = profile
        return profile

    def attach_professor_specialty(self, formation: str, unit: str, date: str) -> ProfessorProfile:
        """Attach a professor profile, replacing any previous specialty.

        Raises:
            RoleMismatchError: If role is not exactly 'professor'
            ValidationError: If formation, unit or date is invalid
        """
        self._require_role(ProfessorProfile.required_role)
        profile = ProfessorProfile.create(formation, unit, date)
        self.specialty = profile
        return profile

    def _require_role(self, role: Role) -> None:
        # Exact comparison: 'Student' or 'STUDENT' do not qualify
        if self.role != role.value:
            raise RoleMismatchError(
                f"Researcher '{self.email}' with role '{self.role}' "
                f"is not compatible with a {role.value} specialty"
            )

    def describe(self) -> str:
        """Render the researcher as a single line of text."""
        text = (
            f"{self.name} ({self.role}) - {self.biography} - {self.email} - "
            f"{self.photo_url} - active={str(self.active).lower()}"
        )
        if self.specialty is not None:
            text += f" - {self.specialty.describe()}"
        return text

    def sort_key(self) -> tuple[str, str]:
        """Natural ordering key: name, then email for identical names."""
        return (self.name, self.email)

    def __lt__(self, other: Researcher) -> bool:
        if not isinstance(other, Researcher):
            return NotImplemented
        return self.sort_key() < other.sort_key()
