"""ResearcherRegistry - Main API for Researcher registry operations."""

from __future__ import annotations

import threading

from pesquisa.config import RegistryConfig
from pesquisa.logging import get_logger, mask_email
from pesquisa.researchers.exceptions import EmptyResultError, NotFoundError, UnknownFieldError
from pesquisa.researchers.models import Researcher, ResearcherField, Role
from pesquisa.validation import (
    require_choice,
    require_date,
    require_email,
    require_gpa,
    require_photo_url,
    require_semester,
    require_text,
)

logger = get_logger("researchers")


class ResearcherRegistry:
    """Main API for Researcher registry operations.

    Holds researchers keyed by email. Every public operation runs under a
    single re-entrant lock, so a re-key is never observed half done.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Limits and delimiters; defaults to RegistryConfig()
        """
        self._config = config or RegistryConfig()
        self._researchers: dict[str, Researcher] = {}
        self._hit_count = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._researchers)

    def __contains__(self, email: object) -> bool:
        with self._lock:
            return email in self._researchers

    # --- Lifecycle ---

    def register(
        self,
        name: str,
        role: str,
        biography: str,
        email: str,
        photo_url: str,
    ) -> Researcher:
        """Register a researcher under its email.

        Fields are checked in a fixed order (name, role, biography, email,
        photo_url); the first invalid one is reported. An existing
        researcher with the same email is replaced.

        Args:
            name: Display name
            role: Role token, stored as given
            biography: Free text biography
            email: Identifying email
            photo_url: http(s) URL of the researcher's photo

        Returns:
            The registered Researcher

        Raises:
            ValidationError: If any field is empty or malformed
        """
        require_text(name, "Name cannot be empty.")
        require_text(role, "Role cannot be empty.")
        require_text(biography, "Biography cannot be empty.")
        require_text(email, "Email cannot be empty.")
        require_text(photo_url, "Photo URL cannot be empty.")
        require_email(email)
        require_photo_url(photo_url)

        researcher = Researcher(
            name=name,
            role=role,
            biography=biography,
            email=email,
            photo_url=photo_url,
        )
        with self._lock:
            if email in self._researchers:
                logger.warning("Overwriting researcher %s", mask_email(email))
            self._researchers[email] = researcher
        logger.info("Registered researcher %s (role=%s)", mask_email(email), role)
        return researcher

    def remove(self, email: str) -> None:
        """Remove a researcher.

        Raises:
            NotFoundError: If email is unknown
        """
        with self._lock:
            self._require(email)
            del self._researchers[email]
        logger.info("Removed researcher %s", mask_email(email))

    def get(self, email: str) -> Researcher:
        """Get researcher by email.

        Raises:
            ValidationError: If email is empty
            NotFoundError: If email is unknown
        """
        require_text(email, "Email cannot be empty.")
        with self._lock:
            return self._require(email)

    # --- Mutation ---

    def set_attribute(self, email: str, attribute: str, new_value: str) -> None:
        """Change one field of a researcher.

        EMAIL moves the researcher to a new key; the other fields are
        delegated to Researcher.mutate_field.

        Args:
            email: Current email of the researcher
            attribute: NAME, ROLE, BIOGRAPHY, PHOTO_URL or EMAIL
            new_value: Value to store

        Raises:
            ValidationError: If attribute or new_value is empty or malformed
            NotFoundError: If email is unknown
            UnknownFieldError: If attribute is not a mutable field
        """
        require_text(attribute, "Attribute cannot be empty.")
        with self._lock:
            researcher = self._require(email)
            try:
                field = ResearcherField(attribute)
            except ValueError as e:
                raise UnknownFieldError(f"Unknown researcher field: '{attribute}'") from e

            if field is ResearcherField.EMAIL:
                self._rekey(researcher, new_value)
                return

            require_text(new_value, f"New value for {field} cannot be empty.")
            if field is ResearcherField.PHOTO_URL:
                require_photo_url(new_value)
            researcher.mutate_field(field, new_value)
        logger.info("Updated %s of researcher %s", attribute, mask_email(email))

    def _rekey(self, researcher: Researcher, new_email: str) -> None:
        require_email(new_email)
        old_email = researcher.email
        if new_email != old_email and new_email in self._researchers:
            logger.warning(
                "Re-key of %s overwrites %s", mask_email(old_email), mask_email(new_email)
            )
        del self._researchers[old_email]
        researcher.email = new_email
        self._researchers[new_email] = researcher
        logger.info("Moved researcher %s to %s", mask_email(old_email), mask_email(new_email))

    def activate(self, email: str) -> None:
        """Mark a researcher active.

        Raises:
            NotFoundError: If email is unknown
        """
        with self._lock:
            self._require(email).activate()

    def deactivate(self, email: str) -> None:
        """Mark a researcher inactive.

        Raises:
            NotFoundError: If email is unknown
        """
        with self._lock:
            self._require(email).deactivate()

    def attach_student_specialty(self, email: str, semester: int, gpa: float) -> None:
        """Attach semester and GPA to a student.

        Raises:
            ValidationError: If email is empty or semester/gpa is out of range
            NotFoundError: If email is unknown
            RoleMismatchError: If the researcher's role is not exactly 'student'
        """
        limits = self._config.limits
        require_text(email, "Email cannot be empty.")
        require_semester(semester, limits)
        require_gpa(gpa, limits)
        with self._lock:
            self._require(email).attach_student_specialty(semester, gpa, limits)
        logger.info("Attached student specialty to %s", mask_email(email))

    def attach_professor_specialty(self, email: str, formation: str, unit: str, date: str) -> None:
        """Attach formation, unit and date to a professor.

        Raises:
            ValidationError: If any field is empty or date is malformed
            NotFoundError: If email is unknown
            RoleMismatchError: If the researcher's role is not exactly 'professor'
        """
        require_text(email, "Email cannot be empty.")
        require_text(formation, "Formation cannot be empty.")
        require_text(unit, "Unit cannot be empty.")
        require_date(date)
        with self._lock:
            self._require(email).attach_professor_specialty(formation, unit, date)
        logger.info("Attached professor specialty to %s", mask_email(email))

    # --- Queries ---

    def describe(self, email: str) -> str:
        """Return the text representation of a researcher.

        Raises:
            ValidationError: If email is empty
            NotFoundError: If email is unknown
        """
        return self.get(email).describe()

    def is_active(self, email: str) -> bool:
        """Return whether a researcher is active.

        Raises:
            ValidationError: If email is empty
            NotFoundError: If email is unknown
        """
        return self.get(email).active

    def list_by_role(self, role: str) -> str:
        """Describe every researcher with the given role.

        The role token is matched case-insensitively against stored roles.

        Args:
            role: One of the Role tokens, in any case

        Returns:
            Descriptions joined by the configured list delimiter

        Raises:
            ValidationError: If role is not a recognized token
            EmptyResultError: If no researcher has that role
        """
        require_choice(role, list(Role), f"Invalid role: '{role}'.", case_sensitive=False)
        wanted = role.lower()
        with self._lock:
            matches = [r.describe() for r in self._researchers.values() if r.role.lower() == wanted]
        logger.debug("Listing role=%s matched %d researcher(s)", wanted, len(matches))
        if not matches:
            raise EmptyResultError(f"No researchers with role '{wanted}'")
        return self._config.list_delimiter.join(matches)

    def search_by_term(self, term: str) -> str:
        """Search biographies for a term, case-insensitively.

        Matches are visited in natural order (name, then email). Each one
        is rendered as 'email: biography' followed by the search delimiter
        and counted towards hit_count().

        Args:
            term: Substring to look for

        Returns:
            Concatenated matches, or an empty string when nothing matches

        Raises:
            ValidationError: If term is empty
        """
        require_text(term, "Search term cannot be empty.")
        needle = term.lower()
        delimiter = self._config.search_delimiter
        with self._lock:
            matches = [
                r for r in sorted(self._researchers.values()) if needle in r.biography.lower()
            ]
            self._hit_count += len(matches)
            result = "".join(f"{r.email}: {r.biography}{delimiter}" for r in matches)
        logger.debug("Search matched %d researcher(s)", len(matches))
        return result

    def hit_count(self) -> int:
        """Return the number of search matches since the registry was created."""
        with self._lock:
            return self._hit_count

    def _require(self, email: str) -> Researcher:
        researcher = self._researchers.get(email)
        if researcher is None:
            raise NotFoundError(f"Researcher '{email}' not found")
        return researcher
