"""UserProfile repository interface."""

from abc import ABC, abstractmethod

from usermgmt.domain.profile.entities import UserProfile


class UserProfileRepository(ABC):
    """Repository interface for UserProfile entities."""

    @abstractmethod
    async def get_by_id(self, profile_id: int) -> UserProfile:
        """
        Load a profile together with its role.

        Parameters
        ----------
        profile_id
            Store-assigned profile id

        Returns
        -------
        The profile, with ``role`` populated

        Raises
        ------
        UserProfileNotFoundError
            If no profile has this id
        """

    @abstractmethod
    async def get_all(self) -> list[UserProfile]:
        """Return every profile, each with ``role`` populated."""

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """
        Persist a new profile.

        Does not check that ``role_id`` exists; that is the caller's job.

        Parameters
        ----------
        profile
            The profile to create. ``id`` may be given explicitly.

        Returns
        -------
        The stored profile, without ``role`` populated

        Raises
        ------
        DuplicateUserProfileIdentityError
            If an existing profile shares the id or the guid
        EmailAlreadyExistsError
            If an existing profile already uses the email
        """

    @abstractmethod
    async def update(self, profile_update: UserProfile) -> UserProfile:
        """
        Overwrite name, email, bio, role_id and receive_newsletter.

        Parameters
        ----------
        profile_update
            Carries the id of the profile to change and the new field values

        Returns
        -------
        The updated profile, without ``role`` populated

        Raises
        ------
        UserProfileNotFoundError
            If no profile has ``profile_update.id``
        EmailAlreadyExistsError
            If a different profile already uses the new email
        """
