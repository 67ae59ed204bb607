"""Demo sign-in.

There is no credential check. The role is always passed explicitly and is
never derived from the email address.
"""

import logging
from uuid import uuid4

from venues.domain import Principal, Role
from venues.domain.errors import InvalidCredentialsError
from venues.services.network import SimulatedNetwork
from venues.stores.interfaces import AccountDirectory

logger = logging.getLogger(__name__)

DEFAULT_NAMES = {
    Role.USER: "John Doe",
    Role.OWNER: "Stadium Owner",
    Role.ADMIN: "Admin User",
}


class DemoAuthenticator:
    def __init__(self, accounts: AccountDirectory, network: SimulatedNetwork | None = None) -> None:
        self._accounts = accounts
        self._network = network or SimulatedNetwork()

    async def sign_in(self, email: str, password: str, role: Role | str) -> Principal:
        """Return the principal for ``email``, registering it on first sign-in.

        Raises:
            InvalidCredentialsError: If email or password is empty or the role
                is unknown.
        """
        await self._network.round_trip("sign_in")
        if not email or not password:
            raise InvalidCredentialsError("Email and password are required")
        try:
            role = Role(role)
        except ValueError:
            raise InvalidCredentialsError("Unknown role") from None

        existing = self._accounts.find_by_email(email)
        if existing is not None and existing.role == role:
            return existing

        principal = Principal(
            id=existing.id if existing else f"{role.value}-{uuid4().hex[:8]}",
            name=existing.name if existing else DEFAULT_NAMES[role],
            email=email,
            role=role,
        )
        self._accounts.save(principal)
        logger.info("Signed in %s as %s", principal.id, role.value)
        return principal

    async def accounts(self, role: Role | None = None) -> list[Principal]:
        await self._network.round_trip("accounts")
        return self._accounts.list_accounts(role)
