"""Auth provider holding a single signed-in identity."""

import logging

from contract_gen.store.base import AuthProvider, Identity

logger = logging.getLogger(__name__)


class StaticAuthProvider(AuthProvider):
    """Auth provider for scripts and tests; the identity is set explicitly."""

    def __init__(self, identity: Identity | None = None) -> None:
        self._identity = identity

    def current_user(self) -> Identity | None:
        return self._identity

    def sign_in(self, identity: Identity) -> None:
        logger.info("Signed in as %s", identity.user_id)
        self._identity = identity

    def sign_out(self) -> None:
        self._identity = None
