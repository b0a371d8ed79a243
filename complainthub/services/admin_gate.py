from __future__ import annotations
import hmac

from complainthub.config import ADMIN_PASSWORD
from complainthub.utils.logger import ServiceLogger

logger = ServiceLogger("admin_gate")


class AdminGate:
    """Local shared-secret check guarding status updates.

    Placeholder policy: no hashing, no expiry, nothing persisted. Starts
    unauthenticated; only ``attempt`` with the secret or ``logout`` change it.
    """

    def __init__(self, secret: str = ADMIN_PASSWORD) -> None:
        self._secret = secret
        self.authenticated = False

    def attempt(self, candidate: str) -> bool:
        if self._secret and hmac.compare_digest(candidate.encode(), self._secret.encode()):
            self.authenticated = True
            logger.info("Admin authenticated")
            return True
        logger.warning("Invalid admin password")
        return False

    def logout(self) -> None:
        self.authenticated = False
        logger.info("Admin logged out")
