"""Presentation-facing surface combining the controller and the admin gate."""
from __future__ import annotations
from typing import Optional, Tuple

from complainthub.config import ADMIN_PASSWORD, API_BASE_URL
from complainthub.errors import NotAuthorized, Result
from complainthub.models import Complaint, ComplaintDraft
from complainthub.services.admin_gate import AdminGate
from complainthub.services.lifecycle import LifecycleController
from complainthub.services.transport import ComplaintTransport
from complainthub.utils.logger import ServiceLogger

logger = ServiceLogger("portal")


class ComplaintPortal:
    """What a UI talks to.

    A successful registration or status update is followed by a refresh, so
    the list shows the server's current state. The refresh outcome is
    reported through ``error`` and does not change the intent's own Result.
    """

    def __init__(self, controller: LifecycleController, gate: AdminGate) -> None:
        self.controller = controller
        self.gate = gate

    @classmethod
    def create(cls, base_url: str = API_BASE_URL, secret: str = ADMIN_PASSWORD, session=None) -> "ComplaintPortal":
        transport = ComplaintTransport(base_url=base_url, session=session)
        return cls(LifecycleController(transport), AdminGate(secret))

    @property
    def complaints(self) -> Tuple[Complaint, ...]:
        return self.controller.complaints

    @property
    def is_admin(self) -> bool:
        return self.gate.authenticated

    @property
    def loading(self) -> bool:
        return self.controller.loading

    @property
    def error(self) -> Optional[str]:
        return self.controller.error

    async def register(self, draft: ComplaintDraft) -> Result[Complaint]:
        result = await self.controller.register(draft)
        if result.ok:
            await self.controller.refresh()
        return result

    async def refresh(self) -> Result[None]:
        return await self.controller.refresh()

    async def set_status(self, complaint_id: str, status) -> Result[Complaint]:
        if not self.gate.authenticated:
            logger.warning("Status update refused: admin not logged in", complaint_id=complaint_id)
            return Result.failure(NotAuthorized())
        result = await self.controller.set_status(complaint_id, status)
        if result.ok:
            await self.controller.refresh()
        return result

    def login(self, password: str) -> bool:
        return self.gate.attempt(password)

    def logout(self) -> None:
        self.gate.logout()

    def close(self) -> None:
        self.controller.transport.close()
