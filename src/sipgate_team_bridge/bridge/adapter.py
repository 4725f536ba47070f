from typing import Protocol, runtime_checkable

from sipgate_team_bridge.bridge.models import Config, Contact, ContactTemplate, ContactUpdate


class ServerError(Exception):
    """Uniform failure reported back to the bridge host."""

    def __init__(self, status: int | None, message: str):
        self.status = status or 500
        self.message = message
        super().__init__(f"{self.status}: {message}")


@runtime_checkable
class Adapter(Protocol):
    async def get_contacts(self, config: Config) -> list[Contact]: ...

    async def create_contact(self, config: Config, contact: ContactTemplate) -> Contact: ...

    async def update_contact(self, config: Config, id: str, contact: ContactUpdate) -> Contact: ...

    async def delete_contact(self, config: Config, id: str) -> None: ...
