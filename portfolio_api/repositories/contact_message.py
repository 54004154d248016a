"""Contact Message Repository — append-only inbox with a read flag.

Invariants:
    - list_all() is newest first (created_at desc, id desc for same-second inserts)
    - mark_read() touches is_read only; a missing id is NotFoundError
    - No route rewrites a message after insert; base update() stays unused
"""

from sqlalchemy import update

from portfolio_api.core.errors import NotFoundError
from portfolio_api.models.contact_message import ContactMessage
from portfolio_api.repositories.base import EntityRepository


class ContactMessageRepository(EntityRepository[ContactMessage]):
    model = ContactMessage
    resource_name = "Message"

    def _list_order(self) -> tuple:
        return (ContactMessage.created_at.desc(), ContactMessage.id.desc())

    async def mark_read(self, raw_id: str | int) -> None:
        entity_id = self._require_id(raw_id)
        async with self._db.session() as db:
            result = await db.execute(
                update(ContactMessage)
                .where(ContactMessage.id == entity_id)
                .values(is_read=True),
            )
            if result.rowcount == 0:
                raise NotFoundError(self.resource_name, str(entity_id))
            await db.commit()
