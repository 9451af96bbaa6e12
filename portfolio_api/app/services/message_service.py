"""
Service layer for contact form messages.

Messages arrive from the public contact form and are read by the
admin.  Storage owns the ``read`` flag and the ``created_at``
timestamp: a new message is always unread, and the only change the
admin can make afterwards is marking it as read.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.db import MemoryDatabase
from ..schemas.message import MessageCreate, MessageRead


class MessageService:
    """Service for managing contact messages."""

    def __init__(self, db: MemoryDatabase) -> None:
        self._table = db.messages

    async def list_messages(self) -> List[MessageRead]:
        """Return all messages, newest first, regardless of read state."""
        rows = self._table.all(key=lambda r: (r["created_at"], r["id"]), reverse=True)
        return [MessageRead(**row) for row in rows]

    async def get_message(self, message_id: int) -> Optional[MessageRead]:
        row = self._table.get(message_id)
        return MessageRead(**row) if row else None

    async def create_message(self, data: MessageCreate) -> MessageRead:
        logger = logging.getLogger(__name__)
        values = data.model_dump()
        values["read"] = False
        values["created_at"] = datetime.now(timezone.utc)
        row = self._table.insert(values)
        logger.info("Received message %s", row["id"])
        return MessageRead(**row)

    async def mark_message_as_read(self, message_id: int) -> bool:
        """Set ``read`` on a message.

        Returns ``False`` if the message does not exist.  Marking an
        already read message is not an error.
        """
        row = self._table.update(message_id, {"read": True})
        if row is None:
            return False
        logging.getLogger(__name__).info("Marked message %s as read", message_id)
        return True

    async def delete_message(self, message_id: int) -> bool:
        deleted = self._table.delete(message_id)
        if deleted:
            logging.getLogger(__name__).info("Deleted message %s", message_id)
        return deleted

    async def count_unread_messages(self) -> int:
        return sum(1 for _ in self._table.find(lambda r: not r["read"]))
