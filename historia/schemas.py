"""Pydantic models for article payloads handed over by the encyclopedia client."""
from __future__ import annotations

from pydantic import BaseModel

from historia.extraction import TopicDocument


class TopicPayload(BaseModel):
    """Page object as returned by the encyclopedia content API."""

    #: Page title shown as the topic name.
    title: str
    #: Plain-text article body; may be empty when the fetch returned nothing.
    extract: str = ""
    #: Encyclopedia page id, when known.
    pageid: int | str | None = None

    def to_domain(self, topic_id: str | None = None) -> TopicDocument:
        """Convert the validated payload into a :class:`TopicDocument`."""

        identifier = topic_id or (str(self.pageid) if self.pageid is not None else self.title)
        return TopicDocument(topic_id=identifier, title=self.title, content=self.extract)


__all__ = ["TopicPayload"]
