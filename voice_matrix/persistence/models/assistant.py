"""Assistant configuration model."""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, String, Text

from voice_matrix.persistence.database import Base

STATUS_ASSEMBLED = "assembled"
STATUS_DEPLOYED = "deployed"


def _new_id() -> str:
    return str(uuid.uuid4())


class AssistantConfigurationRecord(Base):
    """Stores a user's assistant draft alongside its built configuration.

    The draft fields (dynamic_segments, voice_settings, conversation_settings)
    are the source of truth; assembled_prompt and configuration are always
    re-derived from them on save.
    """

    __tablename__ = "assistant_configurations"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    template_id = Column(String(100), nullable=False, index=True)
    template_version = Column(String(20), nullable=False)
    dynamic_segments = Column(JSON, nullable=False, default=dict)
    voice_settings = Column(JSON, nullable=False, default=dict)
    conversation_settings = Column(JSON, nullable=False, default=dict)
    assembled_prompt = Column(Text, nullable=False)
    configuration = Column(JSON, nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_ASSEMBLED)
    remote_id = Column(String(100), nullable=True)
    phone_number = Column(String(50), nullable=True)
    last_error = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<AssistantConfigurationRecord(id={self.id}, user_id={self.user_id}, "
            f"template={self.template_id}, status={self.status})>"
        )
