from sqlalchemy import Column, DateTime, String
from core.domain.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from infrastructure.sqlalchemy.session.db import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=True)
    status = Column(String(20), nullable=False, index=True)
    due_date = Column(DateTime, nullable=True, index=True)
    created_date = Column(DateTime, nullable=False)
    updated_date = Column(DateTime, nullable=False)
