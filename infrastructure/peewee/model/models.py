from peewee import Model, CharField, DateTimeField, UUIDField
from core.domain.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = UUIDField(primary_key=True)
    title = CharField(max_length=TITLE_MAX_LENGTH)
    description = CharField(max_length=DESCRIPTION_MAX_LENGTH, null=True)
    status = CharField(max_length=20, index=True)
    due_date = DateTimeField(null=True, index=True)
    created_date = DateTimeField()
    updated_date = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
