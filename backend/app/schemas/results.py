from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Acknowledgement(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True


class InsertResult(_Acknowledgement):
    inserted_id: str


class UpdateResult(_Acknowledgement):
    matched_count: int = 0
    modified_count: int = 0
    upserted_count: int = 0
    upserted_id: str | None = None


class DeleteResult(_Acknowledgement):
    deleted_count: int = 0
