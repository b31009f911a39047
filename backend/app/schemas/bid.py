from pydantic import BaseModel, ConfigDict, Field


class BidCreate(BaseModel):
    # price, comment, deadline, title, category etc. are kept as sent
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: str
    job_id: str = Field(alias="jobId")
    buyer: str | None = None
    status: str = "Pending"


class BidStatusUpdate(BaseModel):
    status: str
