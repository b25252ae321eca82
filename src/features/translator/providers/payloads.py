from pydantic import BaseModel, ConfigDict, Field


class MTranServerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    text: str


class DeepLXRequest(BaseModel):
    source_lang: str
    target_lang: str
    text: str


class DeepLXResponse(BaseModel):
    code: int
    id: int | None = None
    data: str | None = None
    alternatives: list[str] | None = None
