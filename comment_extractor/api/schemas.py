from pydantic import BaseModel, ConfigDict, Field

from comment_extractor.normalization.models import Comment
from comment_extractor.processor.models import BatchResult, PageResult


class Health(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str


class CommentSchema(BaseModel):
    username: str | None = None
    text: str
    timestamp: str | None = None
    likes: str | None = None


class PageResultSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_name: str = Field(alias="imageName")
    comments: list[CommentSchema] = Field(default_factory=list)
    raw_response: str = Field(default="", alias="rawResponse")


class BatchResponse(BaseModel):
    results: list[PageResultSchema] = Field(default_factory=list)

    @classmethod
    def from_batch(cls, batch: BatchResult) -> "BatchResponse":
        return cls(
            results=[
                PageResultSchema(
                    image_name=result.display_name,
                    comments=[CommentSchema(**c.to_dict()) for c in result.comments],
                    raw_response=result.raw_response,
                )
                for result in batch.results
            ]
        )

    def to_batch(self) -> BatchResult:
        return BatchResult(
            results=[
                PageResult(
                    display_name=item.image_name,
                    comments=[Comment(**c.model_dump()) for c in item.comments],
                    raw_response=item.raw_response,
                )
                for item in self.results
            ]
        )

    def to_payload(self) -> dict[str, object]:
        """JSON body with camelCase keys and absent comment fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
