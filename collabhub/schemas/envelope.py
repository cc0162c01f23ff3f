from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: str
    code: str
    retryable: bool = False
    suggested_fix: str | None = None  # Human-readable fix suggestion
