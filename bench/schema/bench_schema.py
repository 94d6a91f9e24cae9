from pydantic import BaseModel, Field


class Mark(BaseModel):
    id: str
    timestamp: float
    since_start: float
    since_last_mark: float

    model_config = {"frozen": True}


class BenchStats(BaseModel):
    """Statistics since start(). The mark_* fields are only set when marks exist."""

    start: float
    stop: float | None
    elapsed: float
    mark_average: float | None = None
    mark_shortest: Mark | None = None
    mark_longest: Mark | None = None


class BenchDump(BaseModel):
    statistics: BenchStats | None = Field(serialization_alias="STATISTICS")
    marks: list[Mark] = Field(serialization_alias="MARKS")
    errors: list[str] = Field(serialization_alias="ERRORS")
