from pydantic import BaseModel

COUNTER_ID = "counterId"


class Counter(BaseModel):
    id: str = COUNTER_ID
    count: int = 0
