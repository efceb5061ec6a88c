from datetime import datetime
from pydantic import BaseModel

class HealthOut(BaseModel):
    status: str = "OK"
    timestamp: datetime
