# model/history.py
from pydantic import BaseModel


class HistoryEntry(BaseModel):
    # Persisted as {"timestamp": <ns>, "command": ..., "value": ...}
    timestamp: int
    command: str
    value: str = ""
