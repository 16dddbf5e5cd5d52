from pydantic import BaseModel, model_validator
from typing import List, Optional


class StationRecord(BaseModel):
    """Station entry of the static dataset"""
    name: str
    lat: Optional[float] = None
    lng: Optional[float] = None

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def accept_bare_name(cls, data):
        # stations.json may list plain names
        if isinstance(data, str):
            return {"name": data}
        return data


class Station(BaseModel):
    name: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    is_hub: bool = False


class StationList(BaseModel):
    stations: List[Station]
    total: int


class HubList(BaseModel):
    hubs: List[str]
    total: int
