from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Union


class TrainStop(BaseModel):
    """A train stop with its scheduled time"""
    name: str
    time: str

    class Config:
        frozen = True


class BusTimings(BaseModel):
    """Service window of a bus route"""
    first_bus: str
    last_bus: str
    frequency_peak: str


class TrainTimings(BaseModel):
    """Departure and arrival of a train leg"""
    departure_time: str
    arrival_time: str


class BusRoute(BaseModel):
    """Bus line with its ordered stops and service window"""
    id: str
    name: str
    type: Literal["bus"] = "bus"
    stops: List[str] = Field(min_length=2)
    first_bus: str
    last_bus: str
    frequency_peak: str

    class Config:
        frozen = True

    def stop_names(self) -> List[str]:
        return list(self.stops)

    def extract_timings(self, journey_stops: List[str]) -> BusTimings:
        """Bus timings are route-wide and not adjusted to the ridden section"""
        return BusTimings(
            first_bus=self.first_bus,
            last_bus=self.last_bus,
            frequency_peak=self.frequency_peak
        )


class TrainRoute(BaseModel):
    """Train line with a timetabled stop sequence"""
    id: str
    name: str
    type: Literal["train"] = "train"
    stops: List[TrainStop] = Field(min_length=2)

    class Config:
        frozen = True

    def stop_names(self) -> List[str]:
        return [stop.name for stop in self.stops]

    def extract_timings(self, journey_stops: List[TrainStop]) -> TrainTimings:
        return TrainTimings(
            departure_time=journey_stops[0].time,
            arrival_time=journey_stops[-1].time
        )


Route = Annotated[Union[BusRoute, TrainRoute], Field(discriminator="type")]
Timings = Union[TrainTimings, BusTimings]


class Leg(BaseModel):
    """One uninterrupted ride on a single route"""
    route: Route
    journey_stops: Union[List[TrainStop], List[str]]
    timings: Timings

    @property
    def route_id(self) -> str:
        return self.route.id

    @property
    def route_name(self) -> str:
        return self.route.name

    @property
    def mode(self) -> str:
        return self.route.type
