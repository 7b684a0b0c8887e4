"""System Schemas — liveness, ping and stats payloads.

Invariants:
    - EnvPresence carries booleans only (plus NODE_ENV), never a secret value
    - Timestamps are ISO-8601 strings produced by core.timestamps
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EnvPresence(BaseModel):
    """Configuration presence flags echoed by the health check."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    node_env: str | None = None
    has_open_states_key: bool
    has_legi_scan_key: bool
    has_database_url: bool


class LivenessPayload(BaseModel):
    """Health check body."""
    status: Literal["ok"] = "ok"
    timestamp: str
    env: EnvPresence

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True)


class PingPayload(BaseModel):
    ping: Literal["pong"] = "pong"
    time: str

    def to_body(self) -> dict:
        return self.model_dump()


class StatsSnapshot(BaseModel):
    """Aggregate counters shown on the dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_bills: int
    council_members: int
    neighborhoods_active: int
    total_votes: int
    neighbors_engaged: int

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True)
