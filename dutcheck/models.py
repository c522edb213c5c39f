"""
Core data models
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, computed_field


class FSMState(str, Enum):
    """Handshake state of the device under test"""

    IDLE = "IDLE"
    SYN_RECEIVED = "SYN_RECEIVED"
    ACK_RECEIVED = "ACK_RECEIVED"


class SymbolClass(str, Enum):
    """How an input symbol is treated in a given state"""

    ADVANCE = "advance"  # The state's trigger symbol, checksum valid
    OTHER = "other"  # Any other symbol, checksum valid
    CHECKSUM_ERROR = "checksum_error"


class Packet(BaseModel):
    """One accepted protocol event, recorded once and never modified"""

    model_config = {"frozen": True}

    id: int = Field(..., ge=1)
    timestamp: float = Field(..., description="time.monotonic() at creation")
    data_in: str
    checksum_in: str
    valid_in: bool = True
    pre_state: FSMState
    next_state: FSMState
    checksum_ok: bool
    data_out: str
    valid_out: bool = True
    expected: str
    match: bool

    @computed_field
    @property
    def checksum_error(self) -> bool:
        return not self.checksum_ok


class TestStats(BaseModel):
    """Cumulative per-session counters and coverage percentages"""

    __test__ = False  # not a pytest class

    total: int = 0
    passed: int = 0
    failed: int = 0
    input_coverage: float = Field(default=0.0, ge=0.0, le=100.0)
    fsm_coverage: float = Field(default=0.0, ge=0.0, le=100.0)

    @computed_field
    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.passed / self.total * 100


class TraceSummary(BaseModel):
    """Packet trace roll-up"""

    total: int = 0
    clean: int = 0  # match and checksum ok
    failed: int = 0  # no match or checksum error
    checksum_errors: int = 0


class CoverageEdge(BaseModel):
    """A (state, symbol class) edge of the transition table"""

    state: FSMState
    symbol_class: SymbolClass


class CoverageReport(BaseModel):
    """Detailed coverage breakdown"""

    input_coverage: float = 0.0
    fsm_coverage: float = 0.0
    symbols_seen: List[str] = Field(default_factory=list)
    symbols_missing: List[str] = Field(default_factory=list)
    edges_exercised: List[CoverageEdge] = Field(default_factory=list)
    edges_missing: List[CoverageEdge] = Field(default_factory=list)


# ========== API models ==========


class SubmitRequest(BaseModel):
    """Directed test event"""

    data_in: str
    checksum_in: str
    valid_in: bool = True
    data_out: Optional[str] = Field(
        default=None, description="Actual DUT output; omitted means the simulated conformant DUT"
    )


class SubmitResponse(BaseModel):
    """Result of a directed submit"""

    accepted: bool
    packet: Optional[Packet] = None


class RandomRequest(BaseModel):
    """Randomized test event request"""

    seed: Optional[int] = Field(default=None, description="Seed for a one-off random source")


class EngineState(BaseModel):
    """Current engine outputs"""

    state: FSMState
    data_out: str = ""
    valid_out: bool = False


class AutoRunRequest(BaseModel):
    """Auto-run configuration"""

    interval_ms: Optional[int] = Field(default=None, gt=0)
    max_ticks: Optional[int] = Field(default=None, gt=0)


class AutoRunStatus(BaseModel):
    """Auto-run scheduler status"""

    running: bool
    interval_ms: int
    ticks: int = 0
    max_ticks: Optional[int] = None
    last_packet_id: Optional[int] = None
    last_tick_at: Optional[str] = None
