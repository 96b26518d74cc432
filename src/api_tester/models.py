"""Data models for the API tester."""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.const import (
    DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_NUM_THREADS, DEFAULT_REQUEST_TIMEOUT_MS,
    DEFAULT_SLEEP_TIME_MS, DEFAULT_TOTAL_CALLS, HTTPS_PREFIX, URL_PREFIX,
)


class RunConfig(BaseModel):
    """Immutable configuration for one load run."""

    model_config = ConfigDict(frozen=True)

    url: str
    total_calls: int = Field(default=DEFAULT_TOTAL_CALLS, gt=0)
    num_threads: int = Field(default=DEFAULT_NUM_THREADS, gt=0)
    sleep_time_ms: int = Field(default=DEFAULT_SLEEP_TIME_MS, ge=0)
    request_timeout_ms: int = Field(default=DEFAULT_REQUEST_TIMEOUT_MS, ge=0)
    connect_timeout_ms: int = Field(default=DEFAULT_CONNECT_TIMEOUT_MS, ge=0)
    reuse_connects: bool = False
    keep_connects_open: bool = False

    @field_validator("url")
    @classmethod
    def url_must_be_http(cls, value: str) -> str:
        if not value.lower().startswith(URL_PREFIX):
            raise ValueError(f'"{value}" is not a valid URL')
        return value

    @property
    def is_https(self) -> bool:
        return self.url.lower().startswith(HTTPS_PREFIX)

    @property
    def sleep_time(self) -> float:
        """Inter-call sleep in seconds."""
        return self.sleep_time_ms / 1000.0

    @property
    def request_timeout(self) -> float:
        return self.request_timeout_ms / 1000.0

    @property
    def connect_timeout(self) -> float:
        return self.connect_timeout_ms / 1000.0


@dataclass
class WorkerTask:
    """Share of the run assigned to one worker."""
    worker_id: int
    num_calls: int


@dataclass
class CallResult:
    """Outcome of a single timed GET."""
    worker_id: int
    call_index: int
    elapsed_ms: float
    status: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    """Aggregate figures printed at the end of a run."""
    total_calls: int
    total_time_s: float
    average_response_ms: float
    requests_per_second: float
    p50_ms: float
    p90_ms: float
    p95_ms: float
