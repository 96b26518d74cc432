"""API tester package initialization."""
from .models import RunConfig, WorkerTask, CallResult, RunSummary
from .exceptions import ApiTesterError, UsageError, ConfigParseError, ClientConstructionError
from .config_resolver import ConfigResolver, help_text
from .client_factory import HttpClientFactory
from .latency_log import LatencyLog
from .request_executor import RequestExecutor
from .worker_pool import WorkerPool
from .latency_analyzer import LatencyAnalyzer
from .reporter import Reporter
from .runner import ApiTesterRunner, main

__all__ = [
    'RunConfig',
    'WorkerTask',
    'CallResult',
    'RunSummary',
    'ApiTesterError',
    'UsageError',
    'ConfigParseError',
    'ClientConstructionError',
    'ConfigResolver',
    'help_text',
    'HttpClientFactory',
    'LatencyLog',
    'RequestExecutor',
    'WorkerPool',
    'LatencyAnalyzer',
    'Reporter',
    'ApiTesterRunner',
    'main'
]
