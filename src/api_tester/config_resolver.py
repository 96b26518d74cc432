"""Turns command line arguments into a RunConfig."""
import logging
from typing import Dict, List, Sequence

from pydantic import ValidationError

from src.const import (
    ADVERTISED_CONNECT_TIMEOUT_MS, APP_NAME, DEFAULT_LOG_LEVEL, DEFAULT_NUM_THREADS, DEFAULT_REQUEST_TIMEOUT_MS,
    DEFAULT_SLEEP_TIME_MS, DEFAULT_TOTAL_CALLS, FLAG_CONNECT_TIMEOUT, FLAG_KEEP_CONNECTS_OPEN,
    FLAG_NUM_THREADS, FLAG_REQUEST_TIMEOUT, FLAG_REUSE_CONNECTS, FLAG_SLEEP_TIME,
    FLAG_TOTAL_CALLS, HELP_FLAGS, INVALID_INTEGER_MESSAGE, INVALID_URL_MESSAGE, LOG_LEVEL_ENV_VAR,
    NO_ARGUMENTS_MESSAGE, URL_PREFIX,
)
from .exceptions import ConfigParseError, UsageError
from .models import RunConfig


# Configure logging
logger = logging.getLogger(__name__)


# Flags that consume the following token, mapped to RunConfig fields
INTEGER_FLAGS: Dict[str, str] = {
    FLAG_TOTAL_CALLS: "total_calls",
    FLAG_NUM_THREADS: "num_threads",
    FLAG_SLEEP_TIME: "sleep_time_ms",
    FLAG_REQUEST_TIMEOUT: "request_timeout_ms",
    FLAG_CONNECT_TIMEOUT: "connect_timeout_ms",
}

BOOLEAN_FLAGS: Dict[str, str] = {
    FLAG_REUSE_CONNECTS: "reuse_connects",
    FLAG_KEEP_CONNECTS_OPEN: "keep_connects_open",
}


def help_text() -> str:
    """Usage text printed on every early exit."""
    lines = [
        "Usage:",
        f"  {APP_NAME} [URL] [arguments]",
        "Required arguments:",
        "  [URL]                   - Server URL.",
        "Optional Arguments:",
        f"  -totalCalls [value]     - Total number of calls across all threads. Default is {DEFAULT_TOTAL_CALLS}.",
        f"  -numThreads [value]     - Number of threads. Default is {DEFAULT_NUM_THREADS}.",
        f"  -sleepTime [value]      - Sleep time in milliseconds between calls within a thread. Default is {DEFAULT_SLEEP_TIME_MS}.",
        f"  -requestTimeOut [value] - HTTP request timeout in milliseconds. Default is {DEFAULT_REQUEST_TIMEOUT_MS}.",
        f"  -connectTimeOut [value] - HTTP request timeout in milliseconds. Default is {ADVERTISED_CONNECT_TIMEOUT_MS}.",
        "  -reuseConnects          - Add the request 'Connection: keep-alive' header.",
        "  -keepConnectsOpen       - Force a new connection with every request (not advised).",
        "Help:",
        "  -? or --help - Display this help message.",
        "Environment:",
        f"  {LOG_LEVEL_ENV_VAR} - Logging verbosity (DEBUG, INFO, WARNING, ERROR). Default is {DEFAULT_LOG_LEVEL}.",
    ]
    return "\n".join(lines)


class ConfigResolver:
    """Resolves the raw argument list into a validated RunConfig."""

    @staticmethod
    def resolve(args: Sequence[str]) -> RunConfig:
        """
        Parse arguments (program name excluded).

        Args:
            args: Command line tokens; the first one is the target URL.

        Returns:
            The RunConfig for this run.

        Raises:
            UsageError: No arguments, a help flag, or a non-http URL.
            ConfigParseError: A numeric flag value is missing or malformed.
        """
        if not args:
            raise UsageError(NO_ARGUMENTS_MESSAGE)

        if any(arg in HELP_FLAGS for arg in args):
            raise UsageError()

        url = args[0]
        if not url.lower().startswith(URL_PREFIX):
            raise UsageError(INVALID_URL_MESSAGE.format(url=url))

        values = ConfigResolver._scan_flags(list(args[1:]))
        try:
            return RunConfig(url=url, **values)
        except ValidationError as e:
            field = e.errors()[0]["loc"][0]
            flag = next((f for f, name in INTEGER_FLAGS.items() if name == field), str(field))
            raise ConfigParseError(INVALID_INTEGER_MESSAGE.format(name=flag.lstrip("-"))) from e

    @staticmethod
    def _scan_flags(tokens: List[str]) -> Dict[str, object]:
        values: Dict[str, object] = {}
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token in INTEGER_FLAGS:
                values[INTEGER_FLAGS[token]] = ConfigResolver._parse_int(token, tokens, i + 1)
                i += 2
            elif token in BOOLEAN_FLAGS:
                values[BOOLEAN_FLAGS[token]] = True
                i += 1
            else:
                logger.debug(f"Ignoring unrecognized argument: {token}")
                i += 1
        return values

    @staticmethod
    def _parse_int(flag: str, tokens: List[str], index: int) -> int:
        name = flag.lstrip("-")
        if index >= len(tokens):
            raise ConfigParseError(INVALID_INTEGER_MESSAGE.format(name=name))
        value = tokens[index]
        # Plain ASCII digits with an optional leading '+'; no sign, spaces or underscores otherwise
        digits = value[1:] if value.startswith("+") else value
        if not (digits.isascii() and digits.isdigit()):
            raise ConfigParseError(INVALID_INTEGER_MESSAGE.format(name=name))
        return int(digits)
