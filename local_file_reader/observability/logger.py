import structlog
import logging
import os
import sys


def setup_logging(level: str = None):
    """Configure structlog for JSON output on stderr

    stdout is reserved for JSON-RPC traffic, so every log line goes to stderr.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
    )

    return structlog.get_logger("local_file_reader")

logger = setup_logging()

def log_tool_call(tool: str, status: str, start_ms: int, end_ms: int,
                  error: str = None, error_kind: str = None):
    """Log structured tool call event"""
    logger.info(
        "tool_call",
        tool=tool,
        start_ms=start_ms,
        end_ms=end_ms,
        duration_ms=end_ms - start_ms,
        status=status,
        error=error,
        error_kind=error_kind
    )
