"""structlog setup for the nsidctl CLI.

Only the service layer logs: one DEBUG record per rejected input and a
summary per ``check`` run. Those records appear with ``-v``; otherwise
only warnings get through. Logs go to stderr, as console lines or as
JSON with ``--log-json``, and never mix with results on stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``nsidctl.*`` stdlib loggers through a structlog formatter.

    Called once per CLI invocation by the app context. Replaces any
    handlers already on the root logger, so repeated calls do not
    duplicate output.

    Args:
        verbose: Show the per-input DEBUG records from the service layer.
        log_json: Render each record as a JSON object instead of a console line.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("nsidctl").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
