"""Describe and log cause chains as structured records."""

from __future__ import annotations

import logging
from typing import Any

from causechain.chain import iter_causes
from causechain.common.config_loader import TraversalConfig
from causechain.common.logging import check_event_fields, log_event
from causechain.common.models import CauseRecord


def describe_causes(
    error: BaseException,
    *,
    include_self: bool = False,
    config: TraversalConfig | None = None,
) -> list[CauseRecord]:
    chain = [error] if include_self else []
    chain.extend(iter_causes(error, config=config))
    last = len(chain) - 1
    return [
        CauseRecord.from_exception(item, depth=depth, is_root=depth == last)
        for depth, item in enumerate(chain)
    ]


def log_cause_chain(
    logger: logging.Logger,
    error: BaseException,
    *,
    include_self: bool = False,
    config: TraversalConfig | None = None,
    **event_fields: Any,
) -> list[CauseRecord]:
    check_event_fields(event_fields)
    records = describe_causes(error, include_self=include_self, config=config)
    for record in records:
        log_event(
            logger,
            record.message,
            **{
                **event_fields,
                "event": "CAUSE",
                "depth": record.depth,
                "error_type": record.type_name,
                "is_root": record.is_root,
            },
        )
    return records
