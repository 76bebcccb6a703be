from __future__ import annotations

import argparse
import logging

from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from ._store import Store, Subscriber, create_store
from .config import SCRIPTS, WalkthroughConfig
from .counter import (
    CounterAction,
    CounterState,
    UnrecognizedAction,
    counter_reducer,
    parse_action
)


__all__ = (
    "logging_subscriber",
    "main",
    "run_walkthrough",
)


logger = logging.getLogger(__name__)


def logging_subscriber(
    store: Store[CounterState, CounterAction],
    emit: Optional[Callable[[CounterState], None]] = None
) -> Subscriber:
    def subscriber() -> None:
        state = store.get_state()

        logger.info("Action has been dispatched")
        logger.info("%r", state)

        if emit is not None:
            emit(state)

    return subscriber


def run_walkthrough(
    config: WalkthroughConfig,
    emit: Optional[Callable[[CounterState], None]] = None
) -> list[int]:
    initial_state = None

    if config.initial_total is not None:
        initial_state = CounterState(total=config.initial_total)

    store = create_store(counter_reducer, initial_state)
    totals: list[int] = []

    store.subscribe(logging_subscriber(store, emit))
    store.subscribe(lambda: totals.append(store.get_state().total))

    for action_type in config.action_types():
        action = parse_action({"type": action_type})

        if isinstance(action, UnrecognizedAction):
            logger.info("Dispatching a useless action")

        store.dispatch(action)

    return totals


def _parse_args(argv: Optional[Sequence[str]]) -> WalkthroughConfig:
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Dispatch counter actions against a store and log each state"
    )

    parser.add_argument(
        "--script",
        choices=sorted(SCRIPTS),
        default="practice",
        help="Predefined action sequence to dispatch"
    )
    parser.add_argument(
        "--initial-total",
        type=int,
        default=None,
        help="Starting total (defaults to the reducer's own default)"
    )
    parser.add_argument(
        "--action",
        dest="actions",
        action="append",
        default=[],
        metavar="TYPE",
        help="Action type to dispatch; repeat to build a sequence"
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print every state as JSON on stdout"
    )

    args = parser.parse_args(argv)

    try:
        return WalkthroughConfig(
            script=args.script,
            initial_total=args.initial_total,
            actions=tuple(args.actions),
            log_level=args.log_level,
            json_output=args.json_output
        )
    except ValidationError as error:
        parser.error(str(error))


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = _parse_args(argv)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    emit = None

    if config.json_output:
        emit = lambda state: print(state.model_dump_json()) # noqa: E731

    totals = run_walkthrough(config, emit)

    logger.info(
        "Dispatched %d action(s), final total %s",
        len(totals),
        totals[-1] if totals else None
    )

    return 0

