"""Earnings date source registry."""

from __future__ import annotations

import importlib

from earningsdate.config import DEFAULT_SOURCES, EarningsSourceType
from earningsdate.sources.base import BaseEarningsSource

# (module under earningsdate.sources, class name); modules load on first use.
SOURCE_CLASSES: dict[EarningsSourceType, tuple[str, str]] = {
    EarningsSourceType.BLOOMBERG: ("bloomberg", "BloombergSource"),
    EarningsSourceType.FINVIZ: ("finviz", "FinVizSource"),
    EarningsSourceType.YAHOO: ("yahoo", "YahooSource"),
    EarningsSourceType.ZACKS: ("zacks", "ZacksSource"),
    EarningsSourceType.NASDAQ: ("nasdaq", "NasdaqSource"),
    EarningsSourceType.MOCK: ("mock", "MockSource"),
}


def source_type_for(name: str) -> EarningsSourceType:
    """Resolve a source name such as ``"yahoo"`` or ``"FinViz"``.

    Raises:
        ValueError: The name matches no registered source.
    """
    try:
        return EarningsSourceType(name.strip().lower())
    except ValueError:
        known = ", ".join(st.value for st in SOURCE_CLASSES)
        raise ValueError(
            f"Unknown earnings source {name!r} (known: {known})"
        ) from None


def create_source(
    source_type: EarningsSourceType | str,
    **kwargs,
) -> BaseEarningsSource:
    """Instantiate a source by type or name, forwarding kwargs to it."""
    if isinstance(source_type, str):
        source_type = source_type_for(source_type)
    module_name, cls_name = SOURCE_CLASSES[source_type]
    module = importlib.import_module(f"{__name__}.{module_name}")
    return getattr(module, cls_name)(**kwargs)


def default_sources() -> list[BaseEarningsSource]:
    return [create_source(st) for st in DEFAULT_SOURCES]


__all__ = [
    "BaseEarningsSource",
    "SOURCE_CLASSES",
    "create_source",
    "default_sources",
    "source_type_for",
]
