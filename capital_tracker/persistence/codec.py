"""Snapshot encoding between session state and the persisted key-value form."""

import math
from typing import Any

from ..config.defaults import DefaultConfig
from ..data.currency import Currency
from ..data.models import CapitalEntry, SessionState, Target
from ..errors import (
    InvalidAmountError,
    MalformedSnapshotError,
    UnknownCurrencyError,
)
from ..logging.config import get_logger
from ..utils.time import day_to_timestamp, timestamp_to_day

logger = get_logger(__name__)

ENTRIES_KEY = "entries"
TARGET_AMOUNT_KEY = "targetAmount"
TARGET_DATE_KEY = "targetDate"
CURRENCY_KEY = "currency"

SNAPSHOT_KEYS = (ENTRIES_KEY, TARGET_AMOUNT_KEY, TARGET_DATE_KEY, CURRENCY_KEY)


def encode_entry(entry: CapitalEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "date": day_to_timestamp(entry.date),
        "amount": float(entry.amount),
    }


def encode_snapshot(state: SessionState) -> dict[str, Any]:
    """Serialize the full session state."""
    return {
        ENTRIES_KEY: [encode_entry(entry) for entry in state.entries],
        TARGET_AMOUNT_KEY: float(state.target.amount),
        TARGET_DATE_KEY: day_to_timestamp(state.target.date),
        CURRENCY_KEY: state.currency.value,
    }


def decode_entries(raw: Any) -> list[CapitalEntry]:
    """
    Decode the persisted entry list.

    Raises:
        MalformedSnapshotError: If the list or any entry is malformed
    """
    if not isinstance(raw, list):
        raise MalformedSnapshotError("Entries must be a list", key=ENTRIES_KEY, raw_value=raw)

    entries = []
    for i, item in enumerate(raw):
        try:
            entry_id = item["id"]
            if not isinstance(entry_id, str) or not entry_id:
                raise ValueError(f"invalid id {entry_id!r}")
            entries.append(CapitalEntry.create(
                timestamp_to_day(item["date"]),
                item["amount"],
                entry_id=entry_id,
            ))
        except (KeyError, TypeError, ValueError, OverflowError, OSError, InvalidAmountError) as e:
            raise MalformedSnapshotError(
                f"Invalid entry at index {i}: {e}", key=ENTRIES_KEY, raw_value=item
            ) from e

    return entries


def decode_target_amount(raw: Any) -> float:
    """
    Raises:
        MalformedSnapshotError: If the amount is not a finite positive number
    """
    if (isinstance(raw, bool) or not isinstance(raw, (int, float))
            or not math.isfinite(raw) or raw <= 0):
        raise MalformedSnapshotError(
            f"Invalid target amount: {raw!r}", key=TARGET_AMOUNT_KEY, raw_value=raw
        )
    return float(raw)


def decode_target_date(raw: Any):
    """
    Raises:
        MalformedSnapshotError: If the value is not a valid timestamp
    """
    try:
        return timestamp_to_day(raw)
    except (ValueError, OverflowError, OSError) as e:
        raise MalformedSnapshotError(
            f"Invalid target date: {raw!r}", key=TARGET_DATE_KEY, raw_value=raw
        ) from e


def decode_currency(raw: Any) -> Currency:
    """
    Raises:
        MalformedSnapshotError: If the code is not in the catalog
    """
    try:
        return Currency.from_code(raw)
    except UnknownCurrencyError as e:
        raise MalformedSnapshotError(str(e), key=CURRENCY_KEY, raw_value=raw) from e


def decode_snapshot(snapshot: dict[str, Any], config: DefaultConfig) -> SessionState:
    """
    Rebuild session state from a possibly partial snapshot.

    Each field is decoded independently: a missing field yields its default
    silently, a malformed one yields its default with a warning. Never raises.
    """
    entries: list[CapitalEntry] = []
    target_amount = config.target.amount
    target_date = config.target.date
    currency = Currency.from_code(config.currency.code)

    decoders = {
        ENTRIES_KEY: decode_entries,
        TARGET_AMOUNT_KEY: decode_target_amount,
        TARGET_DATE_KEY: decode_target_date,
        CURRENCY_KEY: decode_currency,
    }
    decoded: dict[str, Any] = {}

    for key, decoder in decoders.items():
        if snapshot.get(key) is None:
            continue
        try:
            decoded[key] = decoder(snapshot[key])
        except MalformedSnapshotError as e:
            logger.warning(
                "Malformed snapshot field, using default",
                key=key,
                error=str(e)
            )

    entries = decoded.get(ENTRIES_KEY, entries)
    target_amount = decoded.get(TARGET_AMOUNT_KEY, target_amount)
    target_date = decoded.get(TARGET_DATE_KEY, target_date)
    currency = decoded.get(CURRENCY_KEY, currency)

    return SessionState(
        entries=tuple(sorted(entries, key=lambda e: e.date)),
        target=Target(amount=target_amount, date=target_date),
        currency=currency,
    )
