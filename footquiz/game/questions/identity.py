from __future__ import annotations

import dataclasses
import hashlib
import json
from typing import Any, Hashable, Mapping

STRUCTURAL_ID_PREFIX = "sha256:"


def _payload(item: Any) -> Any:
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return {"kind": type(item).__name__, "fields": dataclasses.asdict(item)}
    if isinstance(item, Mapping):
        return dict(item)
    raise TypeError(f"cannot derive a structural identity for {type(item).__name__}")


def structural_identity(item: Any) -> str:
    serialized = json.dumps(
        _payload(item),
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
    )
    return STRUCTURAL_ID_PREFIX + hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def natural_identity(item: Any) -> Hashable | None:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def item_identity(item: Any) -> Hashable:
    """Natural ``id`` when the item has one, else a digest of its serialized content."""
    natural_id = natural_identity(item)
    if natural_id is not None:
        return natural_id
    return structural_identity(item)
