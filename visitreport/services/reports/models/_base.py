from __future__ import annotations

import os
from datetime import datetime, timezone

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict


_STRICTNESS_FLAGS = {
    "1": "forbid",
    "true": "forbid",
    "yes": "forbid",
    "on": "forbid",
    "strict": "forbid",
    "0": "allow",
    "false": "allow",
    "no": "allow",
    "off": "allow",
    "lenient": "allow",
}


def _env_extra_mode(default: str = "ignore") -> str:
    """Pydantic ``extra`` mode for store rows.

    ``VISITREPORT_MODELS_EXTRA`` takes precedence over ``VISITREPORT_EXTRA``.
    Either holds a mode name or a strictness flag; unknown values give
    ``default``.
    """
    for var in ("VISITREPORT_MODELS_EXTRA", "VISITREPORT_EXTRA"):
        raw = os.getenv(var, "").strip().lower()
        if raw:
            break
    else:
        return default

    if raw in ("allow", "forbid", "ignore"):
        return raw
    return _STRICTNESS_FLAGS.get(raw, default)


_EXTRA = _env_extra_mode()


def parse_timestamp(v):
    """Accept ISO-8601 strings (``Z`` suffix included) as well as datetimes."""
    if isinstance(v, str):
        return isoparse(v)
    return v


class VisitModel(BaseModel):
    """
    Project-wide base model for store rows.

    Store rows frequently carry columns we do not model, so the default is
    extra='ignore'; switch at runtime by setting an env var before import:
      export VISITREPORT_MODELS_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        populate_by_name=True,
    )


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


__all__ = ["VisitModel", "_env_extra_mode", "parse_timestamp", "utcnow"]
