from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from survivordle.engine.records import Appearance

logger = logging.getLogger(__name__)


def read_records(p: Path | str) -> List[Dict[str, Any]]:
    """
    Read a UTF-8 JSON array of appearance dicts.
    Raises FileNotFoundError if the path doesn't exist, ValueError if the
    top-level value is not a list.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{p}: expected a JSON array of records, got {type(data).__name__}")
    return data


def write_records(records: Iterable[Dict[str, Any]], p: Path | str) -> str:
    """
    Write records as a pretty-printed JSON array, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(list(records), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(p)


def pool_from_records(records: Iterable[Dict[str, Any]]) -> List[Appearance]:
    """
    Build the pool. A record missing an identity field fails the whole load;
    the error names its index so the spreadsheet row can be fixed.
    """
    pool: List[Appearance] = []
    for i, rec in enumerate(records):
        try:
            pool.append(Appearance.from_dict(rec))
        except (TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"record #{i}: {e}") from e
    return pool


def load_pool(p: Path | str) -> List[Appearance]:
    pool = pool_from_records(read_records(p))
    logger.debug("loaded %d appearances from %s", len(pool), p)
    return pool
