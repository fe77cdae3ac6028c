from .validator import validate_pool, pretty_summary
from .io import read_records, write_records, load_pool, pool_from_records
from .convert import convert_csv, convert_rows

__all__ = [
    "validate_pool", "pretty_summary",
    "read_records", "write_records", "load_pool", "pool_from_records",
    "convert_csv", "convert_rows",
]
