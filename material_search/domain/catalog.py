"""Built-in material catalog, used when no records are configured."""

from typing import List, Tuple

from .models import Record, build_records

DEFAULT_MATERIALS: Tuple[str, ...] = (
    "MuuchStac Growth Pure",
    "10 mm tempered glass",
    "1.2mm RR Electrical Case",
    "10 A Single Pole MCB Switch Gear",
    "1600A TP ACB Draw Out Type",
    "IT Consultation",
    "DM0000011",
)


def default_records() -> List[Record]:
    """Return the built-in catalog as Records."""
    return build_records(DEFAULT_MATERIALS)
