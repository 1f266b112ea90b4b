"""
Field report for a raw catalog export.

Looks only at raw records: which fields carry data, what shapes they
arrive in, and which records look like duplicates. Run it after each new
export to spot shapes the normalizer doesn't know about yet.

    catalog-report data/collection.json
"""
import argparse
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from catalog.loader import ExportLoadError, load_export
from catalog.normalizers.helpers import is_number
from catalog.setup_logging import setup_logging

log = logging.getLogger(__name__)

# Raw fields the display layer shows on the card
DISPLAYED_FIELDS = frozenset({
    "object_id", "title", "creator", "date", "object_type", "department",
    "materials", "dimensions", "accession_number", "flags", "related",
})
SAMPLE_SIZE = 3
RULE = "=" * 80


@dataclass
class FieldStats:
    field_name: str
    present: int
    total: int
    displayed: bool
    samples: List[Any] = field(default_factory=list)

    @property
    def percentage(self) -> int:
        return round(self.present * 100 / self.total) if self.total else 0


def has_useful_data(value: Any) -> bool:
    """False for null, "", [], {} and containers holding nothing useful."""
    if value is None or value == "":
        return False
    if isinstance(value, list):
        return any(has_useful_data(v) for v in value)
    if isinstance(value, Mapping):
        return any(has_useful_data(v) for v in value.values())
    return True


def shape_of(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array" if value else "empty-array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def shape_counts(records: Sequence[Mapping[str, Any]], field_name: str) -> Dict[str, int]:
    """How many records hold each raw shape for one field (absent counts as null)."""
    counts: Dict[str, int] = {}
    for rec in records:
        kind = shape_of(rec.get(field_name))
        counts[kind] = counts.get(kind, 0) + 1
    return counts


def field_stats(records: Sequence[Mapping[str, Any]]) -> List[FieldStats]:
    """Per-field presence across the batch, most populated first."""
    names: List[str] = []
    for rec in records:
        for k in rec:
            if k not in names:
                names.append(k)

    stats = []
    for name in names:
        st = FieldStats(name, 0, len(records), name in DISPLAYED_FIELDS)
        for rec in records:
            value = rec.get(name)
            if has_useful_data(value):
                st.present += 1
                if len(st.samples) < SAMPLE_SIZE:
                    st.samples.append(value)
        stats.append(st)
    stats.sort(key=lambda s: s.present, reverse=True)
    return stats


def find_duplicates(records: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    """Records flagged possible_duplicate, and titles shared by several records."""
    flagged = [
        r.get("object_id") for r in records
        if isinstance(r.get("flags"), Mapping) and r["flags"].get("possible_duplicate") is True
    ]
    by_title: Dict[str, List[Any]] = {}
    for r in records:
        title = r.get("title")
        if isinstance(title, str) and title:
            by_title.setdefault(title, []).append(r.get("object_id"))
    return {
        "flagged": flagged,
        "title_groups": {t: ids for t, ids in by_title.items() if len(ids) > 1},
    }


def format_report(records: Sequence[Mapping[str, Any]]) -> str:
    stats = field_stats(records)
    displayed = [s for s in stats if s.displayed]
    hidden = [s for s in stats if not s.displayed]

    lines = [RULE, "FIELD ANALYSIS REPORT", RULE, ""]
    for heading, group in (("CURRENTLY DISPLAYED FIELDS:", displayed),
                           ("NOT CURRENTLY DISPLAYED (sorted by presence):", hidden)):
        lines += [heading, "-" * 80]
        for s in group:
            lines.append(f"{s.field_name}:")
            lines.append(f"  Present: {s.present}/{s.total} ({s.percentage}%)")
            lines.append(f"  Samples: {json.dumps(s.samples[:2], ensure_ascii=False)}")
            lines.append("")
        lines.append("")

    dups = find_duplicates(records)
    lines += [
        RULE,
        "SUMMARY:",
        f"Total unique fields: {len(stats)}",
        f"Currently displayed: {len(displayed)}",
        f"Not displayed: {len(hidden)}",
        f"Flagged duplicates: {len(dups['flagged'])}",
        f"Title groups with duplicates: {len(dups['title_groups'])}",
        RULE,
    ]
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="catalog-report", description="Field report for a raw catalog export.")
    parser.add_argument("export", help="path to the export JSON file")
    parser.add_argument("--shapes", metavar="FIELD", action="append", default=[],
                        help="also print the raw shape histogram for FIELD (repeatable)")
    args = parser.parse_args(argv)

    setup_logging()
    try:
        export = load_export(args.export)
    except ExportLoadError as e:
        log.error("%s", e)
        return 1

    print(format_report(export.records))
    for name in args.shapes:
        print(f"\n{name}: {json.dumps(shape_counts(export.records, name), sort_keys=True)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
