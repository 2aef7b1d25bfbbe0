"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _bool_formatter(value: Any) -> str:
    if value is None:
        return ""
    return "Yes" if bool(value) else "No"


def _list_formatter(*, max_chars: int = 32, sep: str = ", ") -> ValueFormatter:
    def _formatter(value: Any) -> str:
        if isinstance(value, (list, tuple)):
            s = sep.join(str(v) for v in value)
        else:
            s = str(value)
        return s if len(s) <= max_chars else s[: max_chars - 1] + "…"

    return _formatter


def _labels_formatter(value: Any) -> str:
    if not isinstance(value, Mapping) or not value:
        return ""
    return ",".join(f"{key}={val}" if val else str(key) for key, val in sorted(value.items()))


def _nested(*path: str) -> ValueExtractor:
    def _extractor(row: Row) -> Any:
        current: Any = row
        for key in path:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        return current

    return _extractor


def _public_ipv4(row: Row) -> Any:
    return _nested("public_net", "ipv4", "ip")(row)


def _subnet_ranges(row: Row) -> list[str]:
    return [str(subnet.get("ip_range")) for subnet in row.get("subnets") or [] if subnet]


def _rule_count(row: Row) -> int:
    return len(row.get("rules") or [])


def _sort_name(row: Row) -> str:
    return str(row.get("name") or "").lower()


def _sort_id(row: Row) -> Any:
    ident = row.get("id")
    return ident if isinstance(ident, int) else 0


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "servers.list": TableView(
        title="Servers",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Status", keys=("status",)),
            Column("Type", extractor=_nested("server_type", "name")),
            Column("Location", extractor=_nested("datacenter", "location", "name")),
            Column("IPv4", extractor=_public_ipv4),
            Column("Labels", keys=("labels",), formatter=_labels_formatter),
        ),
        sort_key=_sort_name,
    ),
    "volumes.list": TableView(
        title="Volumes",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Size (GB)", keys=("size",), justify="right"),
            Column("Server", keys=("server",), justify="right"),
            Column("Location", extractor=_nested("location", "name")),
            Column("Status", keys=("status",)),
        ),
        sort_key=_sort_name,
    ),
    "networks.list": TableView(
        title="Networks",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("IP Range", keys=("ip_range",)),
            Column("Subnets", extractor=_subnet_ranges, formatter=_list_formatter()),
            Column("Servers", extractor=lambda r: len(r.get("servers") or []), justify="right"),
        ),
        sort_key=_sort_name,
    ),
    "firewalls.list": TableView(
        title="Firewalls",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Rules", extractor=_rule_count, justify="right"),
            Column(
                "Applied To",
                extractor=lambda r: len(r.get("applied_to") or []),
                justify="right",
            ),
        ),
        sort_key=_sort_name,
    ),
    "images.list": TableView(
        title="Images",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name", "description")),
            Column("Type", keys=("type",)),
            Column("OS", keys=("os_flavor",)),
            Column("Version", keys=("os_version",)),
            Column("Arch", keys=("architecture",)),
            Column("Status", keys=("status",)),
        ),
        sort_key=_sort_id,
    ),
    "locations.list": TableView(
        title="Locations",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("City", keys=("city",)),
            Column("Country", keys=("country",)),
            Column("Network Zone", keys=("network_zone",)),
        ),
        sort_key=_sort_id,
    ),
    "server_types.list": TableView(
        title="Server Types",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Cores", keys=("cores",), justify="right"),
            Column("Memory (GB)", keys=("memory",), justify="right"),
            Column("Disk (GB)", keys=("disk",), justify="right"),
            Column("CPU", keys=("cpu_type",)),
            Column("Arch", keys=("architecture",)),
            Column("Deprecated", keys=("deprecated",), formatter=_bool_formatter, justify="center"),
        ),
        sort_key=_sort_id,
    ),
    "zones.list": TableView(
        title="DNS Zones",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Mode", keys=("mode",)),
            Column("TTL", keys=("ttl",), justify="right"),
            Column("Records", keys=("record_count",), justify="right"),
            Column("Status", keys=("status",)),
        ),
        sort_key=_sort_name,
    ),
}
