"""Command-line interface for interacting with the Hetzner Cloud API."""
from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install hetzner-python[cli]' to enable this command."
    ) from exc

from .client import HetznerClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .config import DEFAULT_BASE_URL
from .exceptions import ConfigurationError, HetznerError

app = typer.Typer(help="Hetzner Cloud management CLI.", no_args_is_help=True)

servers_app = typer.Typer(help="Server operations.")
volumes_app = typer.Typer(help="Volume operations.")
networks_app = typer.Typer(help="Network operations.")
firewalls_app = typer.Typer(help="Firewall operations.")
images_app = typer.Typer(help="Image operations.")
locations_app = typer.Typer(help="Location catalog.")
server_types_app = typer.Typer(help="Server type catalog.")
zones_app = typer.Typer(help="DNS zone operations.")
actions_app = typer.Typer(help="Action lookups.")
app.add_typer(servers_app, name="servers")
app.add_typer(volumes_app, name="volumes")
app.add_typer(networks_app, name="networks")
app.add_typer(firewalls_app, name="firewalls")
app.add_typer(images_app, name="images")
app.add_typer(locations_app, name="locations")
app.add_typer(server_types_app, name="server-types")
app.add_typer(zones_app, name="zones")
app.add_typer(actions_app, name="actions")


def _build_client(
    token: str | None,
    base_url: str,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
) -> HetznerClient:
    if not token:
        raise typer.BadParameter("--token (or HCLOUD_TOKEN) is required.")

    verify_target: bool | str
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        verify_target = str(expanded_cert)
    else:
        verify_target = verify_ssl

    try:
        return HetznerClient(
            token=token,
            base_url=base_url,
            verify_ssl=verify_target,
            timeout=timeout,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows: list[Mapping[str, Any]] = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_request_error(exc: HetznerError) -> None:
    if exc.status_code is not None:
        message = f"Request failed (status {exc.status_code}): {exc}"
    else:
        message = f"Request failed: {exc}"
    code = getattr(exc, "code", None)
    if code is not None and code != exc.status_code:
        message += f"\nCode: {code}"
    if exc.details:
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    # Respect HCLOUD_VERIFY_SSL environment variable when present.
    # Accept common truthy/falsey representations (1/0, true/false, yes/no).
    env_verify = os.getenv("HCLOUD_VERIFY_SSL")
    if env_verify is None:
        default_verify = True
    else:
        default_verify = env_verify.strip().lower() not in {"0", "false", "no", "off"}

    return {
        "token": typer.Option(
            None,
            "--token",
            "-t",
            envvar="HCLOUD_TOKEN",
            help="Hetzner Cloud project API token.",
        ),
        "base_url": typer.Option(
            DEFAULT_BASE_URL,
            "--base-url",
            envvar="HCLOUD_ENDPOINT",
            help="Hetzner Cloud API base URL.",
            show_default=True,
        ),
        "verify_ssl": typer.Option(
            default_verify,
            "--verify/--no-verify",
            envvar="HCLOUD_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "cert_path": typer.Option(
            None,
            "--cert",
            envvar="HCLOUD_CA_CERT",
            help="Path to a custom CA bundle for TLS verification.",
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


def _list_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "page": typer.Option(None, "--page", min=1, help="Page to fetch."),
        "per_page": typer.Option(
            None, "--per-page", min=1, max=50, help="Entries per page (API maximum is 50)."
        ),
        "label_selector": typer.Option(
            None,
            "--label-selector",
            "-l",
            help="Filter by label selector (e.g. env=prod,tier!=db).",
        ),
        "fetch_all": typer.Option(
            False,
            "--all",
            help="Follow pagination and return every entry.",
        ),
    }


_LIST_OPTIONS = _list_options()


def _list_parameters(
    page: int | None, per_page: int | None, label_selector: str | None
) -> dict[str, Any]:
    parameters: dict[str, Any] = {
        "page": page,
        "per_page": per_page,
        "label_selector": label_selector,
    }
    return {key: value for key, value in parameters.items() if value is not None}


def _rows(records: Iterable[Any]) -> list[dict[str, Any]]:
    return [record.to_dict() for record in records]


def _run_list(
    family: str,
    *,
    view_id: str,
    token: str | None,
    base_url: str,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
    output_json: bool,
    page: int | None,
    per_page: int | None,
    label_selector: str | None,
    fetch_all: bool,
    with_labels: bool = True,
) -> None:
    parameters = _list_parameters(page, per_page, label_selector if with_labels else None)
    with _build_client(
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        resource = getattr(client, family)
        try:
            if fetch_all:
                rows = _rows(resource.iter_all(parameters))
            else:
                rows = _rows(resource.list(parameters))
        except HetznerError as exc:
            _handle_request_error(exc)
            return

    _present_output(rows, view_id=view_id, json_output=output_json)


@servers_app.command("list")
def servers_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List servers."""

    _run_list(
        "servers",
        view_id="servers.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@servers_app.command("get")
def servers_get(
    server_id: str = typer.Argument(..., help="Server ID."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show one server as JSON."""

    with _build_client(
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            response = client.servers.retrieve(server_id)
            server = response.entity
        except HetznerError as exc:
            _handle_request_error(exc)
            return

    _echo_json(server.to_dict())


def _run_server_action(
    verb: str,
    server_id: str,
    *,
    token: str | None,
    base_url: str,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
) -> None:
    with _build_client(
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            action = getattr(client.servers.actions, verb)(server_id).action
        except HetznerError as exc:
            _handle_request_error(exc)
            return

    typer.secho(
        f"Action {action.id} ({action.command}) is {action.status}.", fg=typer.colors.GREEN
    )


@servers_app.command("poweron")
def servers_poweron(
    server_id: str = typer.Argument(..., help="Server ID."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Start a server."""

    _run_server_action(
        "power_on",
        server_id,
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    )


@servers_app.command("poweroff")
def servers_poweroff(
    server_id: str = typer.Argument(..., help="Server ID."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Cut power to a server (hard stop)."""

    _run_server_action(
        "power_off",
        server_id,
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    )


@servers_app.command("reboot")
def servers_reboot(
    server_id: str = typer.Argument(..., help="Server ID."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Send a soft reboot (ACPI) to a server."""

    _run_server_action(
        "reboot",
        server_id,
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    )


@volumes_app.command("list")
def volumes_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List volumes."""

    _run_list(
        "volumes",
        view_id="volumes.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@networks_app.command("list")
def networks_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List private networks."""

    _run_list(
        "networks",
        view_id="networks.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@firewalls_app.command("list")
def firewalls_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List firewalls."""

    _run_list(
        "firewalls",
        view_id="firewalls.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@images_app.command("list")
def images_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List images (system images, snapshots and backups)."""

    _run_list(
        "images",
        view_id="images.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@locations_app.command("list")
def locations_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List data center locations."""

    _run_list(
        "locations",
        view_id="locations.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=None,
        fetch_all=fetch_all,
        with_labels=False,
    )


@server_types_app.command("list")
def server_types_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List server types."""

    _run_list(
        "server_types",
        view_id="server_types.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=None,
        fetch_all=fetch_all,
        with_labels=False,
    )


@zones_app.command("list")
def zones_list(
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    page: int | None = _LIST_OPTIONS["page"],
    per_page: int | None = _LIST_OPTIONS["per_page"],
    label_selector: str | None = _LIST_OPTIONS["label_selector"],
    fetch_all: bool = _LIST_OPTIONS["fetch_all"],
) -> None:
    """List DNS zones."""

    _run_list(
        "dns_zones",
        view_id="zones.list",
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
        output_json=output_json,
        page=page,
        per_page=per_page,
        label_selector=label_selector,
        fetch_all=fetch_all,
    )


@zones_app.command("export")
def zones_export(
    zone: str = typer.Argument(..., help="Zone ID or name."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the zone file here instead of stdout."
    ),
) -> None:
    """Export a zone in BIND zone file format."""

    with _build_client(
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            zone_file = client.dns_zones.export(zone).zone_file
        except HetznerError as exc:
            _handle_request_error(exc)
            return

    if output is not None:
        output.expanduser().write_text(zone_file, encoding="utf-8")
        typer.secho(f"Zone file written to {output}.", fg=typer.colors.GREEN)
        return
    typer.echo(zone_file, nl=not zone_file.endswith("\n"))


@actions_app.command("get")
def actions_get(
    action_id: str = typer.Argument(..., help="Action ID."),
    token: str | None = _SHARED_OPTIONS["token"],
    base_url: str = _SHARED_OPTIONS["base_url"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show the state of one action as JSON."""

    with _build_client(
        token=token,
        base_url=base_url,
        verify_ssl=verify_ssl,
        cert_path=cert_path,
        timeout=timeout,
    ) as client:
        try:
            action = client.actions.retrieve(action_id).entity
        except HetznerError as exc:
            _handle_request_error(exc)
            return

    _echo_json(action.to_dict())

