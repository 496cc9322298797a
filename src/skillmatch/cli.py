"""Typer CLI entrypoint for skill scans and submissions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import load_settings
from .container import create_container
from .logging import configure_logging
from .schemas import ApplicantRecord, ScanRequest
from .schemas.config import load_config
from .service import MatchingService
from .storage import DEFAULT_EXPORT_PATH, StorageError

app = typer.Typer(help="Applicant skill matching CLI.")

_STORE_HELP = "Applicant store (JSONL) path."
_WEIGHTS_HELP = "Role skill weights JSON path."
_CONFIG_HELP = "YAML config path."
_LOG_HELP = "Log level for structured logging."


def _build_service(
    *,
    config: Optional[Path],
    store: Optional[Path],
    weights: Optional[Path],
    log_level: str,
) -> MatchingService:
    configure_logging(log_level)

    raw: Any = load_settings(config) if config else {}
    if not isinstance(raw, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_hint="config")
    try:
        settings = load_config(raw).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc

    if store:
        settings["storage"] = {"path": str(store)}
    if weights:
        settings["weights"] = {"path": str(weights)}

    return create_container(settings=settings).service()


def _read_json(path: Path, param_name: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"File is not valid UTF-8: {exc}", param_hint=param_name) from exc
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint=param_name) from exc


def _emit(payload: Any, output: Optional[Path]) -> None:
    rendered = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
    else:
        typer.echo(rendered)


@app.command()
def scan(
    request: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Scan request JSON path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write the response here instead of stdout."),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help=_STORE_HELP),
    weights: Optional[Path] = typer.Option(None, dir_okay=False, help=_WEIGHTS_HELP),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help=_LOG_HELP),
) -> None:
    """Scan an applicant's skills against their desired roles."""
    service = _build_service(config=config, store=store, weights=weights, log_level=log_level)
    try:
        scan_request = ScanRequest.model_validate(_read_json(request, "request"))
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="request") from exc

    response = service.scan(scan_request)
    _emit(response.to_dict(), output)
    if not response.can_submit:
        raise typer.Exit(code=1)


@app.command()
def submit(
    record: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applicant record JSON path."),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help=_STORE_HELP),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help=_LOG_HELP),
) -> None:
    """Save an applicant record unless it duplicates an existing one."""
    service = _build_service(config=config, store=store, weights=None, log_level=log_level)
    try:
        applicant = ApplicantRecord.model_validate(_read_json(record, "record"))
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="record") from exc

    response = service.submit(applicant)
    typer.echo(json.dumps(response.to_dict(), ensure_ascii=False))
    if not response.ok:
        raise typer.Exit(code=1)


@app.command("list")
def list_applicants(
    store: Optional[Path] = typer.Option(None, dir_okay=False, help=_STORE_HELP),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write the listing here instead of stdout."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help=_LOG_HELP),
) -> None:
    """Print every stored applicant."""
    service = _build_service(config=config, store=store, weights=None, log_level=log_level)
    try:
        records = service.list_applicants()
    except StorageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _emit([record.model_dump(mode="json") for record in records], output)


@app.command()
def export(
    payload: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="JSON document to export."),
    output: Path = typer.Option(DEFAULT_EXPORT_PATH, dir_okay=False, resolve_path=True, help="Export file path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help=_CONFIG_HELP),
    log_level: str = typer.Option("INFO", help=_LOG_HELP),
) -> None:
    """Write a JSON document to the export location."""
    service = _build_service(config=config, store=None, weights=None, log_level=log_level)
    try:
        written = service.export(_read_json(payload, "payload"), output)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="payload") from exc
    typer.echo(f"Data successfully saved to {written}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
