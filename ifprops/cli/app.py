"""
Aplicación CLI de ifprops.

Solo compone comandos y formatea salida; la lógica vive en core, el loader
declarativo y los providers.
"""

from pathlib import Path
from typing import List, NoReturn, Optional

from dotenv import load_dotenv

# Cargar .env del directorio actual antes de resolver rutas
_env = Path.cwd() / ".env"
if _env.exists():
    load_dotenv(_env)

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ifprops import __version__
from ifprops.core.errors import IfPropsError, UnsupportedEnsureValue
from ifprops.core.reconcile import ReconcileResult, plan_from_results, reconcile_catalog
from ifprops.core.resource.catalog import Catalog
from ifprops.core.runtime.resolver import manifest_file, state_file
from ifprops.declarative.loader import load_manifest
from ifprops.providers.static import StaticStateProvider

app = typer.Typer(
    name="ifprops",
    help="Propiedades de protocolo de interfaces (MTU, standby) - sincronización declarativa",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

DRIFT_EXIT_CODE = 2


def _fail(e: IfPropsError) -> NoReturn:
    if isinstance(e, UnsupportedEnsureValue):
        console.print(f"[red]❌ ensure: absent no soportado. {e}[/red]")
    else:
        console.print(f"[red]❌ {e}[/red]")
    raise typer.Exit(1)


def _load(manifest: Optional[Path]) -> Catalog:
    path = manifest or manifest_file()
    try:
        return load_manifest(path)
    except IfPropsError as e:
        _fail(e)


def _provider(state: Optional[Path]) -> StaticStateProvider:
    try:
        return StaticStateProvider(state or state_file(), console)
    except IfPropsError as e:
        _fail(e)


def _display_drift(results: List[ReconcileResult]) -> None:
    """Muestra drift en formato legible"""
    drifted = [r for r in results if not r.in_sync]
    if not drifted:
        console.print("[green]✅ No se detectó drift. Estado deseado y real coinciden.[/green]")
        return

    for r in drifted:
        table = Table(title=f"Drift detectado: {r.title}", show_header=True, header_style="bold")
        table.add_column("Propiedad", style="cyan")
        table.add_column("Deseado", style="green")
        table.add_column("Real", style="yellow")
        table.add_column("Severidad", style="red")

        for diff in r.diffs:
            severity_style = {
                "error": "[red]ERROR[/red]",
                "warning": "[yellow]WARNING[/yellow]",
                "info": "[blue]INFO[/blue]"
            }.get(diff.severity, diff.severity)
            table.add_row(
                diff.field,
                str(diff.desired),
                "—" if diff.actual is None else str(diff.actual),
                severity_style,
            )

        console.print(table)
        console.print()


@app.command()
def version():
    """Muestra la versión de ifprops"""
    console.print(Panel.fit(
        "[bold cyan]ifprops[/bold cyan]\n"
        "[dim]Propiedades de protocolo de interfaces de red[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}\n"
        f"[bold]Estado:[/bold] {state_file()}",
        border_style="cyan"
    ))


@app.command()
def validate(
    manifest: Optional[Path] = typer.Argument(None, help="Manifiesto YAML (por defecto IFPROPS_MANIFEST o ./interfaces.yaml)"),
):
    """Valida el manifiesto y lista los recursos normalizados."""
    catalog = _load(manifest)
    if not len(catalog):
        console.print("[yellow]No hay recursos interface_properties en el manifiesto[/yellow]")
        return

    table = Table(title="Recursos interface_properties", show_header=True, header_style="bold cyan")
    table.add_column("Nombre", style="cyan")
    table.add_column("Declarado como", style="dim")
    table.add_column("Protocolos", style="green")
    table.add_column("Temporal", style="yellow")
    table.add_column("Requiere", style="magenta")
    for name in catalog.names():
        resource = catalog.get(name)
        temporary = resource.is_temporary
        table.add_row(
            resource.name,
            resource.title or resource.name,
            ", ".join(resource.protocols()) or "—",
            "—" if temporary is None else ("sí" if temporary else "no"),
            ", ".join(catalog.requires(resource)) or "—",
        )
    console.print(table)
    console.print("[green]✅ Manifiesto válido[/green]")


@app.command()
def check(
    manifest: Optional[Path] = typer.Argument(None, help="Manifiesto YAML"),
    state: Optional[Path] = typer.Option(None, "--state", "-s", help="Archivo YAML de estado observado"),
):
    """Detecta drift sin aplicar nada (código de salida 2 si hay drift)."""
    catalog = _load(manifest)
    provider = _provider(state)
    try:
        results = reconcile_catalog(catalog, provider, dry_run=True)
    except IfPropsError as e:
        _fail(e)
    _display_drift(results)
    if any(not r.in_sync for r in results):
        raise typer.Exit(DRIFT_EXIT_CODE)


@app.command()
def apply(
    manifest: Optional[Path] = typer.Argument(None, help="Manifiesto YAML"),
    state: Optional[Path] = typer.Option(None, "--state", "-s", help="Archivo YAML de estado observado"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Muestra el plan sin aplicar"),
):
    """Sincroniza las propiedades desincronizadas."""
    catalog = _load(manifest)
    provider = _provider(state)
    if dry_run:
        console.print("[yellow]🔍 Modo DRY-RUN[/yellow]")
    try:
        results = reconcile_catalog(catalog, provider, dry_run=dry_run)
    except IfPropsError as e:
        _fail(e)

    actions = plan_from_results(results)
    if not actions:
        console.print("[green]✅ Todo sincronizado, nada que aplicar[/green]")
        return
    for action in actions:
        console.print(f"  • {action}")
    applied = sum(1 for r in results if r.applied)
    if dry_run:
        console.print(f"[yellow]{len(actions)} cambios pendientes (no aplicados)[/yellow]")
    else:
        console.print(f"[green]✅ {applied} recursos sincronizados[/green]")


def main():
    app()
