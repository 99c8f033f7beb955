from typing import Optional, Any
import asyncio
import json
import typer

from .addresses import locate_address, shorten_address
from .catalog import DeploymentCatalog
from .chains import ChainDirectory
from .client import DEFAULT_DEPLOYMENTS_URL, DeploymentsClient, DocumentFile
from .models import ChainRecord, FilterCriteria
from .types import ALL


app = typer.Typer(help="Explore LayerZero protocol deployments across blockchain networks")

URL_OPTION = typer.Option(DEFAULT_DEPLOYMENTS_URL, help="Deployments endpoint URL")
FILE_OPTION = typer.Option(None, "--file", "-f", help="Read a saved deployments JSON document instead of fetching")
TIMEOUT_OPTION = typer.Option(10.0, help="Request timeout in seconds")
DATA_DIR_OPTION = typer.Option(None, help="Directory holding chain_names.json")
MAX_LENGTH_OPTION = typer.Option(100, help="Maximum length for string values in JSON output (0 = no truncation)")


def truncate_json_values(obj: Any, max_length: int = 100) -> Any:
    """
    Recursively truncate long string values in JSON structure

    Args:
        obj: The object to process (dict, list, string, etc.)
        max_length: Maximum length for string values (0 = no truncation)

    Returns:
        Processed object with truncated string values
    """
    if max_length <= 0:
        return obj

    if isinstance(obj, dict):
        return {k: truncate_json_values(v, max_length) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [truncate_json_values(item, max_length) for item in obj]
    elif isinstance(obj, str) and len(obj) > max_length:
        if max_length <= 6:
            return obj[:max_length] + "..."

        # Reserve 3 characters for "..."
        remaining = max_length - 3
        half = remaining // 2
        return f"{obj[:half]}...{obj[-half:]}"
    else:
        return obj


def _load_catalog(url: str, file: Optional[str], timeout: float, data_dir: Optional[str] = None) -> DeploymentCatalog:
    source = DocumentFile(file) if file else DeploymentsClient(url=url, timeout=timeout)
    catalog = DeploymentCatalog(source, directory=ChainDirectory(data_dir))
    if not asyncio.run(catalog.refresh()):
        typer.secho(f"Error: {catalog.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return catalog


def _echo_json(data: Any, max_length: int = 0):
    typer.echo(json.dumps(truncate_json_values(data, max_length), indent=4, default=str))


def _record_line(record: ChainRecord) -> str:
    line = (
        f"{record.chain_key:<32} {record.network_type.value:<8} "
        f"deployments: {len(record.deployment_versions):<3} dvns: {len(record.validators)}"
    )
    if record.explorer_url:
        line += f"  {record.explorer_url}"
    return line


@app.command("list")
def list_chains(
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive search on the chain key"),
    chain: str = typer.Option(ALL, help="Only this chain key"),
    network: str = typer.Option(ALL, help="Only chain keys ending with this network type, e.g. mainnet"),
    role: str = typer.Option(ALL, help="Only chains binding this contract role, e.g. executor"),
    as_json: bool = typer.Option(False, "--json", help="Print normalized records as JSON"),
    max_length: int = MAX_LENGTH_OPTION,
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
):
    """List chains matching the given filters"""
    catalog = _load_catalog(url, file, timeout)
    filtered = catalog.apply(FilterCriteria(term=search, chain_key=chain, network_type=network, role=role))

    if as_json:
        _echo_json([record.model_dump(mode="json") for record in filtered], max_length)
        return

    if not filtered:
        typer.echo("No deployments found")
        typer.echo("Try adjusting your search or filters")
        return

    for record in filtered:
        typer.echo(_record_line(record))
    typer.echo()
    typer.echo(f"Showing {len(filtered)} of {len(catalog.records)} chains")


@app.command("chains")
def chains(
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
    data_dir: Optional[str] = DATA_DIR_OPTION,
):
    """List the distinct chain keys, sorted by name"""
    catalog = _load_catalog(url, file, timeout, data_dir)
    for facet in catalog.facets:
        if facet.label == facet.key:
            typer.echo(facet.key)
        else:
            typer.echo(f"{facet.key:<32} {facet.label}")


@app.command("roles")
def roles(
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
):
    """List the contract roles deployed anywhere"""
    catalog = _load_catalog(url, file, timeout)
    for facet in catalog.role_facets:
        typer.echo(facet.key)


@app.command("show")
def show(
    chain_key: str,
    full: bool = typer.Option(False, help="Print full addresses"),
    as_json: bool = typer.Option(False, "--json", help="Print the normalized record as JSON"),
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
):
    """Show the deployments and DVNs of one chain"""
    catalog = _load_catalog(url, file, timeout)
    record = catalog.get(chain_key)
    if record is None:
        typer.secho(f"Chain not found: {chain_key}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        _echo_json(record.model_dump(mode="json"))
        return

    fmt = (lambda address: address) if full else shorten_address

    typer.secho(record.chain_key, bold=True)
    details = record.chain_details
    if details:
        typer.echo(f"   Chain Type:    {details.chain_type}")
        typer.echo(f"   Chain Stack:   {details.chain_stack}")
        typer.echo(f"   Chain Layer:   {details.chain_layer}")
        if details.native_chain_id is not None:
            typer.echo(f"   Chain ID:      {details.native_chain_id}")
        if details.native_currency.symbol:
            typer.echo(f"   Currency:      {details.native_currency.symbol}")
    for explorer in record.block_explorers:
        typer.echo(f"   Explorer:      {explorer.url}")
    typer.echo()

    for deployment in record.deployment_versions:
        typer.echo(f"eid {deployment.endpoint_id} (v{deployment.version})")
        for deployed_role, address in deployment.contract_addresses.items():
            typer.echo(f"   {deployed_role.value:<20} {fmt(address)}")
        typer.echo()

    if record.validators:
        typer.echo("DVNs:")
        for address, validator in record.validators.items():
            line = f"   {validator.canonical_name or '(unnamed)':<24} {fmt(address)} v{validator.version}"
            if validator.deprecated:
                line += " [deprecated]"
            typer.echo(line)


@app.command("locate")
def locate(
    address: str,
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
):
    """Find every chain and role an address is deployed as"""
    catalog = _load_catalog(url, file, timeout)
    found = locate_address(catalog.records, address)
    if not found:
        typer.echo(f"Address not found: {address}")
        raise typer.Exit(code=1)

    for match in found:
        if match.role is not None:
            typer.echo(f"{match.chain_key:<32} eid {match.endpoint_id:<8} v{match.version} {match.role.value}")
        else:
            typer.echo(f"{match.chain_key:<32} dvn {match.validator_name or '(unnamed)'} v{match.version}")


@app.command("summary")
def summary(
    url: str = URL_OPTION,
    file: Optional[str] = FILE_OPTION,
    timeout: float = TIMEOUT_OPTION,
):
    """Print catalog totals"""
    catalog = _load_catalog(url, file, timeout)
    s = catalog.summary
    typer.echo(f"Chains:      {s.total_chains}")
    typer.echo(f"Networks:    {s.networks}")
    typer.echo(f"Contracts:   {s.contracts}")
    typer.echo(f"Deployments: {s.deployments}")
    typer.echo(f"DVNs:        {s.validators}")


if __name__ == "__main__":
    app()
