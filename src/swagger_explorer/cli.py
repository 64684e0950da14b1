"""CLI entry point for swagger-explorer."""

import asyncio
import json
import logging
from pathlib import Path

import click

from swagger_explorer.config import ExplorerConfig
from swagger_explorer.errors import ExplorerError
from swagger_explorer.parser.base import Catalogue
from swagger_explorer.parser.loader import DocumentLoader
from swagger_explorer.parser.swagger import endpoint_id as make_endpoint_id
from swagger_explorer.request.builder import RequestBuilder
from swagger_explorer.request.endpoint import PAYLOAD_PARAM, classify_method
from swagger_explorer.request.executor import DisplayResult, RequestExecutor
from swagger_explorer.route import RouteCoordinator
from swagger_explorer.types import PrimitiveType, property_type

TYPE_COLORS = {
    PrimitiveType.STRING: "green",
    PrimitiveType.INTEGER: "blue",
    PrimitiveType.FLOAT: "cyan",
    PrimitiveType.NUMBER: "cyan",
    PrimitiveType.BOOLEAN: "red",
}


def _load_catalogue(ctx: click.Context) -> Catalogue:
    """Load the catalogue from --doc, or fetch it from the API root."""
    config: ExplorerConfig = ctx.obj["config"]
    doc_path: Path | None = ctx.obj["doc"]
    loader = DocumentLoader(config)
    try:
        if doc_path is not None:
            return loader.load_file(doc_path)
        return asyncio.run(loader.load())
    except ExplorerError as e:
        raise click.ClickException(str(e)) from e


def _resolve_id(value: str) -> str:
    """Accept an endpoint id or its PATH#METHOD label.

    Ids start with a dash, so on the command line they must follow '--'.
    """
    path, sep, method = value.rpartition("#")
    if sep and path:
        return make_endpoint_id(path, method)
    return value


def _parse_params(ctx, param, values: tuple[str, ...]) -> list[tuple[str, str]]:
    pairs = []
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'")
        pairs.append((name, value))
    return pairs


@click.group()
@click.option("--base-path", default=None, help="API root, overrides SWAGGER_EXPLORER_BASE_PATH.")
@click.option("--doc", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="Read the API document from a local JSON/YAML file instead of {base-path}/swagger.json.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, base_path: str | None, doc: Path | None, verbose: bool):
    """Browse an API description and call its endpoints."""
    config = ExplorerConfig()
    if base_path is not None:
        config = config.model_copy(update={"base_path": base_path})

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"config": config, "doc": doc}


@main.command()
@click.pass_context
def info(ctx: click.Context):
    """Show the API title, version and catalogue size."""
    catalogue = _load_catalogue(ctx)
    config: ExplorerConfig = ctx.obj["config"]

    click.echo(f"{catalogue.title or '(untitled API)'} {catalogue.version}".rstrip())
    click.echo(f"Format: {catalogue.format}")
    click.echo(f"Endpoints: {len(catalogue.endpoints)}")
    click.echo(f"Models: {len(catalogue.models)}")
    if config.github_url:
        click.echo(f"Source: {config.github_url}")


@main.command()
@click.option("--tag", default=None, help="Only list endpoints carrying this tag.")
@click.pass_context
def endpoints(ctx: click.Context, tag: str | None):
    """List endpoint ids and labels."""
    catalogue = _load_catalogue(ctx)
    for endpoint in catalogue.endpoints:
        if tag and tag not in endpoint.tags:
            continue
        method = classify_method(endpoint.id).value
        click.echo(f"{method:<7}{endpoint.id}  {endpoint.label}")


@main.command()
@click.pass_context
def models(ctx: click.Context):
    """List models and the types of their properties."""
    catalogue = _load_catalogue(ctx)
    for model in catalogue.models:
        click.echo(click.style(model.label, bold=True))
        for field, descriptor in model.properties.items():
            ptype = property_type(descriptor)
            click.echo(f"  {field}: " + click.style(ptype.value, fg=TYPE_COLORS.get(ptype, "white")))


@main.command()
@click.argument("endpoint")
@click.pass_context
def show(ctx: click.Context, endpoint: str):
    """Show an endpoint's method, path and payloads.

    ENDPOINT is an endpoint id or a PATH#METHOD label.
    """
    endpoint_id = _resolve_id(endpoint)
    catalogue = _load_catalogue(ctx)

    async def _open():
        coordinator = RouteCoordinator(catalogue)
        coordinator.change_route(endpoint_id, {"id": endpoint_id})
        await coordinator.settled()
        return coordinator.require_view()

    try:
        view = asyncio.run(_open())
        payloads = view.payloads
    except ExplorerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{view.method.value} {view.endpoint.path}")
    if view.endpoint.summary:
        click.echo(f"> {view.endpoint.summary}")
    for payload in payloads:
        click.echo(f"\nPayload {payload.name}:")
        click.echo(json.dumps(payload.example(), indent=2))


@main.command()
@click.argument("endpoint")
@click.option("-p", "--param", "params", multiple=True, callback=_parse_params, help="Fetch parameter as NAME=VALUE (repeatable).")
@click.option("--id", "id_param", default="", help="Identifier appended to the path as /ID.")
@click.option("--payload", default=None, help="Literal JSON request body.")
@click.option("--payload-name", default=None, help="Select a named payload of the endpoint.")
@click.option("--example", is_flag=True, help="Send the current payload's example body.")
@click.pass_context
def call(
    ctx: click.Context,
    endpoint: str,
    params: list[tuple[str, str]],
    id_param: str,
    payload: str | None,
    payload_name: str | None,
    example: bool,
):
    """Build and execute a request against an endpoint.

    ENDPOINT is an endpoint id or a PATH#METHOD label.
    """
    endpoint_id = _resolve_id(endpoint)
    config: ExplorerConfig = ctx.obj["config"]
    catalogue = _load_catalogue(ctx)

    async def _call() -> DisplayResult:
        coordinator = RouteCoordinator(catalogue)
        coordinator.change_route(endpoint_id, {"id": endpoint_id})
        await coordinator.settled()
        view = coordinator.require_view()

        for name, value in params:
            view.update_param(name, value)
        view.update_id_param(id_param)
        if payload_name:
            view.select_payload(payload_name)

        body = payload
        if body is None and example:
            current = view.current_payload
            if current is None:
                raise click.UsageError(f"{endpoint_id} has no payload to take an example from")
            body = json.dumps(current.example())
        if body is not None:
            view.update_param(PAYLOAD_PARAM, body)

        descriptor = RequestBuilder(config).build_for(view)
        click.echo(f"{descriptor.method} {descriptor.url}", err=True)
        return await RequestExecutor(config).execute(descriptor)

    try:
        result = asyncio.run(_call())
    except ExplorerError as e:
        raise click.ClickException(str(e)) from e

    if result.text:
        click.echo(result.text)
    if result.error is not None:
        raise click.ClickException(f"{result.error.kind.value}: {result.error.message}")
