from __future__ import annotations

import json

import typer
import uvicorn
from dotenv import load_dotenv
from pydantic import ValidationError

from .api import create_app
from .cli_formatter import format_analyze_result
from .config import AppConfig
from .container import Container
from ..core.domain.exceptions import PipelineError, ToolchainError

load_dotenv()

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _build_container() -> Container:
    try:
        config = AppConfig()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    container = Container()
    container.config.from_pydantic(config)
    container.init_resources()
    return container


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (default from config)"),
):
    """Serve GET /api/refresh?repo=<url> over HTTP."""
    container = _build_container()
    web_app = create_app(container)
    uvicorn.run(
        web_app,
        host=host or container.config.server.host(),
        port=port or container.config.server.port(),
        log_config=None,
    )


@app.command()
def analyze(
    repo: str = typer.Argument(..., help="Repository URL, e.g. https://gitcode.com/owner/name.git"),
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
):
    """Analyze one repository, cache the report and print it."""
    container = _build_container()
    try:
        container.toolchain().ensure_extracted()
        result = container.analyze_uc().execute(repo_url=repo)
    except ToolchainError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    except PipelineError as e:
        typer.echo(f"Error: {e.describe()}", err=True)
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()

    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
    else:
        typer.echo(format_analyze_result(result))


@app.command()
def setup():
    """Extract the bundled cjlint toolchain if it is not in place yet."""
    container = _build_container()
    try:
        executable = container.toolchain().ensure_extracted()
    except ToolchainError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    finally:
        container.shutdown_resources()

    typer.echo(f"cjlint ready: {executable}")


@app.command()
def show(
    repo: str = typer.Argument(..., help="Repository URL used as cache key"),
):
    """Print the cached analysis result of a repository."""
    container = _build_container()
    try:
        payload = container.show_uc().execute(repo_url=repo)
    except PipelineError as e:
        typer.echo(f"Error: {e.describe()}", err=True)
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()

    if payload is None:
        typer.echo(f"No cached result for {repo}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(json.loads(payload), ensure_ascii=False, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
