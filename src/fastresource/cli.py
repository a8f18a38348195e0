"""CLI implementation for fastresource."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .core.config import load_settings, runtime_from_env
from .core.logging_config import configure_logging
from .core.model import ReadResult
from .core.util import result_asdict
from .io import close_global_client
from .resource import Resource

app = typer.Typer(add_completion=False, help="Check and read resources from disk or over HTTP.")
logger = logging.getLogger(__name__)


def iter_sources(files: list[str]) -> list[str]:
    """Get list of sources from files argument or stdin."""
    if "-" in files:
        # stdin mode
        return [ln.strip() for ln in sys.stdin if ln.strip()]
    elif files:
        return list(files)
    return []


def _read_one(src: str, binary: bool, exists_only: bool) -> dict:
    res = Resource(src)
    found = res.exists()
    if exists_only:
        return {"path": src, "exists": found, "success": found}
    result = res.try_read_bytes() if binary else res.try_read_text()
    return result_asdict(result, exists=found)


async def _read_one_async(src: str, binary: bool, exists_only: bool) -> dict:
    res = Resource(src)
    found = await res.exists_async()
    if exists_only:
        return {"path": src, "exists": found, "success": found}
    result = await (res.try_read_bytes_async() if binary else res.try_read_text_async())
    return result_asdict(result, exists=found)


async def _batch_read(sources: list[str], binary: bool, exists_only: bool) -> list[dict]:
    """Asynchronously read a list of sources."""
    tasks = [_read_one_async(src, binary, exists_only) for src in sources]
    try:
        results = await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        await close_global_client()
    processed = []
    for src, res in zip(sources, results):
        if isinstance(res, Exception):
            logger.debug("unexpected failure for %s", src, exc_info=res)
            processed.append(result_asdict(ReadResult.failed(src, cause=res)))
        else:
            processed.append(res)
    return processed


@app.command()
def main(
    files: list[str] = typer.Argument(None, help="Paths or URLs to read, or '-' for stdin"),
    binary: bool = typer.Option(False, "--binary", help="Read raw bytes and emit them as Base64"),
    exists_only: bool = typer.Option(False, "--exists-only", help="Only report whether each path exists"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    sync: bool = typer.Option(False, "--sync", help="Force synchronous I/O"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output to stderr"),
):
    """Report existence and content of one or many paths or URLs."""
    configure_logging("DEBUG" if verbose else None)
    sources = iter_sources(files or [])

    if not sources:
        typer.echo("No input files given.", err=True)
        raise typer.Exit(code=1)

    try:
        load_settings()
        runtime_from_env()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    if sync:
        results = [_read_one(src, binary, exists_only) for src in sources]
    else:
        results = asyncio.run(_batch_read(sources, binary, exists_only))

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        if len(sources) == 1 and not jsonl:
            json.dump(results[0], sink, indent=2)
            sink.write("\n")
        else:
            for obj in results:
                sink.write(json.dumps(obj))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r["success"] for r in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
