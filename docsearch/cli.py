import typer
import uvicorn

from .config import HOST, PORT
from .services.vector_store import VectorStore
from .services.document_store import DocumentStore
from .services.reconcile import find_orphaned_vectors, prune_orphaned_vectors
from .utils import setup_logging

cli_app = typer.Typer(
    help="Document search API",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


@cli_app.callback()
def entrypoint(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for info, -vv for debug).",
    ),
) -> None:
    setup_logging(level="WARNING", verbosity=verbose, force=True)


@cli_app.command("serve")
def serve(
    host: str = typer.Option(HOST, "--host", help="Interface to bind."),
    port: int = typer.Option(PORT, "--port", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    uvicorn.run("docsearch.main:app", host=host, port=port, reload=reload)


@cli_app.command("reconcile")
def reconcile(
    prune: bool = typer.Option(False, "--prune", help="Delete orphaned vectors instead of only listing them."),
) -> None:
    """List vector entries that have no document row."""
    vector_store = VectorStore()
    document_store = DocumentStore()
    document_store.create_tables()

    if prune:
        orphans = prune_orphaned_vectors(vector_store, document_store)
        verb = "Pruned"
    else:
        orphans = find_orphaned_vectors(vector_store, document_store)
        verb = "Found"

    for doc_id in orphans:
        typer.echo(doc_id)
    typer.echo(f"{verb} {len(orphans)} orphaned vector(s)")


def main() -> None:
    cli_app()


if __name__ == "__main__":
    main()
