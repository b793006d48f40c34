import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.traceback import install

from .decorators import handle_cli_errors

# Initialize Rich Traceback for better error messages
install(show_locals=False)

# Initialize Rich Console
console = Console()

# Configure logging to use Rich's RichHandler
logging.basicConfig(
    level=logging.INFO,  # Set to INFO by default, DEBUG if verbose
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger(__name__)

# Main app
app = typer.Typer()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose mode"),
):
    """
    memfs - an in-memory filesystem with shell-like operations.

    Browse and change a seeded sample hierarchy with cd, ls, size,
    mkdir, rmdir, pwd and tree, from a shell or over HTTP.
    """
    from .config import load_config

    cli_config = load_config().cli
    console.no_color = not cli_config.color

    if verbose or cli_config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        console.print("[bold green]Verbose mode enabled.[/bold green]")


@app.command()
def about():
    """Display information about memfs."""
    console.print("[bold cyan]memfs - In-Memory Filesystem[/bold cyan]")
    console.print("")
    console.print("A simulated filesystem that lives only in memory:")
    console.print("  • Seeded sample hierarchy, reset on every start")
    console.print("  • Absolute and relative paths with . and ..")
    console.print("  • Recursive directory sizes and tree views")
    console.print("")
    console.print("[bold]Commands:[/bold]")
    console.print("  memfs shell                  Interactive shell")
    console.print("  memfs serve                  REST API on /api/filesystem")
    console.print("  memfs tree [path]            Print the sample tree")
    console.print("  memfs config --show          Show configuration")


@app.command()
def shell():
    """
    Launch interactive shell on a freshly seeded filesystem.

    Commands:
        cd, pwd, ls    - Navigate
        size           - Recursive size of the current directory
        mkdir, rmdir   - Create and remove directories
        tree           - Show the hierarchy
        help           - Show help

    Changes are lost when the shell exits.
    """
    from .repl import FileSystemShell

    FileSystemShell(console=console).run()


@app.command()
@handle_cli_errors
def tree(
    path: Optional[str] = typer.Argument(None, help="Directory to show (defaults to /)"),
):
    """
    Print the seeded filesystem tree, or the subtree at PATH.

    Examples:
        memfs tree
        memfs tree /documents/work
    """
    from .repl.shell import build_rich_tree
    from .services import FileSystemService
    from .vfs import MemoryVFS

    snapshot = FileSystemService(MemoryVFS()).get_directory_tree(path)
    console.print(build_rich_tree(snapshot))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to (defaults from config)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind to (defaults from config)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
):
    """
    Start the REST API server.

    Endpoints live under /api/filesystem (cd, ls, size, mkdir, rmdir,
    pwd, tree). The filesystem is seeded at startup and not persisted.

    Configuration:
        Default server settings are loaded from ~/.config/memfs/config.json
        Command-line options override config file values.

    Examples:
        memfs serve
        memfs serve --port 9000
    """
    from .config import load_config

    config = load_config()
    server_host = host or config.server.host
    server_port = port or config.server.port

    try:
        import uvicorn
    except ImportError:
        console.print("[red]Error: uvicorn is not installed[/red]")
        console.print("[yellow]Install with: pip install uvicorn[/yellow]")
        raise typer.Exit(code=1)

    try:
        console.print("[blue]Starting memfs server...[/blue]")
        console.print(f"[green]Server running at http://{server_host}:{server_port}[/green]")
        console.print("[dim]Press Ctrl+C to stop[/dim]")

        if reload:
            # Reload needs an import string, so uvicorn calls the factory itself
            uvicorn.run(
                "memfs.server:create_app",
                factory=True,
                host=server_host,
                port=server_port,
                reload=True,
                log_level=config.server.log_level,
            )
        else:
            from .server import create_app

            uvicorn.run(
                create_app(),
                host=server_host,
                port=server_port,
                log_level=config.server.log_level,
            )

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")
    except Exception as e:
        logger.error(f"Error starting server: {e}", exc_info=True)
        console.print(f"[red]Error starting server: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
@handle_cli_errors
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    host: Optional[str] = typer.Option(None, "--host", help="Default server host"),
    port: Optional[int] = typer.Option(None, "--port", help="Default server port"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="uvicorn log level"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help="Verbose CLI by default"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Colored console output"),
):
    """
    Show or update configuration.

    Examples:
        memfs config --show
        memfs config --port 9000 --log-level debug
        memfs config --no-color
    """
    from .config import get_config_path, load_config, update_config

    if any(value is not None for value in (host, port, log_level, verbose, color)):
        update_config(
            server_host=host,
            server_port=port,
            server_log_level=log_level,
            cli_verbose=verbose,
            cli_color=color,
        )
        console.print(f"[green]✓ Configuration saved to {get_config_path()}[/green]")
        show = True

    if not show:
        console.print("Use --show to display configuration, or pass options to change it.")
        return

    cfg = load_config()
    table = Table(title="memfs configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    for section, values in cfg.to_dict().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))
    console.print(table)


if __name__ == "__main__":
    app()
