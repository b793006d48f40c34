"""Interactive REPL shell for navigating the in-memory filesystem."""

import shlex
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from memfs.services import FileSystemService
from memfs.vfs import FileSystemError, MemoryVFS, NodeType, TreeSnapshot


class PathCompleter(Completer):
    """Tab completion for directory paths."""

    def __init__(self, vfs: MemoryVFS):
        self.vfs = vfs

    def get_completions(self, document, complete_event):
        """Get path completion candidates."""
        text = document.text_before_cursor
        words = text.split()

        # Only complete the argument, not the command itself
        if len(words) > 1 and not text.endswith(" "):
            partial = words[-1]
        elif len(words) >= 1 and text.endswith(" "):
            partial = ""
        else:
            return

        for candidate in self.vfs.complete(partial):
            yield Completion(candidate, start_position=-len(partial))


def format_size(size: int) -> str:
    """Human readable size: bytes below 1 KB, otherwise KB/MB with one decimal."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def render_tree_text(snapshot: TreeSnapshot) -> str:
    """Render a snapshot as plain text with box-drawing branches."""
    lines = [f"{snapshot.name}/ ({snapshot.size})"]

    def walk(node: TreeSnapshot, prefix: str) -> None:
        for index, child in enumerate(node.children):
            last = index == len(node.children) - 1
            branch = "└── " if last else "├── "
            suffix = "/" if child.type is NodeType.DIRECTORY else ""
            lines.append(f"{prefix}{branch}{child.name}{suffix} ({child.size})")
            walk(child, prefix + ("    " if last else "│   "))

    walk(snapshot, "")
    return "\n".join(lines)


class FileSystemShell:
    """Interactive shell for the in-memory filesystem.

    Provides a Linux-like shell interface with commands:
    - cd, pwd, ls: Navigate the filesystem
    - size: Recursive size of the current directory
    - mkdir, rmdir: Create and remove directories
    - tree: Show a directory hierarchy
    - help, ?: Show help
    - exit, quit: Exit the shell

    Every command returns its plain-text output, or None on error.
    """

    def __init__(self, service: Optional[FileSystemService] = None, console: Optional[Console] = None):
        """Initialize the REPL shell.

        Args:
            service: Filesystem service (a freshly seeded one when omitted)
            console: Rich console used for output
        """
        self.service = service if service is not None else FileSystemService(MemoryVFS())
        self.vfs = self.service.vfs
        self.console = console if console is not None else Console()
        self.running = True
        self.session: Optional[PromptSession] = None

        # Command registry
        self.commands = {
            "cd": self.cmd_cd,
            "pwd": self.cmd_pwd,
            "ls": self.cmd_ls,
            "size": self.cmd_size,
            "mkdir": self.cmd_mkdir,
            "rmdir": self.cmd_rmdir,
            "tree": self.cmd_tree,
            "help": self.cmd_help,
            "?": self.cmd_help,
            "exit": self.cmd_exit,
            "quit": self.cmd_quit,
        }

    def get_prompt(self) -> str:
        """Generate prompt showing current path.

        Returns:
            Prompt string like "memfs:/documents $ "
        """
        return f"memfs:{self.vfs.pwd()} $ "

    def _build_session(self) -> PromptSession:
        return PromptSession(
            history=InMemoryHistory(),
            completer=PathCompleter(self.vfs),
            style=Style.from_dict(
                {
                    "prompt": "ansicyan bold",
                }
            ),
        )

    def run(self):
        """Run the shell main loop."""
        if self.session is None:
            self.session = self._build_session()

        self.console.print(
            "[bold cyan]memfs shell[/bold cyan] - In-memory filesystem navigation", style="bold"
        )
        self.console.print("Type 'help' for available commands, 'exit' to quit.\n")

        while self.running:
            try:
                line = self.session.prompt(self.get_prompt())
                line = line.strip()

                if not line:
                    continue

                self.execute(line)

            except KeyboardInterrupt:
                self.console.print("\nUse 'exit' or 'quit' to exit the shell.")
                continue
            except EOFError:
                break

    def execute(self, line: str) -> Optional[str]:
        """Parse and execute a command line.

        Args:
            line: Command line to execute

        Returns:
            Command output, or None
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Parse error:[/red] {escape(str(e))}")
            return None

        if not parts:
            return None

        cmd = parts[0]
        args = parts[1:]

        if cmd not in self.commands:
            self.console.print(
                f"[red]Unknown command:[/red] {escape(cmd)}. Type 'help' for available commands."
            )
            return None

        return self.commands[cmd](args)

    def _report(self, cmd: str, error: FileSystemError, silent: bool) -> None:
        if not silent:
            self.console.print(f"[red]{cmd}: {escape(error.message)}[/red]")

    # Command implementations

    def cmd_cd(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Change directory.

        Usage: cd [path]

        With no path, goes back to /.
        """
        path = args[0] if args else "/"

        try:
            directory = self.service.change_directory(path)
        except FileSystemError as e:
            self._report("cd", e, silent)
            return None
        return directory.get_path()

    def cmd_pwd(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Print working directory.

        Usage: pwd
        """
        path = self.service.get_current_path().path
        if not silent:
            self.console.print(path)
        return path

    def cmd_ls(self, args: List[str], silent: bool = False) -> Optional[str]:
        """List the current directory's contents.

        Usage: ls
        """
        listing = self.service.list_directory()

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Type", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Size", style="dim", justify="right")

        output_lines = []
        for entry in listing.directories + listing.files:
            is_dir = entry.type == NodeType.DIRECTORY.value
            type_char = "d" if is_dir else "f"
            type_icon = "📁" if is_dir else "📄"
            table.add_row(type_icon, escape(entry.name), format_size(entry.size))
            output_lines.append(f"{type_char}\t{entry.name}\t{entry.size}")

        if not silent:
            if listing.total_items:
                self.console.print(table)
            self.console.print(f"[dim]{listing.total_items} items[/dim]")
        return "\n".join(output_lines)

    def cmd_size(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Show the recursive size of the current directory.

        Usage: size
        """
        result = self.service.get_directory_size()
        output = f"{result.size}\t{result.path}"
        if not silent:
            self.console.print(
                f"[bold]{escape(result.path)}[/bold]: {result.size} bytes "
                f"({result.size_in_kb:.2f} KB, {result.size_in_mb:.4f} MB)"
            )
        return output

    def cmd_mkdir(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Create a directory in the current directory.

        Usage: mkdir <name>
        """
        if len(args) < 1:
            if not silent:
                self.console.print("[red]Usage:[/red] mkdir <name>")
            return None

        try:
            directory = self.service.create_directory(args[0])
        except FileSystemError as e:
            self._report("mkdir", e, silent)
            return None

        if not silent:
            self.console.print(f"[green]✓ Created {escape(directory.get_path())}[/green]")
        return directory.get_path()

    def cmd_rmdir(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Remove a directory from the current directory.

        Usage: rmdir <name>

        Note: The directory is removed together with everything inside it.
        """
        if len(args) < 1:
            if not silent:
                self.console.print("[red]Usage:[/red] rmdir <name>")
            return None

        try:
            self.service.remove_directory(args[0])
        except FileSystemError as e:
            self._report("rmdir", e, silent)
            return None

        if not silent:
            self.console.print(f"[green]✓ Removed {escape(args[0])}[/green]")
        return args[0]

    def cmd_tree(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Show a directory hierarchy with sizes.

        Usage: tree [path]

        Without a path the whole filesystem is shown.
        """
        path = args[0] if args else None

        try:
            snapshot = self.service.get_directory_tree(path)
        except FileSystemError as e:
            self._report("tree", e, silent)
            return None

        if not silent:
            self.console.print(build_rich_tree(snapshot))
        return render_tree_text(snapshot)

    def cmd_help(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Show help information.

        Usage: help [command]
        """
        if args:
            cmd = args[0]
            if cmd in self.commands:
                func = self.commands[cmd]
                self.console.print(f"[bold]{cmd}[/bold]")
                self.console.print(func.__doc__ or "No documentation available.")
            else:
                self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")
            return None

        self.console.print("[bold cyan]Available Commands:[/bold cyan]\n")

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Command", style="cyan")
        table.add_column("Description", style="white")

        table.add_row("cd [path]", "Change directory (absolute, relative, . and ..)")
        table.add_row("pwd", "Print working directory")
        table.add_row("ls", "List directory contents")
        table.add_row("size", "Recursive size of the current directory")
        table.add_row("mkdir <name>", "Create a directory")
        table.add_row("rmdir <name>", "Remove a directory")
        table.add_row("tree [path]", "Show directory hierarchy")
        table.add_row("help [command]", "Show help")
        table.add_row("exit, quit", "Exit the shell")

        self.console.print(table)
        return None

    def cmd_exit(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Exit the shell.

        Usage: exit
        """
        self.running = False
        self.console.print("[cyan]Goodbye![/cyan]")
        return None

    def cmd_quit(self, args: List[str], silent: bool = False) -> Optional[str]:
        """Quit the shell.

        Usage: quit
        """
        return self.cmd_exit(args)


def build_rich_tree(snapshot: TreeSnapshot) -> Tree:
    """Convert a snapshot into a rich Tree for display."""
    tree = Tree(f"📁 [bold]{escape(snapshot.name)}[/bold] [dim]({format_size(snapshot.size)})[/dim]")

    def add(branch: Tree, node: TreeSnapshot) -> None:
        for child in node.children:
            if child.type is NodeType.DIRECTORY:
                sub = branch.add(
                    f"📁 [bold cyan]{escape(child.name)}[/bold cyan] [dim]({format_size(child.size)})[/dim]"
                )
                add(sub, child)
            else:
                branch.add(f"📄 {escape(child.name)} [dim]({format_size(child.size)})[/dim]")

    add(tree, snapshot)
    return tree
