#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import inspect
import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import splitbook
sys.path.insert(0, str(Path(__file__).parent.parent))

from splitbook.cli import app


def format_option(param_name: str, param: Any) -> str:
    """Format an option with its flags and help text."""
    flags = list(getattr(param, "param_decls", None) or [f"--{param_name.replace('_', '-')}"])
    parts = [f"- {', '.join(f'`{flag}`' for flag in flags)}"]

    if getattr(param, "help", None):
        parts.append(f": {param.help}")

    default = getattr(param, "default", None)
    if default is not None and default is not False and default != "":
        parts.append(f" (default: {default})")

    return "".join(parts)


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"splitbook {command_name}",
        "```",
        "",
    ]

    sig = inspect.signature(callback)
    args = [name.upper() for name, param in sig.parameters.items() if param.default == inspect.Parameter.empty]
    options = [
        (name, param.default)
        for name, param in sig.parameters.items()
        if param.default != inspect.Parameter.empty and hasattr(param.default, "help")
    ]

    if args:
        lines.extend(["**Arguments:**", ""])
        lines.extend(f"- `{arg}` (required)" for arg in args)
        lines.append("")

    if options:
        lines.extend(["**Options:**", ""])
        lines.extend(format_option(name, option) for name, option in options)
        lines.append("")

    return "\n".join(lines)


def command_name_of(command_obj: Any) -> str:
    return command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all splitbook commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "splitbook [--verbose] [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Commands",
        "",
    ]

    for command_obj in sorted(app.registered_commands, key=command_name_of):
        lines.append(generate_command_doc(command_name_of(command_obj), command_obj))

    for group in app.registered_groups:
        for command_obj in sorted(group.typer_instance.registered_commands, key=command_name_of):
            lines.append(generate_command_doc(f"{group.name} {command_name_of(command_obj)}", command_obj))

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
