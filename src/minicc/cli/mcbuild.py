"""
mcbuild - Build Driver for minicc
=================================

This module implements a build tool that takes a C source file all the
way to a native executable:

    ┌──────────┐     ┌────────────┐     ┌────────────┐
    │  .c file │────▶│ assembly.s │────▶│ executable │
    │ (source) │ mcc │   (temp)   │ gcc │  (output)  │
    └──────────┘     └────────────┘     └────────────┘

The compiler itself never touches the filesystem or spawns processes;
everything here is glue around it: locating the source, writing the
intermediate assembly, running the external assembler/linker, and
cleaning up.

Usage Examples
--------------
Build a program:
    $ mcbuild return_2.c -o return_2

Read the source file name from standard input:
    $ echo return_2.c | mcbuild

Use a different assembler/linker:
    $ mcbuild --cc clang return_2.c
    $ MINICC_CC=clang mcbuild return_2.c

Keep the generated assembly next to the executable:
    $ mcbuild -k return_2.c

Exit Codes
----------
0 - Success
1 - Build failed (compilation or assembler/linker error)
2 - Invalid arguments or file not found
"""

import logging
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, TextIO

import click

from minicc import __version__
from minicc.errors import ToolchainError
from minicc.compiler import Compiler, CompilerOptions, TARGETS
from minicc.cli.errors import handle_cli_exception
from minicc.cli.mcc import setup_logging

logger = logging.getLogger(__name__)

# Name of the intermediate assembly file inside the build directory
ASSEMBLY_FILENAME = "assembly.s"

DEFAULT_CC = "gcc"


# =============================================================================
# Helper Functions
# =============================================================================

def read_input_filename(stream: TextIO) -> Path:
    """
    Read a source file name from a text stream.

    Only the first line is used; surrounding whitespace is stripped.

    Raises:
        click.BadParameter: If no file name was supplied
    """
    name = stream.readline().strip()
    if not name:
        raise click.BadParameter(
            "no source file given on the command line or standard input",
            param_hint="INPUT_FILE",
        )
    return Path(name)


def resolve_output_path(output: Optional[Path], source_file: Path) -> Path:
    """
    Determine the output executable path.

    Defaults to the source path without its suffix. A source without a
    suffix gets '.out' appended so it is never overwritten.

    Examples:
        return_2.c → return_2
        prog       → prog.out
    """
    if output is not None:
        return output

    stem_path = source_file.with_suffix("")
    if stem_path == source_file:
        return source_file.with_name(source_file.name + ".out")
    return stem_path


def resolve_keep_path(output_exe: Path) -> Path:
    """
    Path the generated assembly is kept at with --keep.

    The executable's suffix is replaced by '.s', unless that would name
    the executable itself, in which case '.s' is appended.

    Examples:
        return_2 → return_2.s
        app.exe  → app.s
        prog.s   → prog.s.s
    """
    keep_asm = output_exe.with_suffix(".s")
    if keep_asm == output_exe:
        return output_exe.with_name(output_exe.name + ".s")
    return keep_asm


# =============================================================================
# Pipeline Stages
# =============================================================================

def compile_c_to_asm(
    source_file: Path,
    output_asm: Path,
    target: str,
    verbose: bool,
) -> None:
    """
    Compile C source to assembly.

    Raises:
        CompilerError: If compilation fails
    """
    if verbose:
        click.echo(f"[1/2] Compiling {source_file.name} → {output_asm.name}")
        click.echo(f"      Target: {target}")

    source = source_file.read_text(encoding='utf-8')
    compiler = Compiler(CompilerOptions(target=target))
    result = compiler.compile_source(source, str(source_file))

    output_asm.write_text(result.assembly, encoding='utf-8')

    if verbose:
        click.echo(f"      Generated {len(result.assembly)} bytes of assembly")


def assemble_and_link(
    source_asm: Path,
    output_exe: Path,
    cc: str,
    verbose: bool,
) -> None:
    """
    Assemble and link an assembly file with the external toolchain.

    Runs `<cc> <source_asm> -o <output_exe>`.

    Raises:
        ToolchainError: If the tool is missing or exits unsuccessfully
    """
    command = shlex.split(cc) + [str(source_asm), "-o", str(output_exe)]

    if verbose:
        click.echo(f"[2/2] Assembling and linking {source_asm.name} → {output_exe.name}")
        click.echo(f"      Command: {shlex.join(command)}")

    logger.debug(f"Running {command}")

    try:
        completed = subprocess.run(command, capture_output=True, text=True)
    except FileNotFoundError:
        raise ToolchainError(f"assembler '{command[0]}' not found", command=command)

    if completed.returncode != 0:
        raise ToolchainError(
            f"assembler exited with status {completed.returncode}",
            command=command,
            stderr=completed.stderr,
        )

    logger.debug(f"Linked {output_exe}")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output executable (default: input file without its suffix)",
)
@click.option(
    "--cc",
    default=DEFAULT_CC,
    show_default=True,
    envvar="MINICC_CC",
    help="Assembler/linker command used to build the executable.",
)
@click.option(
    "-t", "--target",
    type=click.Choice(sorted(TARGETS), case_sensitive=False),
    default="linux",
    show_default=True,
    help="Target platform for symbol naming and section directives.",
)
@click.option(
    "-k", "--keep",
    is_flag=True,
    help="Keep the generated assembly next to the executable",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show detailed progress for each build stage",
)
@click.version_option(version=__version__, prog_name="mcbuild")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    cc: str,
    target: str,
    keep: bool,
    verbose: bool,
) -> None:
    """
    Build a native executable from a C source file.

    INPUT_FILE is the C source file (.c) to build. When omitted, the file
    name is read from the first line of standard input.

    \b
    Examples:
        mcbuild return_2.c              # Outputs ./return_2
        mcbuild return_2.c -o prog      # Specify output file
        echo return_2.c | mcbuild       # File name from stdin
    """
    setup_logging(verbose)

    try:
        if input_file is None:
            input_file = read_input_filename(click.get_text_stream("stdin"))
            if not input_file.is_file():
                raise FileNotFoundError(f"Source file not found: {input_file}")

        output_exe = resolve_output_path(output, input_file)
        target = target.lower()

        if verbose:
            click.echo(f"Building {input_file}")
            click.echo(f"Output: {output_exe}")
            click.echo()

        # The build directory, and the assembly in it, is removed on exit
        with tempfile.TemporaryDirectory(prefix="mcbuild_") as temp_dir:
            temp_asm = Path(temp_dir) / ASSEMBLY_FILENAME

            compile_c_to_asm(input_file, temp_asm, target, verbose)
            assemble_and_link(temp_asm, output_exe, cc, verbose)

            if keep:
                keep_asm = resolve_keep_path(output_exe)
                shutil.copyfile(temp_asm, keep_asm)
                if verbose:
                    click.echo(f"Kept: {keep_asm}")

        click.echo("Executable created successfully.")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Build")


if __name__ == "__main__":
    main()
