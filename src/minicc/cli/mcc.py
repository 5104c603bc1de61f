"""
mcc - minicc Compiler Command-Line Interface
============================================

This module implements the command-line interface for the compiler.
It compiles one C source file to x86-64 assembly.

Usage Examples
--------------
Basic compilation:
    $ mcc return_2.c

With output file:
    $ mcc return_2.c -o out.s

Inspect intermediate stages:
    $ mcc --tokens return_2.c
    $ mcc --ast return_2.c
    $ mcc --asm-ast return_2.c

Full pipeline to an executable:
    $ mcc return_2.c && gcc return_2.s -o return_2
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minicc import __version__
from minicc.compiler import (
    Compiler,
    CompilerOptions,
    TARGETS,
    lex,
    lower,
    parse_source,
)
from minicc.compiler.ast import ASTPrinter
from minicc.cli.errors import handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output assembly file (default: input.s)",
)
@click.option(
    "-t", "--target",
    type=click.Choice(sorted(TARGETS), case_sensitive=False),
    default="linux",
    show_default=True,
    help="Target platform for symbol naming and section directives.",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the AST and exit (for debugging)",
)
@click.option(
    "--asm-ast",
    is_flag=True,
    help="Print the lowered assembly AST and exit (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mcc")
def main(
    input_file: Path,
    output: Optional[Path],
    target: str,
    tokens: bool,
    ast: bool,
    asm_ast: bool,
    verbose: bool,
) -> None:
    """
    Compile a C source file to x86-64 assembly.

    INPUT_FILE is the C source file (.c) to compile.

    \b
    Examples:
        mcc return_2.c               # Outputs return_2.s
        mcc return_2.c -o out.s      # Specify output file
        mcc --ast return_2.c         # Dump the syntax tree

    \b
    Supported C subset:
        int NAME(void) { return CONSTANT; }
    """
    setup_logging(verbose)

    if output is None:
        output = input_file.with_suffix(".s")

    try:
        if verbose:
            click.echo(f"Compiling {input_file}...")
            click.echo(f"Target: {target.lower()}")

        compiler = Compiler(CompilerOptions(target=target.lower()))
        source = input_file.read_text(encoding='utf-8')
        filename = str(input_file)

        # Debug dump modes stop after the stage they show
        if tokens:
            for token in lex(source, filename):
                click.echo(repr(token))
            return
        if ast:
            click.echo(ASTPrinter().print(parse_source(source, filename)))
            return
        if asm_ast:
            click.echo(repr(lower(parse_source(source, filename))))
            return

        result = compiler.compile_source(source, filename)
        output.write_text(result.assembly, encoding='utf-8')

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Wrote {len(result.assembly)} bytes to {output}")

        click.echo(f"Compiled {input_file} -> {output}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
