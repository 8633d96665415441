"""
bshlex - bsh Token Dump Command-Line Interface
==============================================

This module implements a command-line tool that runs the bsh scanner over
a source file and prints the resulting tokens, one per line:

    line:column<TAB>TYPE[<TAB>'attribute']

Predefined-attribute tokens (reserved words, NEWLINE, EOF) print without
an attribute; identifiers, literals and ILLEGAL tokens print their lexeme.

Usage Examples
--------------
Dump all tokens:
    $ bshlex demo.bsh

Write the listing to a file:
    $ bshlex demo.bsh -o demo.tokens

Fail on the first illegal token:
    $ bshlex --strict demo.bsh

Hide NEWLINE tokens:
    $ bshlex --skip-newlines demo.bsh

Environment
-----------
BSH_ENCODING, BSH_LOG_LEVEL and BSH_STRICT provide defaults (see
bsh.config.ScannerConfig); command-line options take precedence.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

import click

from bsh import __version__
from bsh.cli.errors import handle_cli_exception
from bsh.config import ScannerConfig
from bsh.errors import IllegalTokenError, SourceLocation
from bsh.scanner import Scanner, Token, TokenType, iter_tokens

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def setup_logging(config: ScannerConfig, verbose: bool) -> None:
    """Configure logging based on verbosity and configuration."""
    level = logging.DEBUG if verbose else config.log_level_value
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format one token as a listing line."""
    if token.type.has_predefined_attr():
        return f"{token.position}\t{token.type.name}"
    return f"{token.position}\t{token.type.name}\t{token.attribute!r}"


def read_source_line(path: Path, encoding: str, line: int) -> Optional[str]:
    """
    Return the text of a 1-indexed line, split the same way the scanner
    splits lines ("\\n", "\\r" and "\\r\\n").
    """
    with open(path, encoding=encoding, newline="") as f:
        lines = LINE_BREAK.split(f.read())
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return None


def illegal_token_error(token: Token, path: Path, encoding: str) -> IllegalTokenError:
    """Build a located error for an ILLEGAL token."""
    return IllegalTokenError(
        token.attribute,
        SourceLocation(str(path), token.line, token.column),
        read_source_line(path, encoding, token.line),
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
    help="Output file (default: stdout)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Stop with an error at the first ILLEGAL token (default: $BSH_STRICT or off)",
)
@click.option(
    "--skip-newlines",
    is_flag=True,
    help="Omit NEWLINE tokens from the listing",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Source file encoding (default: $BSH_ENCODING or utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="bshlex")
def main(
    input_file: Path,
    output: Optional[Path],
    strict: Optional[bool],
    skip_newlines: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Print the tokens of a bsh source file.

    INPUT_FILE is the bsh source file to scan.

    \b
    Examples:
        bshlex demo.bsh                  # Listing to stdout
        bshlex demo.bsh -o demo.tokens   # Listing to a file
        bshlex --strict demo.bsh         # Exit 1 on illegal input
    """
    config = ScannerConfig.from_env()
    if strict is not None:
        config.strict = strict
    if encoding is not None:
        config.encoding = encoding

    setup_logging(config, verbose)

    lines: List[str] = []
    token_count = 0
    illegal_count = 0

    try:
        if verbose:
            click.echo(f"Scanning {input_file} ({config.encoding})", err=True)

        # newline="" hands '\r' and '\r\n' to the scanner untranslated
        with open(input_file, encoding=config.encoding, newline="") as f:
            for token in iter_tokens(Scanner(f)):
                token_count += 1

                if token.is_illegal():
                    illegal_count += 1
                    logger.info(f"{input_file}:{token.position}: illegal token {token.attribute!r}")
                    if config.strict:
                        raise illegal_token_error(token, input_file, config.encoding)

                if skip_newlines and token.is_type(TokenType.NEWLINE):
                    continue
                lines.append(format_token(token))

        result = "\n".join(lines) + "\n"

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        if verbose:
            click.echo(f"Tokens: {token_count} ({illegal_count} illegal)", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
