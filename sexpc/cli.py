"""
sexpc-lex: print the tokens of a sexpc source file.

Usage:
    sexpc-lex program.sx
    sexpc-lex --single-pass-trivia --verbose program.sx

Exit status is 0 when the whole file tokenizes, 1 when the file cannot be
read or contains something the lexer rejects.
"""

import argparse
import logging
import sys
from typing import List, Optional

from sexpc import __version__
from sexpc.config import LexerConfig
from sexpc.lexer import Lexer, TokenType

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexpc-lex",
        description="Tokenize a sexpc source file and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sexpc-lex program.sx                       # Print every token
  sexpc-lex --single-pass-trivia program.sx  # Skip trivia once per token
        """
    )
    parser.add_argument('source_file', help='Path of the file to tokenize')
    parser.add_argument('--single-pass-trivia', action='store_true',
                        help='Skip whitespace and comments only once per token')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log lexer diagnostics')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def run(source: str, filename: str, config: LexerConfig) -> int:
    """Print the tokens of `source`; return the process exit status."""
    lexer = Lexer(source, filename, config)

    print("Tokens:")
    while True:
        token = lexer.next_token()

        if token is None:
            error = lexer.last_error
            print("Lexer error: unexpected character, unable to tokenize", file=sys.stderr)
            if error is not None:
                logger.debug("%s", error)
                if error.char is not None:
                    print(f"Unexpected character: {error.char} on position {error.location.offset}")
            return 1

        if token.type == TokenType.EOF:
            print("(end of input)")
            return 0

        print(token)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sexpc-lex"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    config = LexerConfig(single_pass_trivia=args.single_pass_trivia)

    try:
        with open(args.source_file, 'r', encoding='utf-8', newline='') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Reading %s failed: %s", args.source_file, e)
        print(f"Error reading file: {args.source_file}", file=sys.stderr)
        return 1

    return run(source, args.source_file, config)


if __name__ == "__main__":
    sys.exit(main())
