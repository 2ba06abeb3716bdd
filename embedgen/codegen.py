#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path
from typing import Any, TypeAlias
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .errors import (
    EmbedError,
    MissingRequiredOption,
    NoInputFiles,
    OptionsAfterPositionalArgs,
    OutputFileUnwritable,
    UnrecognizedOption,
    UsageError,
)
from .formatting import comment_text, guard_name, hex_initializer
from .model import EmbeddedFileSet, EmbedOptions, load_file_set

ContextDict: TypeAlias = dict[str, Any]

# Setup Jinja2 environment
TEMPLATE_DIR = Path(__file__).parent / 'templates'
env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(['html', 'xml']),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters['hex'] = hex_initializer
env.filters['comment'] = comment_text


def render_template(template_name: str, context: ContextDict) -> str:
    return env.get_template(template_name).render(context)


def write_output(rendered: str, output_path: Path | str, kind: str) -> None:
    try:
        with Path(output_path).open('w', encoding='utf-8', errors='surrogateescape') as f:
            f.write(rendered)
    except OSError as e:
        raise OutputFileUnwritable(kind, str(output_path), e.strerror or str(e)) from e


def render_source(file_set: EmbeddedFileSet, function_name: str) -> str:
    """Name, data and size tables followed by the accessor definition."""
    return render_template('embed.c.jinja', {'files': file_set.files, 'function': function_name})


def render_header(header_path: str, function_name: str) -> str:
    context = {
        'guard': guard_name(header_path),
        'function': function_name,
    }
    return render_template('embed.h.jinja', context)


def generate(options: EmbedOptions) -> None:
    """
    Reads every input and renders both artifacts before writing anything,
    so an unreadable input leaves previous outputs untouched.
    """
    file_set = load_file_set(options.inputs, options.preserve_paths)
    if options.verbose:
        for input_file in file_set:
            print(f"Embedding {input_file.path} as '{input_file.key}' ({input_file.size} bytes)", file=sys.stderr)

    source_text = render_source(file_set, options.function)
    header_text = render_header(options.header, options.function) if options.header else None

    write_output(source_text, options.source, 'source')
    if options.verbose:
        print(f'Wrote {options.source}', file=sys.stderr)

    if header_text is None:
        print('Notice: Not producing a header file because --header was not provided', file=sys.stderr)
        return
    write_output(header_text, options.header, 'header')
    if options.verbose:
        print(f'Wrote {options.header}', file=sys.stderr)


class ArgumentParser(argparse.ArgumentParser):
    """Reports malformed command lines as UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='embedgen',
        description='Generates a C include and source file with embedded data '
                    'from a list of files to be included in a separate build step',
        allow_abbrev=False,
    )
    parser.add_argument('--function', metavar='<function name>',
                        help='The name of the function for retrieving embedded file data')
    parser.add_argument('--header', metavar='<output header file>', help='Header file to generate')
    parser.add_argument('--source', metavar='<source file>', help='Source file to generate')
    parser.add_argument('--preserve-paths', action='store_true',
                        help='When set, paths passed for files are preserved for retrieval by the retrieval function')
    parser.add_argument('--verbose', action='store_true', help='Report every embedded file on stderr')
    # REMAINDER keeps everything after the first input, flags included, so they can be rejected
    parser.add_argument('inputs', nargs=argparse.REMAINDER, metavar='<input files>', help='List of input files')
    return parser


def parse_options(parser: argparse.ArgumentParser, argv: list[str] | None = None) -> EmbedOptions:
    args, extras = parser.parse_known_args(argv)

    if extras:
        raise UnrecognizedOption(extras[0])
    if misplaced := next((arg for arg in args.inputs if arg.startswith('--')), None):
        raise OptionsAfterPositionalArgs(misplaced)
    if not args.source:
        raise MissingRequiredOption('--source', 'output source file')
    if not args.function:
        raise MissingRequiredOption('--function', 'file get function name')
    if not args.inputs:
        raise NoInputFiles()

    return EmbedOptions(
        source=args.source,
        function=args.function,
        inputs=tuple(args.inputs),
        header=args.header,
        preserve_paths=args.preserve_paths,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        options = parse_options(parser, argv)
        generate(options)
    except UsageError as e:
        print(f'{parser.prog}: error: {e}', file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    except EmbedError as e:
        print(f'{parser.prog}: error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
