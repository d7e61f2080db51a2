"""
Command-line interface for the HTTP Signature Generator
Computes the signature header for a request described on the command line
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, List

from . import __version__
from .config import GenerateSignatureConfig, load_config_from_file
from .exceptions import ConfigurationError, SignatureGenerationError
from .signing import (
    HttpSignatureGenerator,
    SignableRequest,
    SignatureAlgorithm,
    SignatureScheme,
    HeaderMap,
    create_template_resolver,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='httpsig',
        description='Generate draft-cavage HTTP signatures for outgoing requests'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'HTTP Signature Generator {__version__}'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    setup_sign_parser(subparsers)
    subparsers.add_parser('algorithms', help='List supported signature algorithms')

    return parser


def setup_sign_parser(subparsers):
    """Setup sign subcommand."""
    sign_parser = subparsers.add_parser('sign', help='Generate the signature header for a request')
    sign_parser.add_argument('method', help='HTTP method of the request')
    sign_parser.add_argument('path', help='Request path, including the query string')
    sign_parser.add_argument(
        '-H', '--request-header',
        action='append',
        default=[],
        metavar='"NAME: VALUE"',
        help='Request header (repeatable)'
    )
    sign_parser.add_argument(
        '--config',
        help='JSON configuration file; command-line options override its values'
    )
    sign_parser.add_argument('--key-id', help='Key id expression')
    sign_parser.add_argument('--secret', help='Secret expression; ${NAME} reads environment variables')
    sign_parser.add_argument(
        '--algorithm',
        choices=[a.name for a in SignatureAlgorithm],
        help='Signature algorithm (default: HMAC_SHA256)'
    )
    sign_parser.add_argument(
        '--scheme',
        choices=[s.value for s in SignatureScheme],
        help='Header carrying the signature (default: AUTHORIZATION)'
    )
    sign_parser.add_argument(
        '--header',
        dest='headers',
        action='append',
        metavar='NAME',
        help='Header to sign (repeatable)'
    )
    sign_parser.add_argument('--no-created', action='store_true', help='Do not sign (created)')
    sign_parser.add_argument('--no-expires', action='store_true', help='Do not sign (expires)')
    sign_parser.add_argument('--validity', type=int, help='Signature validity in seconds (default: 3)')
    sign_parser.add_argument('--timestamp', type=int, help='Request time in Unix seconds (default: now)')
    sign_parser.add_argument(
        '--show-signing-string',
        action='store_true',
        help='Also print the signing string'
    )


def parse_request_headers(values: List[str]) -> HeaderMap:
    """Parse ``NAME: VALUE`` arguments into a header map."""
    headers = HeaderMap()
    for raw in values:
        name, separator, value = raw.partition(':')
        if not separator or not name.strip():
            raise ValueError(f"Invalid header '{raw}', expected 'NAME: VALUE'")
        headers.add(name.strip(), value.strip())
    return headers


def build_config(args) -> GenerateSignatureConfig:
    """Build the configuration from a file and command-line overrides."""
    overrides = {
        'key_id': args.key_id,
        'secret': args.secret,
        'algorithm': args.algorithm,
        'scheme': args.scheme,
        'headers': args.headers,
        'validity_duration': args.validity,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if args.no_created:
        overrides['created'] = False
    if args.no_expires:
        overrides['expires'] = False

    if args.config:
        return replace(load_config_from_file(args.config), **overrides)

    if 'key_id' not in overrides or 'secret' not in overrides:
        raise ConfigurationError("Key id and secret are required (use --key-id/--secret or --config)")

    return GenerateSignatureConfig(**overrides)


def handle_sign_command(args) -> int:
    """Handle signature generation."""
    try:
        config = build_config(args)
        headers = parse_request_headers(args.request_header)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    request = SignableRequest(
        method=args.method.upper(),
        path=args.path,
        headers=headers,
        timestamp=args.timestamp
    )

    generator = HttpSignatureGenerator(config, create_template_resolver())
    try:
        result = generator.generate(request)
    except SignatureGenerationError as e:
        print(f"Error ({e.failure.http_status} {e.failure.error_code}): {e.failure.message}", file=sys.stderr)
        return 1

    if args.show_signing_string:
        print("Signing string:")
        print(result.signing_string)
        print()

    print(f"{result.header_name}: {result.header_value}")
    return 0


def handle_algorithms_command(args) -> int:
    """Handle listing algorithms."""
    for algorithm in SignatureAlgorithm:
        print(f"{algorithm.name:<12} {algorithm.value}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        if args.command == 'sign':
            return handle_sign_command(args)
        elif args.command == 'algorithms':
            return handle_algorithms_command(args)
        else:
            # No command specified, show help
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
