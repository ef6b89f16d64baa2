import argparse
import asyncio
import sys

from ..splitters import SplitterFactory
from .commands import SplitCommand, IngestCommand, SearchCommand, ServeCommand, McpCommand


def _add_strategy_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to input document'
    )
    parser.add_argument(
        '--strategy', '-s',
        choices=SplitterFactory.supported_strategies(),
        default='markdown_sections',
        help='Split strategy (default: markdown_sections)'
    )
    parser.add_argument(
        '--chunk-size',
        type=int,
        help='Window size for the fixed strategy (default from config)'
    )
    parser.add_argument(
        '--overlap',
        type=int,
        help='Window overlap for the fixed strategy (default from config)'
    )
    parser.add_argument(
        '--delimiter',
        help='Literal separator for the delimiter strategy'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vectormind',
        description='Split documents, store their embeddings in Redis and search them',
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        '--config', '-c',
        help='Path to YAML config file (environment variables override it)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    split_parser = subparsers.add_parser('split', help='Split a document and print the chunks')
    _add_strategy_arguments(split_parser)
    split_parser.add_argument(
        '--size-limit',
        type=int,
        help='Maximum chunk size (defaults to the embedding dimension)'
    )
    split_parser.add_argument(
        '--stats-only',
        action='store_true',
        help='Only print chunk statistics'
    )

    ingest_parser = subparsers.add_parser('ingest', help='Split a document and store its chunks')
    _add_strategy_arguments(ingest_parser)
    ingest_parser.add_argument('--label', default='', help='Label applied to every chunk')
    ingest_parser.add_argument('--metadata', default='', help='Metadata applied to every chunk')

    search_parser = subparsers.add_parser('search', help='Similarity search')
    search_parser.add_argument('--query', '-q', required=True, help='Query text')
    search_parser.add_argument('--label', help='Only search documents with this label')
    search_parser.add_argument('--max-count', type=int, help='Maximum number of results')
    search_parser.add_argument(
        '--distance-threshold',
        type=float,
        help='Drop results farther than this distance'
    )

    serve_parser = subparsers.add_parser('serve', help='Run the REST API server')
    serve_parser.add_argument('--host', help='Bind address (default from config)')
    serve_parser.add_argument('--port', type=int, help='Port (default from config)')

    mcp_parser = subparsers.add_parser('mcp', help='Run the MCP server')
    mcp_parser.add_argument(
        '--transport',
        choices=['streamable-http', 'stdio'],
        default='streamable-http',
        help='MCP transport (default: streamable-http)'
    )
    mcp_parser.add_argument('--host', help='Bind address for streamable-http (default from config)')
    mcp_parser.add_argument('--port', type=int, help='Port for streamable-http (default from config mcp_port)')

    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.command == 'split':
        return SplitCommand(args).execute()
    if args.command == 'ingest':
        return asyncio.run(IngestCommand(args).execute())
    if args.command == 'search':
        return asyncio.run(SearchCommand(args).execute())
    if args.command == 'mcp':
        return McpCommand(args).execute()
    return ServeCommand(args).execute()


if __name__ == '__main__':
    sys.exit(main())
