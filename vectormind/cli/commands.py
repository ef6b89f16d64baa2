import logging
import sys
from pathlib import Path

from ..config import load_config
from ..core.vector_service import VectorService, split_document
from ..embedding.embedder import Embedder
from ..exceptions import VectorMindError
from ..logger import setup_logging
from ..storage.redis_client import RedisVectorStore
from .display import ChunkStatistics, ChunkPrinter, IngestOutputFormatter, SearchResultsDisplay

logger = logging.getLogger(__name__)


def read_document(file_path: str) -> str:
    """
    Read a text or markdown document

    Args:
        file_path: Path to the document

    Returns:
        File content as string
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def strategy_options(args, config) -> dict:
    """Collect the strategy options, falling back to the chunking config"""
    options = {}
    if args.strategy == "fixed":
        options["chunk_size"] = args.chunk_size if args.chunk_size is not None else config.chunking.chunk_size
        options["overlap"] = args.overlap if args.overlap is not None else config.chunking.overlap
    elif args.strategy == "delimiter":
        options["delimiter"] = args.delimiter
    return options


class SplitCommand:
    """Split a document locally and print the chunks, no backend required"""

    def __init__(self, args):
        self.args = args
        self.printer = ChunkPrinter()
        self.stats_printer = ChunkStatistics()

    def execute(self) -> int:
        try:
            config = load_config(self.args.config)
            setup_logging(config.log_level)

            size_limit = self.args.size_limit if self.args.size_limit is not None else config.embedding.dimension
            content = read_document(self.args.input)

            options = strategy_options(self.args, config)
            if self.args.strategy == "delimiter":
                options["header_lines"] = config.chunking.delimiter_header_lines

            chunks = split_document(self.args.strategy, content, size_limit, **options)

            if not self.args.stats_only:
                self.printer.print_chunks(chunks)
            self.stats_printer.print_statistics(chunks, size_limit)
            return 0

        except FileNotFoundError as e:
            logger.error(f"File not found: {e}")
            print(f"\n✗ Error: File not found - {e}", file=sys.stderr)
            return 1
        except (VectorMindError, ValueError) as e:
            print(f"\n✗ Error: {e}", file=sys.stderr)
            return 1


class IngestCommand:
    """Split a document, embed every chunk and store it in Redis"""

    def __init__(self, args):
        self.args = args
        self.output_formatter = IngestOutputFormatter()

    async def execute(self) -> int:
        """
        Execute the ingest command

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        store = None
        embedder = None
        try:
            config = load_config(self.args.config)
            setup_logging(config.log_level)

            logger.info("[1/3] Reading document...")
            content = read_document(self.args.input)

            logger.info("[2/3] Connecting to embedding backend and Redis...")
            embedder = Embedder(config.embedding)
            store = RedisVectorStore(config.redis, config.embedding.dimension)
            await store.connect()
            await store.initialize()
            service = VectorService(config, embedder, store)

            logger.info(f"[3/3] Splitting with strategy '{self.args.strategy}' and storing...")
            chunks = service.split_document(self.args.strategy, content, **strategy_options(self.args, config))
            result = await service.store_chunks(chunks, self.args.label, self.args.metadata)

            self.output_formatter.print_completion(
                config.redis.index_name,
                self.args.strategy,
                result,
                config.embedding.dimension,
            )
            return 0

        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            print("\n✗ Process interrupted by user", file=sys.stderr)
            return 130
        except FileNotFoundError as e:
            logger.error(f"File not found: {e}")
            print(f"\n✗ Error: File not found - {e}", file=sys.stderr)
            return 1
        except (VectorMindError, ValueError) as e:
            logger.error(f"Ingestion failed: {e}")
            print(f"\n✗ Error: {e}", file=sys.stderr)
            return 1
        finally:
            if store:
                await store.close()
            if embedder:
                await embedder.close()


class SearchCommand:
    """Run a similarity search and print the results"""

    def __init__(self, args):
        self.args = args
        self.results_display = SearchResultsDisplay()

    async def execute(self) -> int:
        store = None
        embedder = None
        try:
            config = load_config(self.args.config)
            setup_logging(config.log_level)

            logger.info(f"Searching for: '{self.args.query}'")
            embedder = Embedder(config.embedding)
            store = RedisVectorStore(config.redis, config.embedding.dimension)
            await store.connect()
            service = VectorService(config, embedder, store)

            results = await service.similarity_search(
                self.args.query,
                max_count=self.args.max_count,
                distance_threshold=self.args.distance_threshold,
                label=self.args.label,
            )
            self.results_display.display_results(self.args.query, results)
            return 0

        except (VectorMindError, ValueError) as e:
            logger.error(f"Search failed: {e}")
            print(f"\n✗ Error: {e}", file=sys.stderr)
            return 1
        finally:
            if store:
                await store.close()
            if embedder:
                await embedder.close()


class ServeCommand:
    """Run the REST API server"""

    def __init__(self, args):
        self.args = args

    def execute(self) -> int:
        from ..server.server import run

        config = load_config(self.args.config)
        setup_logging(config.log_level)
        run(config, host=self.args.host, port=self.args.port)
        return 0


class McpCommand:
    """Run the MCP server"""

    def __init__(self, args):
        self.args = args

    def execute(self) -> int:
        from ..mcp.server import run_mcp

        try:
            config = load_config(self.args.config)
            # stdio transport speaks the protocol on stdout
            setup_logging(config.log_level, stream=sys.stderr if self.args.transport == "stdio" else None)
            run_mcp(config, transport=self.args.transport, host=self.args.host, port=self.args.port)
            return 0

        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            return 130
        except (VectorMindError, ValueError) as e:
            logger.error(f"MCP server failed: {e}")
            print(f"\n✗ Error: {e}", file=sys.stderr)
            return 1
