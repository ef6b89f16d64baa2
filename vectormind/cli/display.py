from typing import List
import sys

from ..schema import SearchResult, IngestResult


class SearchResultsDisplay:
    """Handles terminal output formatting for search results"""
    
    max_display_length = 500
    
    def display_results(self, query: str, results: List[SearchResult], out=None):
        """
        Display search results to terminal
        
        Args:
            query: The search query
            results: Search results, closest first
            out: Stream to write to (defaults to stdout)
        """
        out = out or sys.stdout
        print(f"\n{'='*80}", file=out)
        print(f"Query: {query}", file=out)
        print(f"{'='*80}\n", file=out)
        
        if not results:
            print("No results found.", file=out)
            return
        
        print(f"Found {len(results)} results:\n", file=out)
        
        for i, result in enumerate(results, 1):
            self._display_result(i, result, out)
    
    def _display_result(self, index: int, result: SearchResult, out):
        """Display a single search result"""
        print(f"{'─'*80}", file=out)
        print(f"Result #{index} | Distance: {result.distance:.4f}", file=out)
        print(f"{'─'*80}", file=out)
        
        print(f"ID: {result.id}", file=out)
        print(f"Label: {result.label or 'N/A'}", file=out)
        print(f"Metadata: {result.metadata or 'N/A'}", file=out)
        print(f"Created: {result.created_at or 'N/A'}", file=out)
        print(file=out)
        
        # Truncated if too long
        content = result.content
        if len(content) > self.max_display_length:
            content = content[:self.max_display_length] + "..."
        
        print(content, file=out)
        print(file=out)


class ChunkStatistics:
    """Handles display of chunking statistics"""
    
    def print_statistics(self, chunks: List[str], size_limit: int, out=None):
        """
        Print statistics about generated chunks
        
        Args:
            chunks: Chunk texts
            size_limit: Size limit the chunks were produced for
        """
        if not chunks:
            return
        
        out = out or sys.stdout
        chunk_sizes = [len(chunk) for chunk in chunks]
        total_chars = sum(chunk_sizes)
        avg_size = total_chars / len(chunks)
        over_limit = sum(1 for size in chunk_sizes if size > size_limit)
        
        print(f"\n  Chunk Statistics:", file=out)
        print(f"    Total chunks: {len(chunks)}", file=out)
        print(f"    Total characters: {total_chars:,}", file=out)
        print(f"    Average chunk size: {avg_size:.0f} chars", file=out)
        print(f"    Min chunk size: {min(chunk_sizes)} chars", file=out)
        print(f"    Max chunk size: {max(chunk_sizes)} chars", file=out)
        print(f"    Over size limit ({size_limit}): {over_limit}", file=out)


class ChunkPrinter:
    """Prints chunks produced by the split command"""
    
    def print_chunks(self, chunks: List[str], out=None):
        out = out or sys.stdout
        for i, chunk in enumerate(chunks, 1):
            print(f"{'─'*80}", file=out)
            print(f"Chunk {i}/{len(chunks)} ({len(chunk)} chars)", file=out)
            print(f"{'─'*80}", file=out)
            print(chunk, file=out)
        print(file=out)


class IngestOutputFormatter:
    """Handles formatted output for the ingest command"""
    
    def print_completion(self, index_name: str, strategy: str, result: IngestResult, embedding_dim: int, out=None):
        """
        Print completion summary
        
        Args:
            index_name: Name of the Redis search index
            strategy: Split strategy used
            result: Stored chunk ids
            embedding_dim: Dimension of embeddings
        """
        out = out or sys.stdout
        print(f"\n{'='*80}", file=out)
        print("✓ INGESTION COMPLETE", file=out)
        print(f"{'='*80}", file=out)
        print(f"\nIndex: {index_name}", file=out)
        print(f"Strategy: {strategy}", file=out)
        print(f"Chunks Stored: {result.chunks_stored}", file=out)
        print(f"Embedding Dimension: {embedding_dim}", file=out)
        print(f"\n{'='*80}\n", file=out)
