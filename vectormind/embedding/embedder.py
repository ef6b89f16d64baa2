from typing import Optional
import logging

import numpy as np
from openai import AsyncOpenAI, OpenAIError

from ..config import EmbeddingConfig
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)


class Embedder:
    """Generate embeddings through an OpenAI-compatible embeddings endpoint"""
    
    def __init__(self, config: EmbeddingConfig, client: Optional[AsyncOpenAI] = None):
        self.config = config
        self.client = client or AsyncOpenAI(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=config.timeout,
        )
        logger.info(f"Embedding model: {config.model_id} ({config.dimension} dims)")
        logger.info(f"  Endpoint: {config.base_url}")
    
    @property
    def model_id(self) -> str:
        return self.config.model_id
    
    @property
    def dimension(self) -> int:
        return self.config.dimension
    
    async def embed(self, text: str) -> np.ndarray:
        """
        Generate a float32 embedding for one text
        
        Args:
            text: Text to embed
            
        Returns:
            Vector of length `dimension`
            
        Raises:
            ProviderError: If the backend fails or returns an unexpected vector
        """
        try:
            response = await self.client.embeddings.create(
                model=self.config.model_id,
                input=text,
            )
        except OpenAIError as e:
            logger.error(f"Embedding request failed: {e}")
            raise ProviderError(f"Embedding request failed: {e}") from e
        
        if not response.data:
            raise ProviderError(f"Empty embedding response from model {self.config.model_id}")
        
        vector = np.asarray(response.data[0].embedding, dtype=np.float32)
        if vector.size != self.config.dimension:
            raise ProviderError(
                f"Unexpected embedding size {vector.size} != {self.config.dimension} "
                f"for model {self.config.model_id}"
            )
        
        return vector
    
    async def close(self):
        await self.client.close()
