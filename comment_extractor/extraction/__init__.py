from comment_extractor.extraction.client_base import BaseVisionClient
from comment_extractor.extraction.factory import InvokerFactory
from comment_extractor.extraction.invoker import ModelInvoker

__all__ = ["BaseVisionClient", "InvokerFactory", "ModelInvoker"]
