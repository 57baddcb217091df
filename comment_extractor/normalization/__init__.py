from comment_extractor.normalization.models import Comment
from comment_extractor.normalization.normalizer import ResponseNormalizer

__all__ = ["Comment", "ResponseNormalizer"]
