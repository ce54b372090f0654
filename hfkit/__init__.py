"""HuggingFace Hub download helpers, cache layout utilities, repository info and tokenizer configuration parsing."""

__version__ = "0.0.0.dev0"