"""Counter for tokens, lines, and characters in the generated documents.

Token counting uses OpenAI's tiktoken library, which is an optional dependency. Without
it, or without a model, only lines and characters are counted. Counts for models other
than the OpenAI ones are approximations obtained by borrowing a similar model's encoding
(for example gpt-4's cl100k_base).
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from source_to_llm.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


class TokenCounter:
    """Counter for tokens, lines, and characters in text content.

    Attributes:
        model (Optional[str]): Name of the model whose tokenizer to use, or None if token counting is disabled.
        tiktoken_available (bool): Whether the tiktoken library is available.
        encoder (Optional[Any]): The tiktoken encoder if available, else None.

    Example:
        >>> counter = TokenCounter()
        >>> result = counter.count("Hello\\nworld!")
        >>> result.lines, result.characters
        (1, 12)
        >>> print(result.tokens)
        None

    Raises:
        ValueError: If the specified model's tokenizer cannot be loaded.
        TokenizerNotAvailableError: If token counting is explicitly requested (by passing
            a model) but tiktoken is not installed.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.tiktoken_available = self._check_tiktoken()
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not self.tiktoken_available:
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder()

        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0

    def _check_tiktoken(self) -> bool:
        return importlib.util.find_spec("tiktoken") is not None

    def _get_encoder(self) -> Any:
        """Get the tiktoken encoder for the configured model.

        Raises:
            ValueError: If the specified model's tokenizer cannot be loaded.
        """
        # Imported lazily, tiktoken is optional
        import tiktoken

        try:
            return tiktoken.encoding_for_model(self.model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{self.model}'. Consider using a "
                "well-supported model like 'gpt-4' (cl100k_base encoding) for token counting. "
                "While token counts may not exactly match your target model, they can provide "
                "useful approximations."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens, and characters in text and add them to the running totals.

        Raises:
            TokenizationError: If token counting is enabled but fails.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        self._total_lines += lines
        self._total_characters += chars

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._total_tokens = (self._total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        """Total tokens counted so far, or None if token counting is disabled."""
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters
