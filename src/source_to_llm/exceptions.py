from typing import Optional

from .types import PathType


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    functionality is requested. The tiktoken package is an optional dependency that must be
    explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install source-to-llm with the 'token_counting' "
            "extra: 'pip install source-to-llm[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass


class ConfigError(Exception):
    """
    Exception raised when a configuration file cannot be loaded or fails validation.

    Unknown keys, values of the wrong type and unparsable documents all raise this error
    before any traversal starts.

    Attributes:
        path (Optional[str]): The configuration file involved, if any.

    Example:
        >>> error = ConfigError("Unknown configuration key 'ignore'", path="stl.config.yaml")
        >>> str(error)
        "stl.config.yaml: Unknown configuration key 'ignore'"
        >>> str(ConfigError("bad value"))
        'bad value'
    """

    def __init__(self, message: str, path: Optional[PathType] = None) -> None:
        self.path = None if path is None else str(path)
        super().__init__(f"{self.path}: {message}" if self.path else message)
