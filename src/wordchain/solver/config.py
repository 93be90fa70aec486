"""Word chain solver configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the word chain solver.

    Each setting can be overridden by an environment variable with the `WORDCHAIN_` prefix,
    e.g. `WORDCHAIN_MAX_WORDS=22`.
    """

    max_words: int = Field(default=20, ge=0)
    """Largest number of words handed to the Hamiltonian path search. Default: 20.

    The search table holds n * 2**n cells, so each extra word doubles its memory use.
    Larger inputs raise `TooManyWordsError` before anything is allocated.
    """

    verbose: bool = False
    """Whether to print solve statistics to stderr. Default: False."""

    model_config = SettingsConfigDict(
        env_prefix="WORDCHAIN_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
