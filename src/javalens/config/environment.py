"""
Environment Variable Handling.

Loads a .env file into os.environ using python-dotenv so that
JAVALENS_* overrides can be kept next to a project.
"""

from pathlib import Path

from dotenv import load_dotenv

# Track whether dotenv has been loaded
_dotenv_loaded: bool = False


def load_environment(env_file: str = ".env") -> bool:
    """Load the .env file into os.environ once per process.

    Values already present in the environment take precedence.

    Args:
        env_file: Path to .env file (relative or absolute)

    Returns:
        True if a .env file was loaded, False otherwise
    """
    global _dotenv_loaded

    if _dotenv_loaded:
        return True

    _dotenv_loaded = True
    for env_path in (Path(env_file), Path.cwd() / env_file):
        if env_path.is_file():
            load_dotenv(env_path, override=False)
            return True

    # No .env file found, that's okay - use defaults
    return False


def reset_environment() -> None:
    """Forget that the .env file was loaded. Useful for testing."""
    global _dotenv_loaded
    _dotenv_loaded = False
