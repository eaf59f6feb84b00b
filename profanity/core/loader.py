# profanity/core/loader.py

"""Loader for the built-in profanity lexicons."""

import yaml
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from profanity.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = Path(__file__).parent / "lexicons.yaml"


class LexiconLoader:
    """Loads the built-in word sources declared in a YAML manifest.

    Each manifest is read once and cached for the application lifecycle,
    one loader per manifest path. Loaded word lists are treated as
    immutable static data.
    """

    _instances: Dict[Path, "LexiconLoader"] = {}
    _lock = threading.Lock()

    def __init__(self, manifest_path: Optional[Path] = None) -> None:
        self.manifest_path = Path(manifest_path or DEFAULT_MANIFEST)
        self._config: Dict[str, Any] = {}
        self._sources: List[Tuple[str, Tuple[str, ...]]] = []
        self._load_config()

    def _load_config(self) -> None:
        """Loads the manifest and every word file it references.

        Raises:
            ConfigurationError: If a file is missing, invalid, or empty.
        """
        try:
            if not self.manifest_path.exists():
                error_msg = f"Lexicon manifest not found: {self.manifest_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(self.manifest_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f)

            if not self._config:
                raise ConfigurationError("Lexicon manifest is empty or invalid")

            self._validate_config()

            base_dir = self.manifest_path.parent
            self._sources = [
                self._read_word_file(base_dir / entry["file"])
                for entry in self._config["sources"]
            ]

            logger.info(
                "Lexicons loaded successfully",
                extra={
                    "manifest_path": str(self.manifest_path),
                    "source_count": len(self._sources),
                    "word_count": sum(len(words) for _, words in self._sources),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse lexicon manifest: {e}") from e
        except Exception as e:
            if isinstance(e, ConfigurationError):
                raise
            logger.error(f"Lexicon loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load lexicons: {e}") from e

    def _validate_config(self) -> None:
        """Validates the manifest declares a list of sources with files.

        Raises:
            ConfigurationError: If the sources section is missing or malformed.
        """
        sources = self._config.get("sources") if isinstance(self._config, dict) else None

        if not isinstance(sources, list) or not sources:
            error_msg = "Lexicon manifest must declare a non-empty 'sources' list"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        malformed = [
            s for s in sources if not isinstance(s, dict) or not s.get("file")
        ]
        if malformed:
            error_msg = f"Lexicon sources without a 'file' entry: {malformed}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        names = [Path(s["file"]).name for s in sources]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"Duplicate lexicon source names: {names}")

    @staticmethod
    def _read_word_file(path: Path) -> Tuple[str, Tuple[str, ...]]:
        """Reads one word per line, skipping blanks and '#' comments."""
        if not path.exists():
            raise ConfigurationError(f"Lexicon file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            words = tuple(
                line.strip()
                for line in f
                if line.strip() and not line.lstrip().startswith("#")
            )

        if not words:
            raise ConfigurationError(f"Lexicon file has no words: {path}")

        return path.name, words

    @classmethod
    def get_instance(cls, manifest_path: Optional[Path] = None) -> "LexiconLoader":
        """Returns the loader for ``manifest_path`` (bundled manifest by default)."""
        key = Path(manifest_path or DEFAULT_MANIFEST).resolve()

        if key not in cls._instances:
            with cls._lock:
                if key not in cls._instances:
                    cls._instances[key] = cls(key)

        return cls._instances[key]

    def get_sources(self) -> List[Tuple[str, Tuple[str, ...]]]:
        """Returns ``(source_name, words)`` pairs in processing order."""
        return list(self._sources)

    def get_source_names(self) -> List[str]:
        """Returns built-in source names in processing order."""
        return [name for name, _ in self._sources]
