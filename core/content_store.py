"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/content_store.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Read-only access to the flat content directory. Resolves slugs
                to files, parses YAML front-matter into the metadata schema
                and enumerates all available items. Every call re-reads
                from disk.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

import frontmatter
import yaml
from pydantic import ValidationError

from core.logger import get_logger
from core.models.content import ContentItem, ContentMetadata

logger = get_logger("content")

DEFAULT_EXTENSIONS = (".mdx", ".md")


class ContentStore:
    """
    Loads content items from a directory of '<slug><ext>' files.
    A missing directory or file is a normal 'not found' outcome.
    """

    def __init__(self, base_path: Union[str, Path] = "content",
                 extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        """
        Initializes the ContentStore.

        Args:
            base_path: The directory holding the content files.
            extensions: Recognized file extensions in lookup order.
        """
        self.base_path: Path = Path(base_path).absolute()
        self.extensions = tuple(
            (e if e.startswith(".") else f".{e}").lower() for e in extensions
        )

    def list_slugs(self) -> Set[str]:
        """
        Enumerates all content identifiers in the directory.

        Returns:
            The set of slugs; empty if the directory does not exist.
        """
        if not self.base_path.is_dir():
            return set()

        slugs = set()
        for entry in self.base_path.iterdir():
            if not entry.is_file() or entry.name.startswith("."):
                continue
            if entry.suffix.lower() in self.extensions:
                slugs.add(entry.stem)
        return slugs

    def get_file_path(self, slug: str) -> Optional[Path]:
        """
        Resolves a slug to the backing file, trying each extension in order.

        Returns:
            The file path or None if no matching file exists.
        """
        if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
            return None
        if not self.base_path.is_dir():
            return None

        # Extensions match case-insensitively, the same rule list_slugs() uses
        candidates = sorted(
            entry for entry in self.base_path.iterdir()
            if entry.stem == slug and entry.is_file()
        )
        for ext in self.extensions:
            for entry in candidates:
                if entry.suffix.lower() == ext:
                    return entry
        return None

    def get_by_slug(self, slug: str) -> Optional[ContentItem]:
        """
        Loads and parses one content item.

        Args:
            slug: The identifier derived from the filename.

        Returns:
            The ContentItem, or None if the file is absent or malformed.
        """
        path = self.get_file_path(slug)
        if path is None:
            return None

        try:
            text = path.read_text(encoding="utf-8-sig")
            post = frontmatter.loads(text)
            metadata = ContentMetadata.model_validate(dict(post.metadata))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading content for slug {slug}: {e}")
            return None
        except (yaml.YAMLError, ValidationError, TypeError, ValueError) as e:
            logger.error(f"Error parsing front-matter for slug {slug} ({path.name}): {e}")
            return None

        return ContentItem(slug=slug, metadata=metadata, content=post.content)

    def list_all(self) -> List[ContentItem]:
        """
        Loads every available item, skipping the ones that fail to load.
        Items are returned in slug order.
        """
        items = []
        for slug in sorted(self.list_slugs()):
            item = self.get_by_slug(slug)
            if item is not None:
                items.append(item)
        return items
