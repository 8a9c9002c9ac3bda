"""
Named dataset sources.

A DatasetCatalog maps dataset names to loader callables. Callers create and
pass catalogs explicitly; each catalog caches the descriptors it has loaded.

Classes:
    DatasetCatalog: Registry of named dataset loaders
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from labelscope.data.dataset import MultiLabelDataset
from labelscope.exceptions import InvalidInput

logger = logging.getLogger(__name__)

Loader = Callable[[], MultiLabelDataset]


class DatasetCatalog:
    """
    Registry of named dataset loaders.

    Example:
        >>> catalog = DatasetCatalog()
        >>> catalog.register('toy', lambda: MultiLabelDataset.from_frame(df, label_amount=2))
        >>> catalog.load('toy').measures.num_labels
        2
    """

    def __init__(self, loaders: Optional[Dict[str, Loader]] = None):
        self._loaders: Dict[str, Loader] = {}
        self._cache: Dict[str, MultiLabelDataset] = {}
        for name, loader in (loaders or {}).items():
            self.register(name, loader)

    def register(self, name: str, loader: Loader, replace: bool = False) -> None:
        """
        Register a loader under a name.

        Raises:
            InvalidInput: If the name is taken and replace is False
        """
        if name in self._loaders and not replace:
            raise InvalidInput(f"Dataset '{name}' is already registered")
        self._loaders[name] = loader
        self._cache.pop(name, None)

    def names(self) -> List[str]:
        return list(self._loaders)

    def __contains__(self, name: object) -> bool:
        return name in self._loaders

    def __len__(self) -> int:
        return len(self._loaders)

    def load(self, name: str) -> MultiLabelDataset:
        """
        Load a dataset, reusing the descriptor if it was loaded before.

        Raises:
            InvalidInput: If no loader is registered under the name
        """
        if name not in self._loaders:
            raise InvalidInput(
                f"Unknown dataset '{name}'; available: {self.names()}"
            )
        if name not in self._cache:
            logger.info(f"Loading dataset '{name}'")
            self._cache[name] = self._loaders[name]()
        return self._cache[name]

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], base_dir: Optional[Union[str, Path]] = None
    ) -> "DatasetCatalog":
        """
        Build a catalog of CSV datasets from the 'datasets' configuration section.

        Each entry needs a ``path`` (relative paths are resolved against
        base_dir) and one label rule: ``label_indices``, ``label_names``,
        ``label_amount``, ``label_file`` or ``relation`` (a header with ``-C n``).

        Example config:
            datasets:
              emotions:
                path: data/emotions.csv
                label_amount: 6
        """
        base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        catalog = cls()

        for name, entry in (config.get("datasets") or {}).items():
            catalog.register(name, _csv_loader(name, entry, base_dir))

        return catalog


def _csv_loader(name: str, entry: Dict[str, Any], base_dir: Path) -> Loader:
    if "path" not in entry:
        raise InvalidInput(f"Dataset '{name}' has no 'path'")

    path = Path(entry["path"])
    if not path.is_absolute():
        path = base_dir / path

    options: Dict[str, Any] = {
        key: entry[key]
        for key in ("label_indices", "label_names", "label_amount")
        if key in entry
    }
    if "label_file" in entry:
        label_file = Path(entry["label_file"])
        options["label_file"] = label_file if label_file.is_absolute() else base_dir / label_file
    if "relation" in entry:
        options["header_hint"] = entry["relation"]

    return lambda: MultiLabelDataset.from_csv(path, name=name, **options)
