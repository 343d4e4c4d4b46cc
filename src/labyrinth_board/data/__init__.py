"""Set up the data."""

from pathlib import Path

from pydantic_yaml import parse_yaml_file_as

from .catalog import TileCatalog, YamlTileCatalog

__all__ = ["data_path", "base_catalog", "load_catalog"]

data_path = Path(__file__).parent


def load_catalog(path: Path) -> TileCatalog:
    """Load a tile catalog from a YAML file."""
    return parse_yaml_file_as(YamlTileCatalog, path).fix_catalog()


base_catalog = load_catalog(data_path / "tiles.yaml")
