"""Default rule catalog loader.

Rules live as data in one YAML document per category module. Each document
holds a top-level ``rules:`` list. Files load in the fixed order of
``CATEGORY_FILES`` so the catalog's registration order is deterministic.
"""

from pathlib import Path
from typing import Iterable, List, Union

import yaml

from s4migrate.rules.application.catalog import RuleCatalog
from s4migrate.rules.domain.models import Rule
from s4migrate.shared.domain.exceptions import CatalogLoadError
from s4migrate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

CATALOG_DIR = Path(__file__).parent / "catalog"

CATEGORY_FILES = [
    "finance.yaml",
    "finance_remediation.yaml",
    "controlling.yaml",
    "materials.yaml",
    "sales.yaml",
    "business_partner.yaml",
    "hr.yaml",
    "production.yaml",
    "plant_maintenance.yaml",
    "project_system.yaml",
    "quality.yaml",
    "abap.yaml",
    "enhancements.yaml",
    "data_model.yaml",
    "removed.yaml",
    "ewm.yaml",
    "plm.yaml",
    "configuration.yaml",
    "industry.yaml",
    "gts.yaml",
    "tables.yaml",
    "function_modules.yaml",
]


class DefaultRulesLoader:
    """Loads the packaged category files plus any extra rule files."""

    def __init__(self, catalog_dir: Path = CATALOG_DIR):
        self.catalog_dir = catalog_dir

    def load_file(self, file_path: Path) -> List[Rule]:
        """Load and compile every rule in one YAML file.

        Raises:
            CatalogLoadError: If the file is unreadable or any rule is malformed
        """
        try:
            with open(file_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogLoadError(f"Cannot read rule file {file_path}: {e}", context={"file": str(file_path)}) from e

        if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
            raise CatalogLoadError(f"Rule file {file_path} has no 'rules' list", context={"file": str(file_path)})

        for index, rule_data in enumerate(data["rules"]):
            if not isinstance(rule_data, dict):
                raise CatalogLoadError(
                    f"Rule #{index} in {file_path} is not a mapping", context={"file": str(file_path), "index": index}
                )

        rules = [Rule.from_json(rule_data) for rule_data in data["rules"]]
        logger.debug("rule_file_loaded", file=file_path.name, rule_count=len(rules))
        return rules

    def load_defaults(self) -> List[Rule]:
        """Load every packaged category file in catalog order."""
        rules: List[Rule] = []
        for name in CATEGORY_FILES:
            rules.extend(self.load_file(self.catalog_dir / name))
        return rules

    def build_catalog(self, extra_paths: Iterable[Union[str, Path]] = ()) -> RuleCatalog:
        """Build a catalog from the packaged files followed by ``extra_paths``."""
        catalog = RuleCatalog(self.load_defaults())
        for path in extra_paths:
            added = catalog.register_all(self.load_file(Path(path)))
            logger.info("extra_rules_loaded", file=str(path), added=added)

        logger.info("rule_catalog_loaded", total=len(catalog), modules=len(catalog.stats()["byModule"]))
        return catalog
