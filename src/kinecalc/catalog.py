# -----------------------------------------------------------------------------
# Catalog loader & accessor
# Purpose: Parse the YAML catalog (families → recognized combinations) into
# typed FormulaSpec entries indexed by their sorted kind-set key.
# - Depends on .types for payloads and .formulas for the implementation table.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import yaml
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .errors import SolveError
from .formulas import REGISTRY
from .types import FormulaSpec, QuantityKind

# Domain-specific error to signal malformed catalog inputs, missing fields, etc.
class CatalogError(Exception): pass

log = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("formulas.yaml")

# Failure kinds a `supported: false` entry may declare
UNSUPPORTED_ERRORS = ("missing_quantity", "unsupported_combination")


@dataclass
class Family:
    # A group of combinations sharing input kinds and sizes (e.g. "linear").
    name: str
    sizes: Tuple[int, ...]
    kinds: frozenset
    formulas: Dict[Tuple[str, ...], FormulaSpec] = field(default_factory=dict)


def _parse_kinds(labels: Any, where: str) -> List[QuantityKind]:
    try:
        return [QuantityKind.parse(x) for x in (labels or [])]
    except SolveError as e:
        raise CatalogError(f"{where}: {e}") from e


@dataclass
class Catalog:
    families: Dict[str, Family]

    @staticmethod
    def from_yaml_dict(d: Dict[str, Any]) -> "Catalog":
        """
        Build a Catalog from a pre-parsed YAML dictionary.
        Expected shape:
          families:
            linear:
              sizes: [3]
              kinds: [acceleration, distance, ...]
              formulas:
                - id: atv1              # must be a key of formulas.REGISTRY
                  name: ...
                  given: [acceleration, time, velocityi]
                  produces: [distance, velocityf]
                  eq: ["distance = ...", "velocityf = ..."]
                - id: adt
                  given: [acceleration, distance, time]
                  supported: false
                  error: missing_quantity
                  message: "..."
        """
        if not isinstance(d, dict) or not d.get("families"):
            raise CatalogError("Catalog has no 'families' section.")
        families: Dict[str, Family] = {}
        for fam_name, fam in d["families"].items():
            fam = fam or {}
            try:
                sizes = tuple(int(n) for n in fam.get("sizes") or [])
            except (TypeError, ValueError) as e:
                raise CatalogError(f"Family '{fam_name}' has non-integer sizes: {fam.get('sizes')!r}") from e
            if not sizes:
                raise CatalogError(f"Family '{fam_name}' declares no sizes.")
            kinds = frozenset(_parse_kinds(fam.get("kinds"), f"family {fam_name}"))
            family = Family(name=fam_name, sizes=sizes, kinds=kinds)

            for fd in fam.get("formulas", []):
                if not isinstance(fd, dict):
                    raise CatalogError(f"Formula entry in family '{fam_name}' is not a mapping: {fd!r}")
                fid = fd.get("id")
                if not fid:
                    raise CatalogError(f"Formula without id in family '{fam_name}'.")
                given = tuple(sorted(_parse_kinds(fd.get("given"), fid), key=lambda k: k.value))
                if not set(given) <= kinds:
                    raise CatalogError(f"{fid}: given kinds outside family '{fam_name}'.")
                if len(given) not in sizes:
                    raise CatalogError(f"{fid}: expects {len(given)} quantities, family allows {sizes}.")
                supported = bool(fd.get("supported", True))
                error = fd.get("error")
                if supported and fid not in REGISTRY:
                    raise CatalogError(f"{fid}: no implementation registered.")
                if not supported and error not in UNSUPPORTED_ERRORS:
                    raise CatalogError(f"{fid}: unsupported entry needs error in {UNSUPPORTED_ERRORS}.")

                spec = FormulaSpec(
                    id=fid, family=fam_name, name=str(fd.get("name", fid)),
                    given=given,
                    produces=_parse_kinds(fd.get("produces"), fid),
                    eq=[str(e) for e in fd.get("eq", [])],
                    supported=supported, error=error,
                    message=str(fd.get("message", "")),
                )
                if spec.key in family.formulas:
                    raise CatalogError(
                        f"{fid}: kind-set {spec.key} already used by {family.formulas[spec.key].id}.")
                family.formulas[spec.key] = spec
            families[fam_name] = family
        return Catalog(families=families)

    @staticmethod
    def from_yaml_text(text: str) -> "Catalog":
        # yaml.safe_load: no arbitrary object constructors
        return Catalog.from_yaml_dict(yaml.safe_load(text))

    @staticmethod
    def from_file(path: str | Path) -> "Catalog":
        with open(path, "r", encoding="utf-8") as f:
            cat = Catalog.from_yaml_text(f.read())
        log.debug("Loaded catalog %s: %s", path,
                  {name: len(fam.formulas) for name, fam in cat.families.items()})
        return cat

    def family(self, name: str) -> Family:
        try:
            return self.families[name]
        except KeyError:
            raise CatalogError(f"Unknown family: {name}") from None

    def lookup(self, family: str, key: Tuple[str, ...]) -> FormulaSpec | None:
        return self.family(family).formulas.get(key)

    def list_formulas(self) -> List[Dict[str, Any]]:
        """
        Flattened, UI-friendly listing of every entry across families.
        """
        out = []
        for fam in self.families.values():
            for f in fam.formulas.values():
                out.append({
                    "id": f.id, "family": f.family, "name": f.name,
                    "given": list(f.key),
                    "produces": [k.value for k in f.produces],
                    "eq": f.eq, "supported": f.supported,
                })
        return out


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    return Catalog.from_file(DEFAULT_CATALOG_PATH)
