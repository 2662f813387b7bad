"""
Data structures for the CKD medication catalog.

Defines the immutable records loaded from the bundled medication dataset:
catalog entries, their brand names and their free-text search aliases.
Both the current JSON layout (arrays of objects) and the legacy layout
(comma-separated strings) are accepted by the ``from_dict`` constructors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from medsearch.catalog.errors import CatalogEntryError


class SearchIntent(Enum):
    """Which name form a search result should be displayed under."""
    BRAND = "brand"
    GENERIC = "generic"


class AliasType(Enum):
    """Whether an alias stands in for a brand name or for the generic name."""
    BRAND = "brand"
    GENERIC = "generic"


# Brand entries that exist in the source data but are not marketed products
PLACEHOLDER_BRAND_NAMES = frozenset({
    'generic',
    'generics',
    'various',
    'various generics',
    'compounded',
    'compounding pharmacy',
    'none',
    'n/a',
})

VALID_FORMS = frozenset({
    'tablet',
    'powder',
    'liquid',
    'capsule',
    'oral_solution',
    'gel',
    'transdermal',
})


def _optional_str(data: Mapping[str, Any], key: str) -> str:
    """Read a string field, treating a missing/null value as empty."""
    value = data.get(key)
    if value is None:
        return ''
    if isinstance(value, bool):
        raise CatalogEntryError(f"Field '{key}' must be a string, got bool")
    if isinstance(value, (int, float)):
        # strengths are sometimes written as bare numbers
        return str(value)
    if not isinstance(value, str):
        raise CatalogEntryError(
            f"Field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _split_legacy(text: str) -> List[str]:
    return [part.strip() for part in text.split(',') if part.strip()]


@dataclass(frozen=True)
class BrandName:
    """
    A commercial name a generic medication is marketed under.

    Attributes:
        name: Brand name as printed on the packaging
        primary: True for the most commonly used brand of the generic
        real: False for placeholder entries such as "Various generics"
    """
    name: str
    primary: bool = False
    real: bool = True

    @staticmethod
    def is_placeholder(name: str) -> bool:
        """Check whether a brand name is a placeholder rather than a product."""
        return name.strip().lower() in PLACEHOLDER_BRAND_NAMES

    @classmethod
    def from_string(cls, name: str, primary: bool = False) -> 'BrandName':
        """Build a brand from a legacy bare-string entry."""
        name = name.strip()
        return cls(name=name, primary=primary, real=bool(name) and not cls.is_placeholder(name))

    @classmethod
    def from_dict(cls, data: Any) -> 'BrandName':
        if not isinstance(data, Mapping):
            raise CatalogEntryError(f"Brand must be an object, got {type(data).__name__}")

        name = _optional_str(data, 'name').strip()
        real = data.get('real')
        if real is None:
            real = bool(name) and not cls.is_placeholder(name)

        return cls(name=name, primary=bool(data.get('primary', False)), real=bool(real))

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'primary': self.primary, 'real': self.real}


@dataclass(frozen=True)
class SearchAlias:
    """An informal name, misspelling or regional name for a medication."""
    text: str
    type: AliasType = AliasType.GENERIC

    @classmethod
    def from_string(cls, text: str) -> 'SearchAlias':
        """Legacy aliases carry no type information and count as generic."""
        return cls(text=text.strip(), type=AliasType.GENERIC)

    @classmethod
    def from_dict(cls, data: Any) -> 'SearchAlias':
        if not isinstance(data, Mapping):
            raise CatalogEntryError(f"Alias must be an object, got {type(data).__name__}")

        raw_type = data.get('type', AliasType.GENERIC.value)
        try:
            alias_type = AliasType(str(raw_type).lower())
        except ValueError:
            raise CatalogEntryError(
                f"Alias type must be 'brand' or 'generic', got {raw_type!r}"
            ) from None

        return cls(text=_optional_str(data, 'text').strip(), type=alias_type)

    def to_dict(self) -> Dict[str, str]:
        return {'text': self.text, 'type': self.type.value}


@dataclass(frozen=True)
class MedicationCatalogEntry:
    """
    One canonical medication from the CKD medication dataset.

    Entries are loaded once at start-up and never mutated afterwards.

    Attributes:
        name: Generic (non-proprietary) name, e.g. "Benazepril"
        form: Dosage form, e.g. "tablet", "transdermal"
        strength: Numeric strength as text, or "variable"
        unit: Strength unit, e.g. "mg", "mg/mL"
        route: Administration route, e.g. "oral"
        category: Therapeutic category, e.g. "ACE_inhibitor"
        brand_names: Brands in dataset order
        search_aliases: Optional extra names used only for matching
    """
    name: str
    form: str = ''
    strength: str = ''
    unit: str = ''
    route: str = ''
    category: str = ''
    brand_names: Tuple[BrandName, ...] = field(default_factory=tuple)
    search_aliases: Optional[Tuple[SearchAlias, ...]] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'MedicationCatalogEntry':
        """
        Parse one dataset record.

        Args:
            data: Decoded JSON object for a single medication

        Returns:
            MedicationCatalogEntry (not yet validated, see ``validate``)

        Raises:
            CatalogEntryError: If the record is not an object or one of its
                fields has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise CatalogEntryError(f"Entry must be an object, got {type(data).__name__}")

        return cls(
            name=_optional_str(data, 'name').strip(),
            form=_optional_str(data, 'form').strip(),
            strength=_optional_str(data, 'strength').strip(),
            unit=_optional_str(data, 'unit').strip(),
            route=_optional_str(data, 'route').strip(),
            category=_optional_str(data, 'category').strip(),
            brand_names=cls._parse_brand_names(data.get('brand_names')),
            search_aliases=cls._parse_search_aliases(data.get('search_aliases')),
        )

    @staticmethod
    def _parse_brand_names(brand_data: Any) -> Tuple[BrandName, ...]:
        if brand_data is None:
            return ()

        if isinstance(brand_data, str):
            # Legacy format: "Cerenia" or "Cerenia, Prevomax"; first is primary
            return tuple(
                BrandName.from_string(name, primary=index == 0)
                for index, name in enumerate(_split_legacy(brand_data))
            )

        if isinstance(brand_data, list):
            return tuple(BrandName.from_dict(item) for item in brand_data)

        raise CatalogEntryError(
            f"brand_names must be a string or a list, got {type(brand_data).__name__}"
        )

    @staticmethod
    def _parse_search_aliases(alias_data: Any) -> Optional[Tuple[SearchAlias, ...]]:
        if alias_data is None:
            return None

        if isinstance(alias_data, str):
            aliases = _split_legacy(alias_data)
            return tuple(SearchAlias.from_string(text) for text in aliases) or None

        if isinstance(alias_data, list):
            return tuple(SearchAlias.from_dict(item) for item in alias_data)

        raise CatalogEntryError(
            f"search_aliases must be a string or a list, got {type(alias_data).__name__}"
        )

    @property
    def real_brands(self) -> Tuple[BrandName, ...]:
        """Brands that are genuine marketed products."""
        return tuple(brand for brand in self.brand_names if brand.real)

    @property
    def has_real_brands(self) -> bool:
        return any(brand.real for brand in self.brand_names)

    @property
    def primary_brand_name(self) -> Optional[str]:
        """Primary real brand, else the first real brand, else None."""
        real = self.real_brands
        for brand in real:
            if brand.primary:
                return brand.name
        return real[0].name if real else None

    @property
    def has_variable_strength(self) -> bool:
        return self.strength.lower() == 'variable'

    @property
    def searchable_text(self) -> str:
        """Lower-cased generic name, brand names and aliases joined by spaces."""
        parts = [self.name]
        parts.extend(brand.name for brand in self.brand_names)
        parts.extend(alias.text for alias in self.search_aliases or ())
        return ' '.join(part.lower() for part in parts if part).strip()

    def _details(self) -> str:
        if self.has_variable_strength:
            return self.form
        return f"{self.strength}{self.unit} {self.form}".strip()

    def get_display_name(self, intent: SearchIntent, matched_brand: Optional[str] = None) -> str:
        """
        Format the entry for display under the given intent.

        Examples:
            brand intent:   "Cerenia (Maropitant) 16mg tablet"
            generic intent: "Maropitant 16mg tablet"
        """
        details = self._details()

        if intent is SearchIntent.BRAND:
            brand = matched_brand or self.primary_brand_name
            if brand and brand.lower() != self.name.lower():
                return f"{brand} ({self.name}) {details}".strip()

        return f"{self.name} {details}".strip()

    @property
    def display_name(self) -> str:
        return self.get_display_name(SearchIntent.GENERIC)

    def validate(self) -> List[str]:
        """
        Validate this entry.

        ``name``, ``form``, ``strength`` and ``unit`` are mandatory; the form
        must be a known dosage form and the strength numeric or "variable".

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.name:
            errors.append("Name is required")

        if not self.form:
            errors.append("Form is required")
        elif self.form.lower() not in VALID_FORMS:
            errors.append(f'Invalid form: "{self.form}"')

        if not self.strength:
            errors.append("Strength is required")
        elif not self.has_variable_strength:
            try:
                float(self.strength)
            except ValueError:
                errors.append(
                    f'Strength must be numeric or "variable", got "{self.strength}"'
                )

        if not self.unit:
            errors.append("Unit is required")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dataset's JSON layout."""
        data: Dict[str, Any] = {
            'name': self.name,
            'form': self.form,
            'strength': self.strength,
            'unit': self.unit,
            'route': self.route,
            'category': self.category,
            'brand_names': [brand.to_dict() for brand in self.brand_names],
        }
        if self.search_aliases is not None:
            data['search_aliases'] = [alias.to_dict() for alias in self.search_aliases]
        return data
