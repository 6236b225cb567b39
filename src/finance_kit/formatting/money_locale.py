from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoneyLocale:
    """Number and currency layout conventions of one locale.

    Attributes:
        identifier (str): Locale identifier in `language_REGION` form (e.g., "en_US").
        decimal_separator (str): Separator between integer and fractional digits.
        grouping_separator (str): Separator between digit groups of the integer part.
        grouping_size (int): Number of digits per group (0 disables grouping).
        symbol_first (bool): True if the currency symbol precedes the number.
        symbol_spacing (bool): True if a space separates the symbol from the number.
        negative_sign (str): Sign placed in front of negative amounts (before the symbol).
    """

    identifier: str
    decimal_separator: str
    grouping_separator: str
    grouping_size: int = 3
    symbol_first: bool = True
    symbol_spacing: bool = False
    negative_sign: str = "-"

    _registry: ClassVar[Dict[str, "MoneyLocale"]] = {}

    def __post_init__(self) -> None:
        # Raise: identifier is the registry key
        if not isinstance(self.identifier, str) or not self.identifier.strip():
            raise ValueError(f"Cannot create `MoneyLocale` because $identifier must be a non-empty string, but provided value is: '{self.identifier}'")

        # Raise: separators must differ, otherwise formatted numbers are ambiguous
        if self.decimal_separator == self.grouping_separator:
            raise ValueError(f"Cannot create `MoneyLocale` '{self.identifier}' because $decimal_separator and $grouping_separator are both '{self.decimal_separator}'")

        if self.grouping_size < 0:
            raise ValueError(f"Cannot create `MoneyLocale` '{self.identifier}' because $grouping_size ({self.grouping_size}) < 0")

    @staticmethod
    def normalize_identifier(identifier: str) -> str:
        """Normalize "en-us" / "en_US" / " EN_us " to "en_US"."""
        parts = identifier.strip().replace("-", "_").split("_")
        if len(parts) == 1:
            return parts[0].lower()
        return f"{parts[0].lower()}_{parts[1].upper()}"

    @classmethod
    def register(cls, locale: "MoneyLocale", overwrite: bool = False) -> None:
        """Register $locale under its normalized identifier.

        Raises:
            ValueError: If the identifier is already registered and $overwrite is False.
        """
        key = cls.normalize_identifier(locale.identifier)
        if key in cls._registry:
            if not overwrite:
                raise ValueError(f"MoneyLocale with identifier '{key}' already exists in registry. Use overwrite=True to replace it.")
            logger.debug(f"Replacing registered MoneyLocale with identifier '{key}'")
        cls._registry[key] = locale

    @classmethod
    def from_str(cls, identifier: str) -> "MoneyLocale":
        """Look up a registered locale.

        Raises:
            TypeError: If $identifier is not a string.
            ValueError: If no locale is registered under $identifier.
        """
        if not isinstance(identifier, str):
            raise TypeError(f"Cannot call `MoneyLocale.from_str` because $identifier must be a string, but provided value is: {identifier}")

        key = cls.normalize_identifier(identifier)
        if key not in cls._registry:
            raise ValueError(f"MoneyLocale with identifier '{key}' not found in registry. Available locales: {sorted(cls._registry.keys())}")
        return cls._registry[key]

    @classmethod
    def is_registered(cls, identifier: str) -> bool:
        return cls.normalize_identifier(identifier) in cls._registry


EN_US = MoneyLocale("en_US", ".", ",")
EN_GB = MoneyLocale("en_GB", ".", ",")
DE_DE = MoneyLocale("de_DE", ",", ".", symbol_first=False, symbol_spacing=True)
DE_CH = MoneyLocale("de_CH", ".", "\u2019", symbol_spacing=True)
FR_FR = MoneyLocale("fr_FR", ",", "\u202f", symbol_first=False, symbol_spacing=True)
DA_DK = MoneyLocale("da_DK", ",", ".", symbol_first=False, symbol_spacing=True)
SV_SE = MoneyLocale("sv_SE", ",", "\u00a0", symbol_first=False, symbol_spacing=True)
JA_JP = MoneyLocale("ja_JP", ".", ",")

for _locale in (EN_US, EN_GB, DE_DE, DE_CH, FR_FR, DA_DK, SV_SE, JA_JP):
    MoneyLocale.register(_locale, overwrite=True)
