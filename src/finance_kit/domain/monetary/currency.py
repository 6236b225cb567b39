import logging
from enum import Enum
from typing import Dict


logger = logging.getLogger(__name__)


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency with code, display symbol, precision, and metadata.

    `Money` treats a Currency as an opaque tag: it is copied by reference, compared
    by $code and read only when formatting or converting.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        symbol (str): Display symbol (e.g., "$", "kr."). Falls back to $code when empty.
        precision (int): Number of minor-unit digits shown when formatting (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
    """

    __slots__ = ("_code", "_symbol", "_precision", "_name", "_currency_type")

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(
        self,
        code: str,
        symbol: str,
        precision: int,
        name: str,
        currency_type: CurrencyType = CurrencyType.FIAT,
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").
            symbol (str): Display symbol. An empty string means "use $code".
            precision (int): Number of minor-unit digits (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $symbol is not a string or $currency_type is not CurrencyType instance.
        """
        # Raise: $code identifies the currency, so it cannot be blank
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"Cannot call `Currency.__init__` because $code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $symbol must be a string (empty is allowed)
        if not isinstance(symbol, str):
            raise TypeError(f"Cannot call `Currency.__init__` because $symbol must be a string, but provided value is: {symbol!r}")

        # Raise: $precision must be a plain int within supported range
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"Cannot call `Currency.__init__` because $precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot call `Currency.__init__` because $name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"Cannot call `Currency.__init__` because $currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._symbol = symbol.strip() or self._code
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def symbol(self) -> str:
        """Get the display symbol."""
        return self._symbol

    @property
    def precision(self) -> int:
        """Get the currency precision."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Currency.register` because $currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry:
            if not overwrite:
                raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")
            logger.debug(f"Replacing registered Currency with code '{currency.code}'")

        cls._registry[currency.code] = currency

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up (case-insensitive).

        Returns:
            Currency: The currency instance.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"Cannot call `Currency.from_str` because $code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[code]

    @property
    def is_fiat(self) -> bool:
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self._currency_type == CurrencyType.CRYPTO

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', '{self.symbol}', {self.precision}, '{self.name}', {self.currency_type})"
