from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from finance_kit.formatting.money_locale import MoneyLocale


logger = logging.getLogger(__name__)

# Environment variable naming the default formatting locale (e.g. "da_DK")
LOCALE_ENV_VAR = "FINANCE_KIT_LOCALE"
FALLBACK_LOCALE = "en_US"


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults for finance_kit.

    Attributes:
        default_locale (MoneyLocale): Locale used by formatters when the caller passes none.
    """

    default_locale: MoneyLocale


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment, reading a `.env` file first if present.

    Variables already set in the process environment win over `.env` entries.
    An unknown locale identifier falls back to `FALLBACK_LOCALE`.
    """
    load_dotenv()

    identifier = os.environ.get(LOCALE_ENV_VAR)
    if not identifier:
        logger.debug(f"${LOCALE_ENV_VAR} is not set; using default locale '{FALLBACK_LOCALE}'")
        return Settings(default_locale=MoneyLocale.from_str(FALLBACK_LOCALE))

    if not MoneyLocale.is_registered(identifier):
        logger.warning(f"${LOCALE_ENV_VAR} names unknown locale '{identifier}'; falling back to '{FALLBACK_LOCALE}'")
        return Settings(default_locale=MoneyLocale.from_str(FALLBACK_LOCALE))

    locale = MoneyLocale.from_str(identifier)
    logger.info(f"Using default locale '{locale.identifier}' from ${LOCALE_ENV_VAR}")
    return Settings(default_locale=locale)


def reload_settings() -> Settings:
    """Drop cached settings and load them again."""
    get_settings.cache_clear()
    return get_settings()
