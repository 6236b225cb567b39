from finance_kit.domain.monetary.currency import Currency, CurrencyType


# Fiat currencies
USD = Currency("USD", "$", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", "€", 2, "Euro", CurrencyType.FIAT)
GBP = Currency("GBP", "£", 2, "British Pound", CurrencyType.FIAT)
JPY = Currency("JPY", "¥", 0, "Japanese Yen", CurrencyType.FIAT)
CHF = Currency("CHF", "CHF", 2, "Swiss Franc", CurrencyType.FIAT)
DKK = Currency("DKK", "kr.", 2, "Danish Krone", CurrencyType.FIAT)
SEK = Currency("SEK", "kr", 2, "Swedish Krona", CurrencyType.FIAT)

# Crypto currencies
BTC = Currency("BTC", "₿", 8, "Bitcoin", CurrencyType.CRYPTO)

# Register all predefined currencies
Currency.register(USD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(GBP, overwrite=True)
Currency.register(JPY, overwrite=True)
Currency.register(CHF, overwrite=True)
Currency.register(DKK, overwrite=True)
Currency.register(SEK, overwrite=True)
Currency.register(BTC, overwrite=True)
