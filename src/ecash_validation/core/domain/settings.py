"""
CashtabSettings — Модель пользовательских настроек кошелька

Immutable Pydantic модель. Запись настроек должна содержать ровно
ключ fiatCurrency со значением из списка поддерживаемых валют.
Лишние ключи отклоняются (extra="forbid").
"""

from pydantic import BaseModel, Field, StrictStr, ValidationInfo, field_validator

from ecash_validation.core.domain.currency import DEFAULT_CURRENCY, CurrencyConfig


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class CashtabSettings(BaseModel):
    """
    Модель настроек кошелька.

    Список допустимых валют берётся из CurrencyConfig, переданного
    через context при валидации: model_validate(data, context={"currency": cfg}).
    Без context используется DEFAULT_CURRENCY.
    """

    fiatCurrency: StrictStr = Field(..., description="Фиат-валюта для отображения (lowercase код)")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("fiatCurrency")
    @classmethod
    def validate_supported_currency(cls, v: str, info: ValidationInfo) -> str:
        """Проверка, что валюта входит в allow-list."""
        currency: CurrencyConfig = DEFAULT_CURRENCY
        if info.context and "currency" in info.context:
            currency = info.context["currency"]

        if v not in currency.fiat_currencies:
            raise ValueError(f"unsupported fiat currency {v!r}")
        return v
