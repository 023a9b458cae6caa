"""Settings Validator: проверка сохранённых настроек кошелька"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from ecash_validation.core.domain.currency import DEFAULT_CURRENCY, CurrencyConfig
from ecash_validation.core.domain.settings import CashtabSettings

logger = logging.getLogger(__name__)


def is_valid_cashtab_settings(
    settings: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> bool:
    """True если запись содержит ровно fiatCurrency из списка поддерживаемых валют."""
    if not isinstance(settings, Mapping):
        return False

    try:
        CashtabSettings.model_validate(dict(settings), context={"currency": currency})
    except ValidationError as e:
        logger.debug("Settings rejected: %s", e.errors(include_url=False))
        return False
    return True
