"""modeltime: period discretization for multi-era simulation calendars."""

__version__ = "0.1.0"

from modeltime.config.defaults import default_config as default_config
from modeltime.config.schema import ModeltimeConfig as ModeltimeConfig
from modeltime.core.modeltime import Modeltime as Modeltime
from modeltime.core.modeltime import PeriodLookup as PeriodLookup
from modeltime.utils.exceptions import ConfigError as ConfigError
from modeltime.utils.exceptions import ModeltimeError as ModeltimeError
from modeltime.utils.exceptions import UnknownYearError as UnknownYearError
